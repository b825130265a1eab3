# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CredentialsFormDTO(BaseModel):
    login: str | None = None
    password: str | None = None

    model_config = ConfigDict(extra="ignore")


class CommentFormDTO(BaseModel):
    comment: str | None = None

    model_config = ConfigDict(extra="ignore")

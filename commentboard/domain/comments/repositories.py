# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from .entities import Comment


class CommentRepository(Protocol):
    def add(self, user_id: int, saved_on: datetime, text: str) -> Comment: ...
    def list_for_user(self, user_id: int) -> Sequence[Comment]: ...

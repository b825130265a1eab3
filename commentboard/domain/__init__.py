# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .comments.entities import Comment
from .users.entities import User

__all__ = ["Comment", "User"]

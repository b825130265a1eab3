# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from commentboard.domain.comments.repositories import CommentRepository
from commentboard.domain.users.repositories import PasswordHasher, UserRepository

__all__ = ["CommentRepository", "PasswordHasher", "UserRepository"]

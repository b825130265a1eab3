# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from commentboard.domain.comments.entities import Comment
from commentboard.domain.comments.repositories import CommentRepository
from commentboard.domain.users.entities import User


class ListCommentsUseCase:
    def __init__(self, *, comments: CommentRepository) -> None:
        self._comments = comments

    def execute(self, user: User) -> Sequence[Comment]:
        return self._comments.list_for_user(user.id)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from commentboard.domain.comments.entities import Comment
from commentboard.domain.comments.repositories import CommentRepository
from commentboard.domain.users.entities import User


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SaveCommentUseCase:
    def __init__(
        self,
        *,
        comments: CommentRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._comments = comments
        self._clock = clock

    def execute(self, user: User, text: str | None) -> Comment | None:
        # an absent field is not an error, nothing gets stored
        if text is None:
            return None
        return self._comments.add(user.id, self._clock(), text)

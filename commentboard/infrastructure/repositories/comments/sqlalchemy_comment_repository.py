# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from commentboard.domain.comments.entities import Comment as DomainComment
from commentboard.domain.comments.repositories import CommentRepository
from commentboard.infrastructure.db import Database
from commentboard.infrastructure.db.models import Comment


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _to_domain(row: Comment) -> DomainComment:
    return DomainComment(
        id=row.id,
        user_id=row.user_id,
        saved_on=_as_utc(row.saved_on),
        text=row.comment,
    )


class SqlAlchemyCommentRepository(CommentRepository):
    def __init__(self, database: Database) -> None:
        self._database = database

    def add(self, user_id: int, saved_on: datetime, text: str) -> DomainComment:
        with self._database.session_scope() as session:
            row = Comment(user_id=user_id, saved_on=saved_on.astimezone(UTC), comment=text)
            session.add(row)
            session.flush()
            return _to_domain(row)

    def list_for_user(self, user_id: int) -> Sequence[DomainComment]:
        with self._database.session_scope() as session:
            rows = (
                session.query(Comment)
                .filter(Comment.user_id == user_id)
                .order_by(Comment.id.asc())
                .all()
            )
            return [_to_domain(row) for row in rows]

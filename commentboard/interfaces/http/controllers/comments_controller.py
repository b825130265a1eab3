# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, redirect, render_template, request
from flask_login import login_required

from commentboard.application.use_cases.comments.list_comments import ListCommentsUseCase
from commentboard.application.use_cases.comments.save_comment import SaveCommentUseCase
from commentboard.domain.comments.entities import Comment
from commentboard.infrastructure.audit import AuditAction, audit_log
from commentboard.infrastructure.auth.session_manager import SessionAuthManager
from commentboard.interfaces.http.dto.forms import CommentFormDTO
from commentboard.shared.middleware.request_logger import get_client_ip

SAVED_ON_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def _comment_view(comment: Comment) -> dict[str, str]:
    return {
        "savedOn": comment.saved_on.strftime(SAVED_ON_FORMAT),
        "comment": comment.text,
    }


class CommentsController:
    def __init__(
        self,
        *,
        save_use_case: SaveCommentUseCase,
        list_use_case: ListCommentsUseCase,
        auth: SessionAuthManager,
    ) -> None:
        self._save_use_case = save_use_case
        self._list_use_case = list_use_case
        self._auth = auth

    def index(self):
        user = self._auth.current_user()
        comments = self._list_use_case.execute(user)
        return render_template("index.html", comments=[_comment_view(c) for c in comments])

    def save_comment(self):
        user = self._auth.current_user()
        dto = CommentFormDTO.model_validate(request.form.to_dict())
        saved = self._save_use_case.execute(user, dto.comment)
        if saved is not None:
            audit_log(
                AuditAction.COMMENT_SAVED,
                user_id=user.id,
                ip_address=get_client_ip(),
                details={"comment_id": saved.id},
            )
        return redirect("/")

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("comments", __name__)
        bp.add_url_rule("/", view_func=login_required(self.index), methods=["GET"])
        bp.add_url_rule(
            "/save_comment", view_func=login_required(self.save_comment), methods=["POST"]
        )
        return bp

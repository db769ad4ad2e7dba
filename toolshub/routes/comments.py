# toolshub/routes/comments.py

from flask import Blueprint, current_app

from toolshub.services.comment_service import CommentService

comments_bp = Blueprint("comments", __name__)


@comments_bp.route("", methods=["GET"])
def get_all_comments():
    comments = CommentService.list_all()
    return current_app.api_response.success(data=[c.to_dict() for c in comments])

# toolshub/services/comment_service.py

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from toolshub.errors import ValidationError
from toolshub.extensions import db
from toolshub.models.comment import Comment
from toolshub.models.tool import Tool
from toolshub.services.cache_service import CacheService, TOOLS_LISTING
from toolshub.utils.validators import CommentValidator

logger = logging.getLogger(__name__)


class CommentService:

    @staticmethod
    def list_for_tool(tool: Tool) -> List[Comment]:
        return (
            Comment.query.filter_by(tool_slug=tool.slug)
            .order_by(Comment.timestamp.asc())
            .all()
        )

    @staticmethod
    def list_all() -> List[Comment]:
        return Comment.query.order_by(Comment.timestamp.desc()).all()

    @staticmethod
    def add_comment(tool: Tool, data: dict) -> Comment:
        is_valid, errors = CommentValidator.validate(data)
        if not is_valid:
            raise ValidationError(errors)

        comment = Comment(tool_slug=tool.slug, name=data["name"], comment=data["comment"])

        try:
            db.session.add(comment)
            # Comments belong to the tool document, so the tool counts as modified
            tool.touch()
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.error(f"Comment creation failed for tool {tool.slug}", exc_info=True)
            raise

        CacheService().invalidate(TOOLS_LISTING)
        logger.info(f"Comment {comment.id} added to tool {tool.slug}")

        return comment

# toolshub/models/comment.py

import uuid
from datetime import datetime
from typing import Optional

from toolshub.extensions import db


class Comment(db.Model):
    __tablename__ = "comments"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    tool_slug = db.Column(
        db.String(120),
        db.ForeignKey("tools.slug", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = db.Column(db.String(100), nullable=False)
    comment = db.Column(db.Text, nullable=False)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    tool = db.relationship("Tool", back_populates="comments")

    def __init__(self, tool_slug: str, name: str, comment: str, timestamp: Optional[datetime] = None):
        self.tool_slug = tool_slug
        self.name = name.strip()
        self.comment = comment.strip()
        if timestamp is not None:
            self.timestamp = timestamp

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "toolSlug": self.tool_slug,
            "name": self.name,
            "comment": self.comment,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }

    def __repr__(self) -> str:
        return f"<Comment {self.id} on {self.tool_slug}>"

# toolshub/models/tool.py

import uuid
from datetime import datetime
from typing import List, Optional

from toolshub.extensions import db
from toolshub.utils.ranking import render_stars


class Tool(db.Model):
    __tablename__ = "tools"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    slug = db.Column(db.String(120), unique=True, nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False)
    image = db.Column(db.String(512), nullable=True)
    category_slug = db.Column(db.String(120), nullable=False, index=True)

    is_free = db.Column(db.Boolean, default=True, nullable=False)
    rating = db.Column(db.Float, default=0, nullable=False, index=True)

    summary = db.Column(db.String(160), nullable=False)
    description = db.Column(db.Text, nullable=False)
    usage_steps = db.Column(db.JSON, nullable=False, default=list)
    website_link = db.Column(db.String(512), nullable=False)
    tags = db.Column(db.JSON, nullable=False, default=list)
    related_tool_ids = db.Column(db.JSON, nullable=False, default=list)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    comments = db.relationship(
        "Comment",
        back_populates="tool",
        order_by="Comment.timestamp",
        cascade="all, delete-orphan",
        lazy="select",
    )

    __table_args__ = (
        db.CheckConstraint("rating >= 0 AND rating <= 5", name="ck_tool_rating_range"),
        db.Index("idx_tools_category_rating", "category_slug", "rating"),
    )

    def __init__(
        self,
        slug: str,
        name: str,
        category_slug: str,
        is_free: bool,
        rating: float,
        summary: str,
        description: str,
        website_link: str,
        image: Optional[str] = None,
        usage_steps: Optional[List[dict]] = None,
        tags: Optional[List[str]] = None,
        related_tool_ids: Optional[List[str]] = None,
    ):
        self.slug = slug.strip().lower()
        self.name = name.strip()
        self.category_slug = category_slug.strip().lower()
        self.is_free = is_free
        self.rating = float(rating)
        self.summary = summary.strip()
        self.description = description.strip()
        self.website_link = website_link.strip()
        self.image = image
        self.usage_steps = usage_steps or []
        self.tags = tags or []
        self.related_tool_ids = related_tool_ids or []

    def touch(self) -> None:
        self.updated_at = datetime.utcnow()

    def to_dict(self, base_url: Optional[str] = None, include_comments: bool = True) -> dict:
        data = {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "image": self.image,
            "categorySlug": self.category_slug,
            "isFree": self.is_free,
            "rating": self.rating,
            "stars": [star.value for star in render_stars(self.rating)],
            "summary": self.summary,
            "description": self.description,
            "usageSteps": list(self.usage_steps or []),
            "websiteLink": self.website_link,
            "tags": list(self.tags or []),
            "relatedToolIds": list(self.related_tool_ids or []),
            "commentCount": len(self.comments),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

        if include_comments:
            data["comments"] = [c.to_dict() for c in self.comments]

        if base_url:
            data["url"] = f"{base_url.rstrip('/')}/tools/{self.slug}"

        return data

    def __repr__(self) -> str:
        return f"<Tool {self.slug}>"

# toolshub/models/category.py

import enum
import uuid
from datetime import datetime
from typing import List, Optional

from toolshub.extensions import db


class IconName(enum.Enum):
    ZAP = "Zap"
    FILE_TEXT = "FileText"
    SCISSORS = "Scissors"
    VIDEO = "Video"
    CODE = "Code"
    STAR = "Star"
    STAR_HALF = "StarHalf"
    CHECK_CIRCLE = "CheckCircle"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def resolve(cls, name: Optional[str]) -> "IconName":
        """Map a stored key to an icon, falling back to Zap for unknown keys."""
        try:
            return cls(name)
        except ValueError:
            return cls.ZAP


class Category(db.Model):
    __tablename__ = "categories"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    slug = db.Column(db.String(120), unique=True, nullable=False, index=True)
    name = db.Column(db.String(120), unique=True, nullable=False)
    description = db.Column(db.String(200), nullable=False)
    icon_name = db.Column(db.String(50), nullable=False, default=IconName.ZAP.value)
    image_url = db.Column(db.String(512), nullable=True)
    tags = db.Column(db.JSON, nullable=False, default=list)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def __init__(
        self,
        name: str,
        slug: str,
        description: str,
        icon_name: str,
        image_url: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ):
        self.name = name.strip()
        self.slug = slug.strip().lower()
        self.description = description.strip()
        self.icon_name = icon_name
        self.image_url = image_url
        self.tags = tags or []

    @property
    def icon(self) -> IconName:
        return IconName.resolve(self.icon_name)

    def to_dict(self, base_url: Optional[str] = None) -> dict:
        data = {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "description": self.description,
            "iconName": self.icon.value,
            "imageURL": self.image_url,
            "tags": list(self.tags or []),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

        if base_url:
            data["url"] = f"{base_url.rstrip('/')}/categories/{self.slug}"

        return data

    def __repr__(self) -> str:
        return f"<Category {self.slug}>"

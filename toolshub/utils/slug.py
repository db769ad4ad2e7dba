# toolshub/utils/slug.py

import re
from typing import Any

from flask import current_app

NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")

DEFAULT_IMAGE_TEMPLATE = "https://picsum.photos/seed/{slug}/600/400"


def slugify(value: Any) -> str:
    """Lowercase, collapse every non-alphanumeric run into one hyphen, trim hyphens."""
    if value is None:
        return ""
    text = str(value).lower()
    return NON_ALNUM_RUN.sub("-", text).strip("-")


def is_slug(value: Any) -> bool:
    return isinstance(value, str) and value != "" and slugify(value) == value


class SlugGenerator:

    @staticmethod
    def is_reserved(slug: str) -> bool:
        reserved = current_app.config.get("RESERVED_SLUGS", set())
        return slug in reserved

    @staticmethod
    def tool_slug_available(slug: str) -> bool:
        from toolshub.models.tool import Tool

        if SlugGenerator.is_reserved(slug):
            return False
        return Tool.query.filter_by(slug=slug).first() is None

    @staticmethod
    def category_slug_available(slug: str) -> bool:
        from toolshub.models.category import Category

        if SlugGenerator.is_reserved(slug):
            return False
        return Category.query.filter_by(slug=slug).first() is None

    @staticmethod
    def default_image_url(slug: str) -> str:
        return DEFAULT_IMAGE_TEMPLATE.format(slug=slug)

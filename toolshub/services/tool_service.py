# toolshub/services/tool_service.py

import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload

from toolshub.errors import ConflictError, ValidationError
from toolshub.extensions import db
from toolshub.models.category import Category
from toolshub.models.tool import Tool
from toolshub.services.cache_service import CacheService, TOOLS_LISTING
from toolshub.utils.helpers import is_blank, parse_tags, parse_usage_steps
from toolshub.utils.ranking import filter_tools, select_featured_tools, select_related_tools
from toolshub.utils.slug import SlugGenerator, slugify
from toolshub.utils.validators import ToolValidator

logger = logging.getLogger(__name__)


class ToolService:

    @staticmethod
    def get_all_tool_dicts(base_url: Optional[str] = None) -> List[Dict]:
        """Every tool, newest first, without embedded comments."""
        cache = CacheService()
        cached = cache.get(TOOLS_LISTING)
        if cached is not None:
            return cached

        tools = Tool.query.options(selectinload(Tool.comments)).order_by(Tool.created_at.desc()).all()
        data = [t.to_dict(base_url=base_url, include_comments=False) for t in tools]

        cache.set(TOOLS_LISTING, data)
        return data

    @staticmethod
    def list_tools(
        base_url: Optional[str] = None,
        category_slug: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Dict]:
        tools = ToolService.get_all_tool_dicts(base_url=base_url)

        if category_slug:
            category_slug = category_slug.strip().lower()
            tools = [t for t in tools if t["categorySlug"] == category_slug]

        return filter_tools(tools, search)

    @staticmethod
    def get_tool(slug: str) -> Optional[Tool]:
        if is_blank(slug):
            return None
        return Tool.query.filter_by(slug=slug.strip().lower()).first()

    @staticmethod
    def get_featured_tools(base_url: Optional[str] = None) -> List[Dict]:
        return select_featured_tools(ToolService.get_all_tool_dicts(base_url=base_url))

    @staticmethod
    def get_related_tools(tool: Tool, base_url: Optional[str] = None) -> List[Dict]:
        current = tool.to_dict(base_url=base_url, include_comments=False)
        return select_related_tools(current, ToolService.get_all_tool_dicts(base_url=base_url))

    @staticmethod
    def resolve_slug(data: dict) -> str:
        for key in ("slug", "id"):
            if not is_blank(data.get(key)):
                return data[key].strip()
        return slugify(data.get("name"))

    @staticmethod
    def create_tool(data: dict) -> Tool:
        is_valid, errors = ToolValidator.validate(data)
        if not is_valid:
            raise ValidationError(errors)

        slug = ToolService.resolve_slug(data)
        if not slug:
            raise ValidationError(["name must contain at least one letter or number"])

        if SlugGenerator.is_reserved(slug):
            raise ValidationError([f"slug '{slug}' is reserved"])

        if Tool.query.filter_by(slug=slug).first():
            logger.warning(f"Duplicate tool rejected: {slug}")
            raise ConflictError(f"Tool with slug '{slug}' already exists.")

        category_slug = data["categorySlug"].strip().lower()
        if not Category.query.filter_by(slug=category_slug).first():
            logger.warning(f"Tool {slug} references unknown category '{category_slug}'")

        image = data.get("image")
        if is_blank(image):
            image = SlugGenerator.default_image_url(slug)

        tool = Tool(
            slug=slug,
            name=data["name"],
            category_slug=category_slug,
            is_free=data["isFree"],
            rating=data["rating"],
            summary=data["summary"],
            description=data["description"],
            website_link=data["websiteLink"],
            image=image.strip(),
            usage_steps=parse_usage_steps(data.get("usageSteps")),
            tags=parse_tags(data.get("tags")),
            related_tool_ids=[slugify(s) for s in data.get("relatedToolIds") or [] if slugify(s)],
        )

        try:
            db.session.add(tool)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning(f"Tool insert hit unique constraint for {slug}: {e.orig}")
            raise ConflictError(f"Tool with slug '{slug}' already exists.")
        except SQLAlchemyError:
            db.session.rollback()
            logger.error(f"Tool creation failed for {slug}", exc_info=True)
            raise

        CacheService().invalidate(TOOLS_LISTING)
        logger.info(f"Tool created: {tool.slug} in category {tool.category_slug}")

        return tool

# toolshub/services/category_service.py

import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload

from toolshub.errors import ConflictError, ValidationError
from toolshub.extensions import db
from toolshub.models.category import Category
from toolshub.models.tool import Tool
from toolshub.services.cache_service import CacheService, CATEGORIES_LISTING
from toolshub.utils.helpers import is_blank, parse_tags
from toolshub.utils.ranking import filter_categories
from toolshub.utils.slug import SlugGenerator, slugify
from toolshub.utils.validators import CategoryValidator

logger = logging.getLogger(__name__)


class CategoryService:

    @staticmethod
    def list_categories(base_url: Optional[str] = None, search: Optional[str] = None) -> List[Dict]:
        cache = CacheService()
        categories = cache.get(CATEGORIES_LISTING)

        if categories is None:
            rows = Category.query.order_by(Category.name).all()
            categories = [c.to_dict(base_url=base_url) for c in rows]
            cache.set(CATEGORIES_LISTING, categories)

        return filter_categories(categories, search)

    @staticmethod
    def get_category(slug: str) -> Optional[Category]:
        if is_blank(slug):
            return None
        return Category.query.filter_by(slug=slug.strip().lower()).first()

    @staticmethod
    def get_tools_for_category(slug: str) -> Optional[List[Tool]]:
        """Tools in the category by rating, or None when the category does not exist."""
        category = CategoryService.get_category(slug)
        if category is None:
            return None

        return (
            Tool.query.options(selectinload(Tool.comments))
            .filter_by(category_slug=category.slug)
            .order_by(Tool.rating.desc(), Tool.created_at.desc())
            .all()
        )

    @staticmethod
    def create_category(payload: dict) -> Category:
        data = dict(payload) if isinstance(payload, dict) else payload
        if isinstance(data, dict) and is_blank(data.get("slug")):
            data["slug"] = slugify(data.get("name")) or None

        is_valid, errors = CategoryValidator.validate(data)
        if not is_valid:
            raise ValidationError(errors)

        slug = data["slug"].strip()
        name = data["name"].strip()

        if SlugGenerator.is_reserved(slug):
            raise ValidationError([f"slug '{slug}' is reserved"])

        if Category.query.filter_by(slug=slug).first():
            logger.warning(f"Duplicate category slug rejected: {slug}")
            raise ConflictError(f"Category with slug '{slug}' already exists.")

        if Category.query.filter(db.func.lower(Category.name) == name.lower()).first():
            logger.warning(f"Duplicate category name rejected: {name}")
            raise ConflictError(f"Category with name '{name}' already exists.")

        image_url = data.get("imageURL")

        category = Category(
            name=name,
            slug=slug,
            description=data["description"],
            icon_name=data["iconName"],
            image_url=None if is_blank(image_url) else image_url.strip(),
            tags=parse_tags(data.get("tags")),
        )

        try:
            db.session.add(category)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning(f"Category insert hit unique constraint for {slug}: {e.orig}")
            raise ConflictError(f"Category with slug '{slug}' or name '{name}' already exists.")
        except SQLAlchemyError:
            db.session.rollback()
            logger.error(f"Category creation failed for {slug}", exc_info=True)
            raise

        CacheService().invalidate(CATEGORIES_LISTING)
        logger.info(f"Category created: {category.slug}")

        return category

# toolshub/services/seed_service.py

import logging
from typing import Dict

from sqlalchemy.exc import SQLAlchemyError

from toolshub.extensions import db
from toolshub.models.category import Category
from toolshub.models.comment import Comment
from toolshub.models.tool import Tool
from toolshub.services.cache_service import CacheService, CATEGORIES_LISTING, TOOLS_LISTING
from toolshub.services.seed_data import DEMO_CATEGORIES, DEMO_TOOLS
from toolshub.utils.helpers import parse_tags

logger = logging.getLogger(__name__)


class SeedService:

    @staticmethod
    def seed_database() -> Dict[str, int]:
        """Replace every category, tool and comment with the demo data set."""
        try:
            Comment.query.delete()
            Tool.query.delete()
            Category.query.delete()
            logger.info("Existing categories, tools and comments cleared")

            for item in DEMO_CATEGORIES:
                db.session.add(Category(
                    name=item["name"],
                    slug=item["slug"],
                    description=item["description"],
                    icon_name=item["iconName"],
                    image_url=item.get("imageURL"),
                    tags=parse_tags(item.get("tags")),
                ))

            comments_added = 0
            for item in DEMO_TOOLS:
                db.session.add(Tool(
                    slug=item["slug"],
                    name=item["name"],
                    category_slug=item["categorySlug"],
                    is_free=item["isFree"],
                    rating=item["rating"],
                    summary=item["summary"],
                    description=item["description"],
                    website_link=item["websiteLink"],
                    image=item.get("image"),
                    usage_steps=item.get("usageSteps"),
                    tags=parse_tags(item.get("tags")),
                    related_tool_ids=item.get("relatedToolIds"),
                ))
                for comment in item.get("comments", []):
                    db.session.add(Comment(tool_slug=item["slug"], name=comment["name"], comment=comment["comment"]))
                    comments_added += 1

            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.error("Error seeding database", exc_info=True)
            raise

        CacheService().invalidate(TOOLS_LISTING, CATEGORIES_LISTING)

        counts = {
            "categoriesAdded": len(DEMO_CATEGORIES),
            "toolsAdded": len(DEMO_TOOLS),
            "commentsAdded": comments_added,
        }
        logger.info(f"Database seeded with demo data: {counts}")
        return counts

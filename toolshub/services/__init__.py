# toolshub/services/__init__.py

from toolshub.services.cache_service import CacheService
from toolshub.services.tool_service import ToolService
from toolshub.services.category_service import CategoryService
from toolshub.services.comment_service import CommentService
from toolshub.services.seed_service import SeedService

__all__ = [
    "CacheService",
    "ToolService",
    "CategoryService",
    "CommentService",
    "SeedService",
]

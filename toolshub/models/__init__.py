# toolshub/models/__init__.py

from toolshub.models.category import Category, IconName
from toolshub.models.tool import Tool
from toolshub.models.comment import Comment

__all__ = [
    "Category",
    "IconName",
    "Tool",
    "Comment",
]

# toolshub/routes/__init__.py

from toolshub.routes.tools import tools_bp
from toolshub.routes.categories import categories_bp
from toolshub.routes.comments import comments_bp
from toolshub.routes.admin import admin_bp
from toolshub.routes.seed import seed_bp

__all__ = [
    "tools_bp",
    "categories_bp",
    "comments_bp",
    "admin_bp",
    "seed_bp",
]

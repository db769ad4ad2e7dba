# toolshub/utils/__init__.py

from toolshub.utils.ranking import (
    StarKind,
    render_stars,
    select_featured_tools,
    select_related_tools,
    filter_categories,
    filter_tools,
)
from toolshub.utils.slug import SlugGenerator, slugify, is_slug
from toolshub.utils.helpers import (
    is_blank,
    parse_tags,
    parse_usage_steps,
    clean_dict,
)

__all__ = [
    "StarKind",
    "render_stars",
    "select_featured_tools",
    "select_related_tools",
    "filter_categories",
    "filter_tools",
    "SlugGenerator",
    "slugify",
    "is_slug",
    "is_blank",
    "parse_tags",
    "parse_usage_steps",
    "clean_dict",
]

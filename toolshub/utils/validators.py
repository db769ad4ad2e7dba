# toolshub/utils/validators.py

import logging
import math
from typing import Any, List, Optional, Tuple
from urllib.parse import urlparse

from toolshub.models.category import IconName
from toolshub.utils.helpers import is_blank
from toolshub.utils.slug import is_slug

logger = logging.getLogger(__name__)

# Column widths of the slug and URL columns
MAX_SLUG_LENGTH = 120
MAX_STORED_URL_LENGTH = 512


class URLValidator:
    ALLOWED_SCHEMES = {"http", "https"}
    MAX_URL_LENGTH = 2048

    @classmethod
    def validate(
        cls, url: Any, require_https: bool = False, max_length: Optional[int] = None
    ) -> Tuple[bool, Optional[str], Optional[str]]:
        if is_blank(url):
            return False, None, "URL is required"

        if not isinstance(url, str):
            return False, None, "URL must be a string"

        url = url.strip()

        max_length = max_length or cls.MAX_URL_LENGTH
        if len(url) > max_length:
            return False, None, f"URL is too long (max {max_length} characters)"

        try:
            parsed = urlparse(url)
        except ValueError:
            return False, None, "Invalid URL format"

        scheme = parsed.scheme.lower()

        if require_https:
            if scheme != "https" or not url.lower().startswith("https://"):
                return False, None, "URL must start with https://"
        elif scheme not in cls.ALLOWED_SCHEMES:
            return False, None, "URL must start with http:// or https://"

        if not parsed.netloc or not parsed.hostname:
            return False, None, "URL must include a domain"

        return True, url, None


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def _check_required(data: dict, fields: Tuple[str, ...], errors: List[str]) -> None:
    # rating == 0 and isFree is False are present values, only None or
    # blank strings count as missing
    for field in fields:
        if is_blank(data.get(field)):
            errors.append(f"{field} is required")


def _check_string(data: dict, field: str, errors: List[str], max_length: Optional[int] = None) -> None:
    value = data.get(field)
    if is_blank(value):
        return
    if not isinstance(value, str):
        errors.append(f"{field} must be a string")
    elif max_length is not None and len(value.strip()) > max_length:
        errors.append(f"{field} cannot exceed {max_length} characters")


def _check_string_list(data: dict, field: str, errors: List[str]) -> None:
    value = data.get(field)
    if is_blank(value) or isinstance(value, str):
        return
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        errors.append(f"{field} must be a list of strings")


def _check_slug(data: dict, field: str, errors: List[str], max_length: int = MAX_SLUG_LENGTH) -> None:
    value = data.get(field)
    if is_blank(value):
        return
    if isinstance(value, str) and len(value) > max_length:
        errors.append(f"{field} cannot exceed {max_length} characters")
    elif not is_slug(value):
        errors.append(f"{field} must contain only lowercase letters, numbers and single hyphens")


def _check_optional_url(
    data: dict, field: str, errors: List[str], max_length: int = MAX_STORED_URL_LENGTH
) -> None:
    value = data.get(field)
    if is_blank(value):
        return
    is_valid, _, error = URLValidator.validate(value, max_length=max_length)
    if not is_valid:
        errors.append(f"{field}: {error}")


class ToolValidator:
    REQUIRED_FIELDS = (
        "name",
        "categorySlug",
        "isFree",
        "rating",
        "summary",
        "description",
        "websiteLink",
    )
    MAX_NAME_LENGTH = 120
    MAX_SUMMARY_LENGTH = 160

    @classmethod
    def validate(cls, data: Any) -> Tuple[bool, List[str]]:
        if not isinstance(data, dict):
            return False, ["Request body must be a JSON object"]

        errors: List[str] = []
        _check_required(data, cls.REQUIRED_FIELDS, errors)

        _check_string(data, "name", errors, cls.MAX_NAME_LENGTH)
        _check_string(data, "summary", errors, cls.MAX_SUMMARY_LENGTH)
        _check_string(data, "description", errors)
        _check_slug(data, "categorySlug", errors)
        _check_slug(data, "slug", errors)
        _check_slug(data, "id", errors)
        _check_optional_url(data, "image", errors)
        _check_string_list(data, "tags", errors)
        _check_string_list(data, "relatedToolIds", errors)

        rating = data.get("rating")
        if rating is not None and not is_blank(rating):
            if not _is_number(rating):
                errors.append("rating must be a number")
            elif not 0 <= rating <= 5:
                errors.append("rating must be between 0 and 5")

        is_free = data.get("isFree")
        if is_free is not None and not is_blank(is_free) and not isinstance(is_free, bool):
            errors.append("isFree must be a boolean")

        website_link = data.get("websiteLink")
        if not is_blank(website_link):
            is_valid, _, error = URLValidator.validate(
                website_link, require_https=True, max_length=MAX_STORED_URL_LENGTH
            )
            if not is_valid:
                errors.append(f"websiteLink: {error}")

        steps = data.get("usageSteps")
        if not is_blank(steps) and not isinstance(steps, str):
            if not isinstance(steps, list) or not all(
                isinstance(step, str) or (isinstance(step, dict) and isinstance(step.get("text"), str))
                for step in steps
            ):
                errors.append("usageSteps must be a list of steps with text")

        if errors:
            logger.warning(f"Tool validation failed: {errors}")
            return False, errors

        return True, []


class CategoryValidator:
    REQUIRED_FIELDS = ("name", "slug", "description", "iconName")
    MAX_NAME_LENGTH = 120
    MAX_DESCRIPTION_LENGTH = 200

    @classmethod
    def validate(cls, data: Any) -> Tuple[bool, List[str]]:
        if not isinstance(data, dict):
            return False, ["Request body must be a JSON object"]

        errors: List[str] = []
        _check_required(data, cls.REQUIRED_FIELDS, errors)

        _check_string(data, "name", errors, cls.MAX_NAME_LENGTH)
        _check_string(data, "description", errors, cls.MAX_DESCRIPTION_LENGTH)
        _check_slug(data, "slug", errors)
        _check_optional_url(data, "imageURL", errors)
        _check_string_list(data, "tags", errors)

        icon_name = data.get("iconName")
        if not is_blank(icon_name) and icon_name not in IconName.values():
            errors.append(f"iconName must be one of: {', '.join(IconName.values())}")

        if errors:
            logger.warning(f"Category validation failed: {errors}")
            return False, errors

        return True, []


class CommentValidator:
    REQUIRED_FIELDS = ("name", "comment")
    MAX_NAME_LENGTH = 100
    MAX_COMMENT_LENGTH = 2000

    @classmethod
    def validate(cls, data: Any) -> Tuple[bool, List[str]]:
        if not isinstance(data, dict):
            return False, ["Request body must be a JSON object"]

        errors: List[str] = []
        _check_required(data, cls.REQUIRED_FIELDS, errors)
        _check_string(data, "name", errors, cls.MAX_NAME_LENGTH)
        _check_string(data, "comment", errors, cls.MAX_COMMENT_LENGTH)

        if errors:
            logger.warning(f"Comment validation failed: {errors}")
            return False, errors

        return True, []

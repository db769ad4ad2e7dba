# toolshub/utils/helpers.py

from typing import Any, Dict, List

from flask import request

from toolshub.errors import ValidationError


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def get_json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError(["Request body must be a JSON object"])
    return data


def parse_tags(value: Any) -> List[str]:
    """Accepts a list or a comma-separated string. Trimmed, lowercased, de-duplicated."""
    if is_blank(value):
        return []

    if isinstance(value, str):
        items = value.split(",")
    else:
        items = list(value)

    tags = []
    for item in items:
        tag = str(item).strip().lower()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def parse_usage_steps(value: Any) -> List[Dict[str, str]]:
    """Accepts a list of {text} dicts, a list of strings, or one step per line."""
    if is_blank(value):
        return []

    if isinstance(value, str):
        items = value.split("\n")
    else:
        items = list(value)

    steps = []
    for item in items:
        text = item.get("text") if isinstance(item, dict) else item
        if is_blank(text):
            continue
        steps.append({"text": str(text).strip()})
    return steps


def clean_dict(d: Dict, remove_none: bool = True, remove_empty: bool = False) -> Dict:
    result = {}
    for key, value in d.items():
        if remove_none and value is None:
            continue
        if remove_empty and value in ("", [], {}):
            continue
        result[key] = value
    return result

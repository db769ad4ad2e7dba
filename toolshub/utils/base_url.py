# toolshub/utils/base_url.py

from flask import current_app


def get_public_base_url() -> str:
    return current_app.config.get("PUBLIC_BASE_URL", "https://toolshub4u.web.app")

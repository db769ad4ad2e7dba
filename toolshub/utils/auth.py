# toolshub/utils/auth.py

import logging
from functools import wraps
from typing import Optional

from flask import request, g, current_app

from toolshub.errors import UnauthorizedError
from toolshub.utils.jwt_utils import JWTManager

logger = logging.getLogger(__name__)


def extract_token_from_header() -> Optional[str]:
    """Extract Bearer token from Authorization header"""
    auth_header = request.headers.get("Authorization", "")

    if auth_header[:7].lower() == "bearer ":
        return auth_header[7:].strip() or None

    return None


def verify_admin_request() -> dict:
    token = extract_token_from_header()

    if not token:
        raise UnauthorizedError("Admin authentication required")

    payload = JWTManager().verify_admin_token(token)
    if not payload:
        raise UnauthorizedError("Invalid or expired admin token")

    g.admin_username = payload.get("sub")
    return payload


def admin_required(f):
    """Guards admin writes when ADMIN_AUTH_REQUIRED is set.

    With the flag off (the default) the endpoint stays open, matching the
    cosmetic client-side admin gate the dashboard has always used.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_app.config.get("ADMIN_AUTH_REQUIRED"):
            verify_admin_request()
        else:
            g.admin_username = None

        return f(*args, **kwargs)

    return decorated_function

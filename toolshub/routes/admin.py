# toolshub/routes/admin.py

import hmac
import logging

from flask import Blueprint, current_app

from toolshub.errors import ConfigurationError, UnauthorizedError
from toolshub.extensions import limiter
from toolshub.utils.auth import verify_admin_request
from toolshub.utils.helpers import get_json_body, is_blank
from toolshub.utils.jwt_utils import JWTManager

admin_bp = Blueprint("admin", __name__)
logger = logging.getLogger(__name__)


def api_response():
    return current_app.api_response


@admin_bp.route("/login", methods=["POST"])
@limiter.limit("10 per minute")
def login():
    expected_username = current_app.config.get("ADMIN_USERNAME")
    expected_password = current_app.config.get("ADMIN_PASSWORD")

    if not expected_username or not expected_password:
        logger.error("Admin login attempted but ADMIN_USERNAME/ADMIN_PASSWORD are not configured")
        raise ConfigurationError("Admin login is not configured")

    data = get_json_body()
    username = data.get("username")
    password = data.get("password")

    if is_blank(username) or is_blank(password):
        return api_response().error("Username and password are required", 400)

    username_ok = hmac.compare_digest(str(username).encode(), expected_username.encode())
    password_ok = hmac.compare_digest(str(password).encode(), expected_password.encode())

    if not (username_ok and password_ok):
        logger.warning("Failed admin login attempt")
        raise UnauthorizedError("Invalid username or password.")

    jwt_manager = JWTManager()
    token = jwt_manager.generate_admin_token(expected_username)

    logger.info("Admin logged in")

    return api_response().success(data={
        "accessToken": token,
        "tokenType": "Bearer",
        "expiresIn": jwt_manager.expires_in,
        "enforced": bool(current_app.config.get("ADMIN_AUTH_REQUIRED")),
    })


@admin_bp.route("/session", methods=["GET"])
def session():
    payload = verify_admin_request()

    return api_response().success(data={
        "username": payload.get("sub"),
        "expiresAt": payload.get("exp"),
    })

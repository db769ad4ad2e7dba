# toolshub/utils/jwt_utils.py

import jwt
import secrets
import logging
from datetime import datetime, timedelta
from typing import Optional, Dict
from flask import current_app

logger = logging.getLogger(__name__)

AUDIENCE = "toolshub-admin"


class JWTManager:

    def __init__(self):
        self.secret_key = current_app.config.get("SECRET_KEY")
        if not self.secret_key:
            raise ValueError("SECRET_KEY must be configured")

        self.algorithm = "HS256"
        self.access_token_expires = timedelta(hours=current_app.config.get("ADMIN_TOKEN_HOURS", 12))

    def generate_admin_token(self, username: str) -> str:
        """Generate an admin access token"""
        now = datetime.utcnow()
        payload = {
            "sub": username,
            "role": "admin",
            "iat": now,
            "exp": now + self.access_token_expires,
            "jti": secrets.token_urlsafe(16),
            "aud": AUDIENCE,
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_admin_token(self, token: str) -> Optional[Dict]:
        """Verify and decode an admin token, None when invalid or expired"""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=AUDIENCE,
            )
        except jwt.ExpiredSignatureError:
            logger.info("Admin token expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid admin token: {e}")
            return None

        if payload.get("role") != "admin":
            logger.warning("Token without admin role rejected")
            return None

        return payload

    @property
    def expires_in(self) -> int:
        return int(self.access_token_expires.total_seconds())

# toolshub/utils/responses.py

from typing import Any, Optional

from flask import jsonify


class ApiResponse:
    """Builds the single response envelope used by every endpoint:

        {"success": bool, "data": <payload or null>, "error": <message or null>}
    """

    @staticmethod
    def envelope(success: bool, data: Any = None, error: Optional[str] = None) -> dict:
        return {"success": success, "data": data, "error": error}

    def success(self, data: Any = None, status: int = 200):
        return jsonify(self.envelope(True, data=data)), status

    def error(self, message: str, status: int = 400):
        return jsonify(self.envelope(False, error=message)), status

    def not_found(self, message: str = "The requested resource was not found"):
        return self.error(message, 404)

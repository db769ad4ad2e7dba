# toolshub/errors.py

from typing import List, Optional


class ToolsHubError(Exception):
    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ToolsHubError):
    """Malformed or missing input. Carries every reason found, not just the first."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors: List[str], message: Optional[str] = None):
        self.errors = list(errors)
        if message is None:
            message = f"{self.default_message}: {'; '.join(self.errors)}" if self.errors else self.default_message
        super().__init__(message)


class ConflictError(ToolsHubError):
    status_code = 409
    default_message = "Resource already exists"


class UnauthorizedError(ToolsHubError):
    status_code = 401
    default_message = "Authentication required"


class ForbiddenError(ToolsHubError):
    status_code = 403
    default_message = "You do not have permission to access this resource"


class ConfigurationError(ToolsHubError):
    status_code = 503
    default_message = "Service is not configured"

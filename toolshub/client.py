# toolshub/client.py
#
# HTTP client for the Toolshub4u API. Reads degrade to empty results so a
# listing page can render "no items found"; writes raise ApiClientError so
# the caller can surface the failure.

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from toolshub.utils.helpers import clean_dict
from toolshub.utils.ranking import select_featured_tools, select_related_tools

logger = logging.getLogger(__name__)

BASE_URL_ENV = "TOOLSHUB_API_BASE_URL"
FALLBACK_BASE_URL = "http://localhost:5000/api"
REQUEST_TIMEOUT = 10


class ApiClientError(Exception):

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ToolsHubClient:

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
        token: Optional[str] = None,
    ):
        base_url = base_url or os.environ.get(BASE_URL_ENV)
        if not base_url:
            logger.warning(f"{BASE_URL_ENV} is not set, falling back to {FALLBACK_BASE_URL}")
            base_url = FALLBACK_BASE_URL

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.token = token

    def resolve_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, payload: Optional[dict] = None):
        """Returns (status_code, envelope). Raises ApiClientError on transport or format errors."""
        url = self.resolve_url(path)
        headers = {"Accept": "application/json"}
        if payload is not None:
            headers["Content-Type"] = "application/json"
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = self.session.request(method, url, json=payload, headers=headers, timeout=self.timeout)
        except requests.exceptions.Timeout:
            raise ApiClientError(f"Request to {url} timed out")
        except requests.exceptions.RequestException as e:
            raise ApiClientError(f"Request to {url} failed: {e}")

        content_type = response.headers.get("Content-Type", "")
        if "application/json" not in content_type:
            raise ApiClientError(
                f"Unexpected content type '{content_type}' from {url} (HTTP {response.status_code})",
                response.status_code,
            )

        try:
            envelope = response.json()
        except ValueError:
            raise ApiClientError(f"Invalid JSON from {url}", response.status_code)

        if not isinstance(envelope, dict):
            raise ApiClientError(f"Unexpected response shape from {url}", response.status_code)

        return response.status_code, envelope

    def _read(self, path: str, default: Any) -> Any:
        try:
            status, envelope = self._request("GET", path)
        except ApiClientError as e:
            logger.error(f"Read failed for {path}: {e.message}")
            return default

        if not 200 <= status < 300 or not envelope.get("success"):
            if status != 404:
                logger.error(f"Read failed for {path}: HTTP {status}, error={envelope.get('error')}")
            return default

        data = envelope.get("data")
        return default if data is None else data

    def _write(self, path: str, payload: dict) -> Any:
        status, envelope = self._request("POST", path, payload)

        if not 200 <= status < 300 or not envelope.get("success"):
            message = envelope.get("error") or f"HTTP error {status}"
            logger.error(f"Write failed for {path}: {message}")
            raise ApiClientError(message, status)

        return envelope.get("data")

    # Reads

    def get_all_tools(self) -> List[Dict]:
        return self._read("/tools", [])

    def get_tool(self, slug: str) -> Optional[Dict]:
        return self._read(f"/tools/{slug}", None)

    def get_all_categories(self) -> List[Dict]:
        return self._read("/categories", [])

    def get_tools_by_category(self, category_slug: str) -> List[Dict]:
        return self._read(f"/categories/{category_slug}/tools", [])

    def get_comments_for_tool(self, slug: str) -> List[Dict]:
        return self._read(f"/tools/{slug}/comments", [])

    def get_all_comments(self) -> List[Dict]:
        return self._read("/comments", [])

    def get_featured_tools(self) -> List[Dict]:
        return select_featured_tools(self.get_all_tools())

    def get_related_tools(self, tool: Optional[Dict]) -> List[Dict]:
        if not tool:
            return []
        return select_related_tools(tool, self.get_all_tools())

    # Writes

    def add_tool(self, tool: Dict) -> Dict:
        return self._write("/tools/add", clean_dict(tool))

    def add_category(self, category: Dict) -> Dict:
        return self._write("/categories/add", clean_dict(category))

    def add_comment(self, slug: str, name: str, comment: str) -> Dict:
        return self._write(f"/tools/{slug}/comments", {"name": name, "comment": comment})

    def login(self, username: str, password: str) -> str:
        data = self._write("/admin/login", {"username": username, "password": password})
        self.token = data["accessToken"]
        return self.token

"""
HTTP client the site front end uses to talk to the JSON API
"""
from typing import Any, Optional
import logging

import httpx

from app.config import SITE_API_BASE_URL

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
INTERNAL_BASE_URL = "http://site.internal"
DEFAULT_ERROR_MESSAGE = "An unknown error occurred."


class ApiError(Exception):
    """Non-2xx API response or transport failure"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)


class TokenStore:
    """Holds the admin bearer token between requests"""

    def __init__(self, token: Optional[str] = None):
        self.token = token or None
        self.changed = False

    def set(self, token: str):
        self.token = token
        self.changed = True

    def clear(self):
        if self.token is not None:
            self.changed = True
        self.token = None


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or DEFAULT_ERROR_MESSAGE

    if not isinstance(body, dict):
        return DEFAULT_ERROR_MESSAGE

    detail = body.get("detail") or body.get("message")
    if isinstance(detail, list):
        # Validation errors
        messages = [str(error.get("msg", error)) if isinstance(error, dict) else str(error) for error in detail]
        return "; ".join(messages) or DEFAULT_ERROR_MESSAGE
    return str(detail) if detail else DEFAULT_ERROR_MESSAGE


class ApiClient:
    """
    Thin wrapper over httpx.AsyncClient

    Every call goes to /api/<endpoint>. Authenticated calls carry the token
    from the token store as a bearer header.
    """

    def __init__(self, http: httpx.AsyncClient, token_store: Optional[TokenStore] = None):
        self.http = http
        self.token_store = token_store or TokenStore()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        await self.http.aclose()

    def _headers(self, auth: bool) -> dict:
        headers = {"Accept": "application/json"}
        if auth and self.token_store.token:
            headers["Authorization"] = f"Bearer {self.token_store.token}"
        return headers

    async def _send(self, method: str, endpoint: str, auth: bool, **kwargs) -> httpx.Response:
        url = f"{API_PREFIX}/{endpoint.lstrip('/')}"
        try:
            response = await self.http.request(method, url, headers=self._headers(auth), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"API request {method} {url} failed: {str(e)}", exc_info=True)
            raise ApiError(f"Could not reach the server: {str(e)}")

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"API request {method} {url} returned {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code)
        return response

    async def fetch_data(
        self,
        endpoint: str,
        auth: bool = False,
        method: str = "GET",
        body: Optional[Any] = None,
    ) -> Any:
        """
        Call a JSON endpoint and return the decoded body

        Args:
            endpoint: path below /api, e.g. "news" or "pages/home"
            auth: attach the bearer token
            method: HTTP method
            body: JSON payload for POST/PUT

        Raises:
            ApiError: on a non-2xx response, with the server's detail message
        """
        kwargs = {}
        if body is not None:
            kwargs["json"] = body
        response = await self._send(method.upper(), endpoint, auth, **kwargs)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def upload_media(
        self,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream",
        upload_type: Optional[str] = None,
    ) -> str:
        """Upload one file through /api/upload and return its public path"""
        data = {"upload_type": upload_type} if upload_type else None
        response = await self._send(
            "POST",
            "upload",
            True,
            files={"media": (filename, content, content_type)},
            data=data,
        )
        return response.json()["filePath"]


def build_api_client(app=None, token_store: Optional[TokenStore] = None, base_url: Optional[str] = None) -> ApiClient:
    """
    Client for the API: over the network when a base URL is configured,
    otherwise in-process against the given ASGI app.
    """
    base_url = base_url or SITE_API_BASE_URL
    if base_url:
        http = httpx.AsyncClient(base_url=base_url, timeout=10.0)
    else:
        if app is None:
            raise ValueError("An ASGI app is required when SITE_API_BASE_URL is not set")
        http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url=INTERNAL_BASE_URL)
    return ApiClient(http, token_store)

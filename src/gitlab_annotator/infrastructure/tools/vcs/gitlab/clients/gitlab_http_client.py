from typing import Any

import httpx
import structlog

from gitlab_annotator.core.exceptions import ProviderError
from gitlab_annotator.infrastructure.configuration.annotator_settings import AnnotatorSettings

logger = structlog.get_logger()

_PROVIDER = "GitLab"
_PER_PAGE = 100


class GitLabHttpClient:
    """Thin REST v4 client; every failure surfaces as ProviderError."""

    def __init__(self, settings: AnnotatorSettings, transport: httpx.BaseTransport | None = None):
        self.settings = settings
        self.base_url = settings.server_url.rstrip("/")
        self._client = httpx.Client(
            base_url=f"{self.base_url}/api/v4",
            headers=self._get_headers(),
            timeout=settings.request_timeout,
            transport=transport,
        )

    def _get_headers(self) -> dict[str, str]:
        token = self.settings.token.get_secret_value() if self.settings.token else ""
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "PRIVATE-TOKEN": token,
        }

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "GitLabHttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return _json(self._request("GET", path, params=params), path)

    def get_paginated(self, path: str, params: dict[str, Any] | None = None) -> list[Any]:
        """Collect every page of a list endpoint by following X-Next-Page."""
        items: list[Any] = []
        page: str | None = "1"
        while page:
            response = self._request(
                "GET", path, params={**(params or {}), "per_page": _PER_PAGE, "page": page}
            )
            data = _json(response, path)
            if not isinstance(data, list):
                raise ProviderError(
                    provider=_PROVIDER,
                    message=f"Expected a list from {path}, got {type(data).__name__}",
                )
            items.extend(data)
            page = response.headers.get("X-Next-Page", "").strip() or None
        return items

    def post(self, path: str, json_data: dict[str, Any]) -> Any:
        response = self._request("POST", path, json=json_data)
        return _json(response, path) if response.content else {}

    def delete(self, path: str) -> None:
        self._request("DELETE", path)

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"/{path.lstrip('/')}"
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.debug(
                "GitLab request rejected",
                method=method,
                path=path,
                status_code=status,
                source_system=_PROVIDER,
            )
            raise ProviderError(
                provider=_PROVIDER,
                message=f"{method} {path} failed: {_error_detail(exc.response)}",
                retryable=status >= 500 or status == 429,
                status_code=status,
            ) from exc
        except httpx.TransportError as exc:
            raise ProviderError(
                provider=_PROVIDER,
                message=f"Connection failure on {method} {path}: {exc}",
                retryable=True,
            ) from exc


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(payload, dict):
        return str(payload.get("message") or payload.get("error") or payload)
    return str(payload)


def _json(response: httpx.Response, path: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ProviderError(provider=_PROVIDER, message=f"Invalid JSON from {path}") from exc

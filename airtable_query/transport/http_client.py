"""requests-based transport used by default."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import requests

from airtable_query.config.settings import ApiSettings, get_settings
from airtable_query.errors import TransportError
from airtable_query.transport.base import QueryParams, TransportResponse

logger = logging.getLogger(__name__)


class RequestsTransport:
    """Sends requests over a shared ``requests.Session``."""

    def __init__(
        self,
        settings: Optional[ApiSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._settings = settings or get_settings().api
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": self._settings.user_agent})

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        params: Optional[QueryParams] = None,
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        """Perform one request and return its status and body."""
        try:
            response = self._session.request(
                method,
                url,
                headers=dict(headers),
                params=list(params) if params else None,
                data=body,
                timeout=self._settings.request_timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return TransportResponse(status_code=response.status_code, content=response.content)

    def close(self) -> None:
        self._session.close()

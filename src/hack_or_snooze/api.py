from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from .config import BASE_URL, REQUEST_HEADERS

logger = logging.getLogger("hack_or_snooze")


class ApiClient:
    """Thin JSON wrapper around a requests session for one API base URL.

    Every call is a single round trip. Transport errors, HTTP error statuses
    and non-JSON bodies are raised to the caller as requests raised them.
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else self._create_session()

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ApiClient":
        return cls(
            base_url=config.get("base_url") or BASE_URL,
            timeout=config.get("timeout"),
        )

    def _create_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update(REQUEST_HEADERS)
        return s

    def url(self, *segments: str) -> str:
        path = "/".join(quote(str(seg), safe="") for seg in segments)
        return f"{self.base_url}/{path}"

    def request(
        self,
        method: str,
        *segments: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = self.url(*segments)
        logger.debug("%s %s", method, url)
        resp = self.session.request(
            method, url, params=params, json=json, timeout=self.timeout
        )
        try:
            resp.raise_for_status()
        except requests.HTTPError:
            logger.warning("%s %s failed with status %s", method, url, resp.status_code)
            raise
        logger.debug("%s %s OK", method, url)
        return resp.json()

    def get(self, *segments: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", *segments, params=params)

    def post(self, *segments: str, json: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("POST", *segments, json=json)

    def delete(self, *segments: str, json: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("DELETE", *segments, json=json)

"""Unicorn API client.

This module defines a small client wrapper around the Unicorn REST
API.  The client uses the ``requests`` library internally and exposes
one method per operation:

* :meth:`UnicornAPI.health` – check that the service is running.
* :meth:`UnicornAPI.list_unicorns` – search unicorns with query criteria.
* :meth:`UnicornAPI.get_unicorn` – fetch a single unicorn by name.
* :meth:`UnicornAPI.create_unicorn` – create a unicorn.
* :meth:`UnicornAPI.update_unicorn` – change some fields of a unicorn.
* :meth:`UnicornAPI.delete_unicorn` – remove a unicorn.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
service behind a gateway.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UnicornAPI:
    """Client for interacting with the Unicorn API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
                Include the API prefix if the server was started with one.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/unicorns``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request (for POST/PUT).
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _unicorn_path(name: str) -> str:
        return f"/unicorns/{quote(name, safe='')}"

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the service's info message."""
        return self._request("GET", "/")

    def list_unicorns(self, **criteria: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search unicorns.

        Keyword arguments are sent as query parameters using the API's
        names, e.g. ``list_unicorns(weightGreaterThan=500, loves="apple")``.
        Booleans are sent as ``true``/``false``, lists of loves are
        joined with commas and ``None`` values are dropped.
        """
        params: Dict[str, str] = {}
        for key, value in criteria.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            elif isinstance(value, (list, tuple)):
                value = ",".join(str(item) for item in value)
            params[key] = str(value)
        data, error = self._request("GET", "/unicorns", params=params or None)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_unicorn(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single unicorn by name."""
        return self._request("GET", self._unicorn_path(name))

    def create_unicorn(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a unicorn and return the stored record."""
        return self._request("POST", "/unicorns", json_body=payload)

    def update_unicorn(self, name: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update the supplied fields of a unicorn."""
        return self._request("PUT", self._unicorn_path(name), json_body=payload)

    def delete_unicorn(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a unicorn.

        Returns the removed record (not the confirmation envelope).
        """
        data, error = self._request("DELETE", self._unicorn_path(name))
        if error:
            return None, error
        if isinstance(data, dict) and "unicorn" in data:
            return data["unicorn"], None
        return data, None

"""HTTP client for the Dresden public transport web API."""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests

from .errors import ApiError, DvbError
from .lines import GetLinesParams, GetLinesResponse
from .monitor import MonitorStopParams, MonitorStopResponse
from .point import GetPointParams, GetPointResponse
from .route import GetRouteParams, GetRouteResponse

DEFAULT_BASE_URL = "https://webapi.vvo-online.de"
DEFAULT_USER_AGENT = "dvbclient/1.0.0"
DEFAULT_TIMEOUT = 30.0


class Client:
    """Client for the DVB web API.

    A session passed in stays owned by the caller; otherwise the client
    creates one and closes it on :meth:`close`.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url or DEFAULT_BASE_URL
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.timeout = timeout or DEFAULT_TIMEOUT
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def _url(self, path: str, query: Optional[Mapping[str, str]]) -> str:
        try:
            parts = urlsplit(self.base_url)
        except ValueError as exc:
            raise DvbError(f"invalid base URL: {exc}") from exc
        parts = parts._replace(path=path)
        if query is not None:
            parts = parts._replace(query=urlencode(sorted(query.items())))
        return urlunsplit(parts)

    def request(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, str]] = None,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Send a request and return the raw response."""
        url = self._url(path, query)
        request_headers = {"User-Agent": self.user_agent}
        data = None
        if body is not None:
            try:
                data = json.dumps(body).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise DvbError(f"failed to marshal request body: {exc}") from exc
            request_headers["Content-Type"] = "application/json"
        if headers:
            request_headers.update(headers)
        try:
            return self.session.request(
                method, url, data=data, headers=request_headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise DvbError(f"request failed: {exc}") from exc

    @staticmethod
    def _error(response: requests.Response) -> ApiError:
        status = response.status_code
        text = response.content.decode("utf-8", errors="replace")
        generic = ApiError(status, f"HTTP {status}: {text}")
        try:
            payload = json.loads(response.content)
        except ValueError:
            return generic
        if payload is None:
            return ApiError(status, "")
        if not isinstance(payload, dict):
            return generic
        message = payload.get("message")
        if message is None:
            return ApiError(status, "")
        if not isinstance(message, str):
            return generic
        return ApiError(status, message)

    def _decode(self, response: requests.Response) -> Optional[dict]:
        try:
            if not 200 <= response.status_code < 300:
                raise self._error(response)
            if not response.content:
                return None
            try:
                payload = json.loads(response.content)
            except ValueError as exc:
                raise DvbError(f"failed to unmarshal response: {exc}") from exc
            if payload is not None and not isinstance(payload, dict):
                raise DvbError("failed to unmarshal response: expected a JSON object")
            return payload
        finally:
            response.close()

    def _get(self, path: str, params: Any) -> Optional[dict]:
        query = params.to_query() if params is not None else {}
        return self._decode(self.request("GET", path, query))

    def get_lines(self, params: Optional[GetLinesParams] = None) -> GetLinesResponse:
        """List the lines that serve a stop."""
        return GetLinesResponse.from_dict(self._get("/stt/lines", params))

    def monitor_stop(self, params: Optional[MonitorStopParams] = None) -> MonitorStopResponse:
        """Fetch upcoming departures or arrivals at a stop."""
        return MonitorStopResponse.from_dict(self._get("/dm", params))

    def get_point(self, params: Optional[GetPointParams] = None) -> GetPointResponse:
        """Search stops and places by name."""
        return GetPointResponse.from_dict(self._get("/tr/pointfinder", params))

    def get_route(self, params: Optional[GetRouteParams] = None) -> GetRouteResponse:
        """Plan journeys between two locations."""
        return GetRouteResponse.from_dict(self._get("/tr/trips", params))

    def close(self) -> None:
        """Close the session if the client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
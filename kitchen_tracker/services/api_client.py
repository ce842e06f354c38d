"""
Shared HTTP plumbing for the backend API clients.
"""

import threading
import time
from typing import Any, Callable, Dict, List, Optional

import requests

from ..config.settings import Settings
from ..security.pii_protection import get_structured_logger
from ..security.session_store import SessionStore
from .errors import NetworkError, ServiceError

logger = get_structured_logger().get_logger(__name__)

MAX_ERROR_BODY = 500


def is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def response_text(response: requests.Response) -> str:
    """Body text for error details, truncated."""
    return (response.text or "")[:MAX_ERROR_BODY]


class ApiClient:
    """Base client: URL building, bearer headers, transport error mapping.

    Without an injected ``http`` session each calling thread gets its own
    ``requests.Session``; the dashboard refresh calls from worker threads.
    """

    def __init__(
        self,
        settings: Settings,
        session_store: SessionStore,
        http: Optional[requests.Session] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self.settings = settings
        self.session_store = session_store
        self._http = http
        self._session_factory = session_factory
        self._local = threading.local()
        self._sessions: List[requests.Session] = []
        self._lock = threading.Lock()

    @property
    def http(self) -> requests.Session:
        if self._http is not None:
            return self._http
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
        return session

    def close(self) -> None:
        """Close the per-thread sessions this client opened."""
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()

    def _headers(self, token: Optional[str] = None) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """Send one request; transport failures become NetworkError."""
        url = self.settings.endpoint(path)
        started = time.monotonic()
        try:
            response = self.http.request(
                method,
                url,
                headers=self._headers(token),
                json=json,
                timeout=self.settings.api.request_timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(
                "API request failed",
                method=method,
                path=path,
                error_type=type(e).__name__,
            )
            raise NetworkError(f"Network error contacting backend: {e}") from e

        logger.info(
            "API call",
            method=method,
            path=path,
            status_code=response.status_code,
            duration=round(time.monotonic() - started, 3),
        )
        return response

    @staticmethod
    def _json(response: requests.Response, what: str) -> Any:
        try:
            return response.json()
        except ValueError:
            raise ServiceError(
                f"Malformed response while trying to {what}",
                response.status_code,
                response_text(response),
            )

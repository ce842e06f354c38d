"""
Persistent session token storage.

The token lives in a small JSON key-value file so that a login survives
application restarts. Absence of the key means logged out.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union

from .pii_protection import get_structured_logger

logger = get_structured_logger().get_logger(__name__)

DEFAULT_TOKEN_KEY = "auth_token"


class SessionStore:
    """Holder of the opaque bearer token for this installation."""

    def __init__(self, storage_path: Union[str, Path], token_key: str = DEFAULT_TOKEN_KEY):
        self.storage_path = Path(storage_path)
        self.token_key = token_key

    def _read(self) -> Dict[str, str]:
        if not self.storage_path.exists():
            return {}
        try:
            data = json.loads(self.storage_path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            logger.warning(
                "Local storage unreadable, treating as empty",
                path=str(self.storage_path),
                error_type=type(e).__name__,
            )
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.storage_path.with_suffix(self.storage_path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        tmp_path.replace(self.storage_path)

    def get(self) -> Optional[str]:
        """Return the stored token, or None when logged out."""
        token = self._read().get(self.token_key)
        return token or None

    def set(self, token: str) -> None:
        if not token:
            raise ValueError("Token must be a non-empty string")
        data = self._read()
        data[self.token_key] = token
        self._write(data)
        logger.info("Session token stored", operation="session_set")

    def clear(self) -> None:
        data = self._read()
        if self.token_key not in data:
            return
        del data[self.token_key]
        self._write(data)
        logger.info("Session token cleared", operation="session_clear")

    def is_authenticated(self) -> bool:
        return self.get() is not None

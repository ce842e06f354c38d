"""
Login/logout state machine.

    LOADING --start()--> LOGGED_IN            (token stored)
    LOADING --start()--> LOGGED_OUT           (no token)
    LOGGED_OUT/AWAITING_EMAIL --request_otp()--> LOGGED_OUT/AWAITING_CODE
    LOGGED_OUT/AWAITING_CODE  --verify_otp()---> LOGGED_IN
    LOGGED_IN --logout() | expire_session()--> LOGGED_OUT/AWAITING_EMAIL
"""

import math
import time
from enum import Enum
from typing import Callable, Optional

from ..security.pii_protection import get_structured_logger
from ..security.session_store import SessionStore
from .auth_client import AuthClient
from .errors import InvalidStateError, ValidationError
from .validators import validate_otp_code

logger = get_structured_logger().get_logger(__name__)


class SessionState(str, Enum):
    LOADING = "loading"
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


class LoginStep(str, Enum):
    AWAITING_EMAIL = "awaiting_email"
    AWAITING_CODE = "awaiting_code"


class ResendCooldown:
    """Client-side courtesy timer between OTP resends."""

    def __init__(self, seconds: int = 60, clock: Callable[[], float] = time.monotonic):
        self.seconds = seconds
        self.clock = clock
        self._started_at: Optional[float] = None

    def start(self) -> None:
        self._started_at = self.clock()

    def reset(self) -> None:
        self._started_at = None

    @property
    def remaining(self) -> int:
        if self._started_at is None:
            return 0
        left = self.seconds - (self.clock() - self._started_at)
        return max(0, math.ceil(left))

    @property
    def active(self) -> bool:
        return self.remaining > 0


class SessionController:
    """Owns the session lifecycle for one client installation."""

    def __init__(
        self,
        auth_client: AuthClient,
        session_store: SessionStore,
        cooldown: Optional[ResendCooldown] = None,
    ):
        self.auth_client = auth_client
        self.session_store = session_store
        self.cooldown = cooldown or ResendCooldown()
        self.state = SessionState.LOADING
        self.step = LoginStep.AWAITING_EMAIL
        self.pending_email: Optional[str] = None

    @property
    def is_logged_in(self) -> bool:
        return self.state == SessionState.LOGGED_IN

    @property
    def is_loading(self) -> bool:
        return self.state == SessionState.LOADING

    def _require(self, state: SessionState, step: Optional[LoginStep] = None) -> None:
        if self.state != state or (step is not None and self.step != step):
            current = self.state.value if step is None else f"{self.state.value}/{self.step.value}"
            raise InvalidStateError(f"Operation not allowed while {current}")

    def _to_logged_out(self) -> None:
        self.state = SessionState.LOGGED_OUT
        self.step = LoginStep.AWAITING_EMAIL
        self.pending_email = None
        self.cooldown.reset()

    def start(self) -> SessionState:
        """Resolve the initial state from the persisted token."""
        self._require(SessionState.LOADING)
        if self.session_store.is_authenticated():
            self.state = SessionState.LOGGED_IN
        else:
            self._to_logged_out()
        logger.info("Session resolved", state=self.state.value)
        return self.state

    def request_otp(self, email: str) -> None:
        self._require(SessionState.LOGGED_OUT, LoginStep.AWAITING_EMAIL)
        self.auth_client.request_otp(email)
        self.pending_email = email.strip()
        self.step = LoginStep.AWAITING_CODE
        self.cooldown.start()

    def resend_otp(self) -> None:
        self._require(SessionState.LOGGED_OUT, LoginStep.AWAITING_CODE)
        if self.cooldown.active:
            raise ValidationError(
                f"Please wait {self.cooldown.remaining}s before requesting a new code",
                "otp",
            )
        self.auth_client.request_otp(self.pending_email)
        self.cooldown.start()

    def back_to_email(self) -> None:
        self._require(SessionState.LOGGED_OUT, LoginStep.AWAITING_CODE)
        self._to_logged_out()

    def verify_otp(self, code: str) -> None:
        self._require(SessionState.LOGGED_OUT, LoginStep.AWAITING_CODE)
        code = validate_otp_code(code)
        token = self.auth_client.verify_otp(self.pending_email, code)
        self.session_store.set(token)
        self.state = SessionState.LOGGED_IN
        self.step = LoginStep.AWAITING_EMAIL
        self.pending_email = None
        self.cooldown.reset()
        logger.info("Login successful", state=self.state.value)

    def logout(self) -> None:
        self._require(SessionState.LOGGED_IN)
        self.session_store.clear()
        self._to_logged_out()
        logger.info("Logged out", state=self.state.value)

    def expire_session(self) -> None:
        """Drop a token the backend has rejected."""
        self.session_store.clear()
        if self.state == SessionState.LOGGED_IN:
            self._to_logged_out()
            logger.warning("Session expired by backend", state=self.state.value)

    def is_authenticated(self) -> bool:
        return self.session_store.is_authenticated()

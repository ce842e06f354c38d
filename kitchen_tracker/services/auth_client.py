"""
Authentication API client: OTP login and restaurant profile.
"""

from ..models.auth import AuthToken, OTPRequest, RestaurantProfile
from ..models.base import MessageResponse
from ..security.pii_protection import get_structured_logger
from .api_client import ApiClient, is_success, response_text
from .errors import AuthError, ServiceError
from .validators import validate_email

logger = get_structured_logger().get_logger(__name__)

AUTH_FAILED_MESSAGE = "Authentication failed - please login again"
NO_TOKEN_MESSAGE = "No authentication token"


class AuthClient(ApiClient):
    """Client for the /auth endpoints."""

    def _require_token(self) -> str:
        token = self.session_store.get()
        if not token:
            raise AuthError(NO_TOKEN_MESSAGE)
        return token

    def request_otp(self, email: str) -> MessageResponse:
        """Ask the backend to email a one-time passcode.

        The address is checked against the permitted domain before any
        request is made.
        """
        email = validate_email(email, self.settings.session.allowed_email_domain)
        response = self._request(
            "POST", "/auth/send-otp", json=OTPRequest(email=email).model_dump()
        )
        if not is_success(response):
            raise ServiceError("Failed to send OTP", response.status_code, response_text(response))
        return MessageResponse.model_validate(self._json(response, "send OTP") or {})

    def verify_otp(self, email: str, code: str) -> str:
        """Exchange a passcode for a session token."""
        payload = {"email": email, "otp": code}
        response = self._request("POST", "/auth/verify-otp", json=payload)
        if not is_success(response):
            logger.warning("OTP verification rejected", status_code=response.status_code)
            raise AuthError("Invalid OTP")
        data = self._json(response, "verify OTP")
        if not isinstance(data, dict) or not data.get("token"):
            raise AuthError("Invalid OTP")
        return AuthToken.model_validate(data).token

    def get_restaurant_profile(self) -> RestaurantProfile:
        """Fetch the restaurant name.

        A 404 means the name was never set and yields an empty profile.
        """
        token = self._require_token()
        response = self._request("GET", "/auth/get-restaurant", token=token)

        if response.status_code == 401:
            raise AuthError(AUTH_FAILED_MESSAGE)
        if response.status_code == 404:
            return RestaurantProfile(restaurant_name=None)
        if not is_success(response):
            raise ServiceError(
                "Failed to get restaurant name", response.status_code, response_text(response)
            )
        return RestaurantProfile.model_validate(self._json(response, "get restaurant name") or {})

    def set_restaurant_profile(self, name: str) -> MessageResponse:
        token = self._require_token()
        response = self._request(
            "POST",
            "/auth/set-restaurant",
            token=token,
            json={"restaurant_name": name},
        )

        if response.status_code == 401:
            raise AuthError(AUTH_FAILED_MESSAGE)
        if not is_success(response):
            raise ServiceError(
                "Failed to set restaurant name", response.status_code, response_text(response)
            )
        return MessageResponse.model_validate(self._json(response, "set restaurant name") or {})

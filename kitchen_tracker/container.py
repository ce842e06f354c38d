"""
Dependency Injection Container

Builds every collaborator from one Settings instance. The Streamlit app
keeps a container per browser session instead of module-level globals.
"""

from typing import Optional

import requests

from .config.settings import Settings
from .security.pii_protection import configure_logging
from .security.session_store import SessionStore
from .services.analytics_service import AnalyticsService
from .services.auth_client import AuthClient
from .services.dashboard_service import DashboardService
from .services.error_handler import ErrorHandler
from .services.session_controller import ResendCooldown, SessionController
from .services.transaction_client import TransactionClient


class Container:
    """Dependency injection container for managing application services."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http: Optional[requests.Session] = None,
        session_store: Optional[SessionStore] = None,
    ):
        self.settings = settings or Settings()
        # None gives each client per-thread sessions
        self.http = http
        self.session_store = session_store or SessionStore(
            self.settings.session.absolute_storage_path,
            self.settings.session.token_key,
        )

        self.auth_client = AuthClient(self.settings, self.session_store, self.http)
        self.transaction_client = TransactionClient(self.settings, self.session_store, self.http)
        self.session_controller = SessionController(
            self.auth_client,
            self.session_store,
            ResendCooldown(self.settings.session.resend_cooldown_seconds),
        )
        self.dashboard_service = DashboardService(
            self.transaction_client,
            AnalyticsService(),
            on_auth_failure=self.session_controller.expire_session,
        )
        self.error_handler = ErrorHandler()

    def configure_logging(self) -> None:
        configure_logging(
            self.settings.app.log_level,
            self.settings.app.log_file,
            self.settings.app.environment.value,
        )

    def get_settings(self) -> Settings:
        return self.settings

    def get_session_store(self) -> SessionStore:
        return self.session_store

    def get_auth_client(self) -> AuthClient:
        return self.auth_client

    def get_transaction_client(self) -> TransactionClient:
        return self.transaction_client

    def get_session_controller(self) -> SessionController:
        return self.session_controller

    def get_dashboard_service(self) -> DashboardService:
        return self.dashboard_service

    def get_error_handler(self) -> ErrorHandler:
        return self.error_handler

    def reset_dashboard(self) -> None:
        """Forget data cached for the previous login."""
        self.dashboard_service.close()
        self.dashboard_service = DashboardService(
            self.transaction_client,
            AnalyticsService(),
            on_auth_failure=self.session_controller.expire_session,
        )

    def cleanup(self) -> None:
        """Cleanup container resources."""
        self.dashboard_service.close()
        self.auth_client.close()
        self.transaction_client.close()
        if self.http is not None:
            self.http.close()

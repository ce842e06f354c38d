"""
Configuration Management

This module provides centralized configuration management
for the expense tracker application.
"""

from .settings import Settings, ApiConfig, SessionConfig, AppConfig, Environment

__all__ = [
    "Settings",
    "ApiConfig",
    "SessionConfig",
    "AppConfig",
    "Environment",
]

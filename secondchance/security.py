"""
SecondChance Auth API - Security Validation

Startup checks for the process-wide security configuration.
"""

import warnings

from secondchance.auth.errors import ConfigurationError
from secondchance.config import Settings, settings as default_settings


def validate_security_config(settings: Settings = default_settings) -> None:
    """
    Validate security configuration on startup.

    A missing JWT secret is fatal. Weak settings only issue warnings so that
    development environments keep running.
    """
    if not settings.JWT_SECRET:
        raise ConfigurationError(
            "JWT_SECRET is not set. Tokens cannot be signed without it."
        )

    # CORS validation
    if "*" in settings.CORS_ORIGINS:
        warnings.warn(
            "SECURITY WARNING: CORS wildcard (*) detected. "
            "Set specific origins via CORS_ORIGINS.",
            UserWarning,
        )

    # JWT secret strength (basic check)
    if len(settings.JWT_SECRET) < 32 and settings.is_production:
        warnings.warn(
            "SECURITY WARNING: JWT_SECRET is too short for production. "
            "Use at least 32 characters.",
            UserWarning,
        )

"""
SecondChance Auth API - Authentication Module

Register, login and profile update with bcrypt hashing and JWT tokens.
"""

from secondchance.auth.router import router as auth_router
from secondchance.auth.service import AuthService

__all__ = ["auth_router", "AuthService"]

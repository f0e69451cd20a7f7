from .base import AppError, AuthError, DomainError, InfrastructureError, ValidationError
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthError",
    "DomainError",
    "InfrastructureError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]

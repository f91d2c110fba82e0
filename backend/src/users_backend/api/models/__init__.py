"""Models used for API request and response payloads."""

from users_backend.api.models.user import UserRequest, UserResponse

__all__ = ["UserRequest", "UserResponse"]

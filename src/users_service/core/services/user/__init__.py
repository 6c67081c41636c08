from .user_service import UserService, normalize_phone

__all__ = ["UserService", "normalize_phone"]

"""FastAPI dependencies shared across routers."""

from .auth import Principal, require_admin, require_user

__all__ = ["Principal", "require_admin", "require_user"]

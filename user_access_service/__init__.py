"""User access service.

Relational persistence for registered users, a display-name formatting
rule, the orchestration layer that combines them and the FastAPI
application exposing ``POST /users``.
"""

from user_access_service.app import create_app
from user_access_service.database import Database
from user_access_service.formatting import format_name
from user_access_service.user_service import UserService

__all__ = ["Database", "UserService", "create_app", "format_name"]

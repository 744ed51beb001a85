from quora.models.question import Question
from quora.models.user import User, UserRole
from quora.models.user_auth import UserAuth

__all__ = [
    "User",
    "UserRole",
    "UserAuth",
    "Question",
]

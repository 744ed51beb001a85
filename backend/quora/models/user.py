from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import String
from sqlmodel import Column, Field, Relationship, SQLModel

if TYPE_CHECKING:
    from quora.models.question import Question
    from quora.models.user_auth import UserAuth


class UserRole(str, Enum):
    admin = "admin"
    nonadmin = "nonadmin"


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    uuid: str = Field(index=True, unique=True)  # Public identifier used by the API
    username: str = Field(unique=True)
    first_name: str
    last_name: str
    email: str = Field(unique=True)
    role: UserRole = Field(default=UserRole.nonadmin, sa_column=Column(String, nullable=False))
    created_at: datetime = Field(default_factory=datetime.utcnow)

    # Relationships
    auth_sessions: List["UserAuth"] = Relationship(back_populates="user")
    questions: List["Question"] = Relationship(back_populates="user")

    @property
    def is_admin(self) -> bool:
        # Roles are written by the auth component; anything but "admin" is not admin
        return self.role == UserRole.admin

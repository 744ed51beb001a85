from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from quora.models.user import User


class UserAuth(SQLModel, table=True):
    """
    A sign-in session, identified by its opaque access token.

    Rows are written by the authentication component; this service only reads them.
    A session is valid until logout_at is set, and is never re-activated afterwards.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    uuid: str = Field(index=True, unique=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    access_token: str = Field(index=True, unique=True)
    login_at: datetime = Field(default_factory=datetime.utcnow)
    expires_at: Optional[datetime] = Field(default=None)  # Written by the auth component; not read here
    logout_at: Optional[datetime] = Field(default=None)

    # Relationships
    user: "User" = Relationship(back_populates="auth_sessions")

    @property
    def is_signed_out(self) -> bool:
        return self.logout_at is not None

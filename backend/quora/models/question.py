from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime
from sqlmodel import Column, Field, Relationship, SQLModel

if TYPE_CHECKING:
    from quora.models.user import User


class Question(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    uuid: str = Field(index=True, unique=True)  # Assigned at creation, never changes
    content: str
    date: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    user_id: int = Field(foreign_key="user.id", index=True)  # Owner, never reassigned

    # Relationships
    user: "User" = Relationship(back_populates="questions")

from typing import Optional

from sqlmodel import Session, select

from quora.models.user import User
from quora.models.user_auth import UserAuth


class UserDao:
    def __init__(self, session: Session):
        self.session = session

    def find_session_by_token(self, access_token: Optional[str]) -> Optional[UserAuth]:
        """Return the sign-in session for an access token, or None"""
        if not access_token:
            return None
        return self.session.exec(select(UserAuth).where(UserAuth.access_token == access_token)).first()

    def find_user_by_uuid(self, user_uuid: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.uuid == user_uuid)).first()

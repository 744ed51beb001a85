"""
Question Access Gateway

Checks the caller's session and, for edits and deletes, ownership or role,
before handing the operation to the question DAO.

Order of checks for every operation:
1. Session: unknown token -> Unauthenticated, signed out -> SessionExpired
2. Target lookup: QuestionNotFound / UserNotFound
3. Ownership / role: Forbidden
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from sqlalchemy.orm.attributes import set_committed_value

from quora.dao.question_dao import QuestionDao
from quora.dao.user_dao import UserDao
from quora.exceptions import Forbidden, QuestionNotFound, SessionExpired, Unauthenticated, UserNotFound
from quora.models.question import Question
from quora.models.user_auth import UserAuth

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_uuid() -> str:
    return str(uuid.uuid4())


class QuestionService:
    def __init__(
        self,
        user_dao: UserDao,
        question_dao: QuestionDao,
        clock: Callable[[], datetime] = utc_now,
        id_generator: Callable[[], str] = new_uuid,
    ):
        self.user_dao = user_dao
        self.question_dao = question_dao
        self.clock = clock
        self.id_generator = id_generator

    def resolve_active_session(self, access_token: Optional[str], action: str) -> UserAuth:
        """
        Look up the session for an access token and require it to be signed in.

        Args:
            access_token: Opaque token supplied by the caller
            action: What the caller is trying to do, used in the signed-out message

        Raises:
            Unauthenticated: No session matches the token
            SessionExpired: The session has been signed out
        """
        auth = self.user_dao.find_session_by_token(access_token)
        if auth is None:
            raise Unauthenticated()
        if auth.is_signed_out:
            raise SessionExpired(action)
        return auth

    def create_question(self, access_token: Optional[str], content: str) -> Question:
        auth = self.resolve_active_session(access_token, "post a question")

        question = Question(
            uuid=self.id_generator(),
            content=content,
            date=self.clock(),
            user_id=auth.user.id,
        )
        question = self.question_dao.insert(question)
        logger.info("Question %s created by user %s", question.uuid, auth.user.uuid)
        return question

    def list_all_questions(self, access_token: Optional[str]) -> List[Question]:
        self.resolve_active_session(access_token, "get all questions")
        questions = self.question_dao.find_all()
        logger.debug("Listing %d questions", len(questions))
        return questions

    def edit_question(self, access_token: Optional[str], question_id: str, content: str) -> Question:
        """Only the owner may edit; admins get no exception here."""
        auth = self.resolve_active_session(access_token, "edit the question")
        question = self._get_question_or_raise(question_id)

        if question.user.uuid != auth.user.uuid:
            raise Forbidden("Only the question owner can edit the question")

        question.content = content
        self.question_dao.update(question)
        logger.info("Question %s edited by user %s", question.uuid, auth.user.uuid)
        return question

    def delete_question(self, access_token: Optional[str], question_id: str) -> Question:
        """Owner or admin may delete. Returns the record as it was before deletion."""
        auth = self.resolve_active_session(access_token, "delete the question")
        question = self._get_question_or_raise(question_id)

        requester = auth.user
        if question.user.uuid != requester.uuid and not requester.is_admin:
            raise Forbidden("Only the question owner or admin can delete the question")

        # Snapshot before the delete; the instance leaves the session on commit
        deleted = Question.model_validate(question.model_dump())
        # Carry the owner without cascading the copy into the session
        set_committed_value(deleted, "user", question.user)
        self.question_dao.delete(question)
        logger.info("Question %s deleted by user %s", deleted.uuid, requester.uuid)
        return deleted

    def list_questions_by_user(self, access_token: Optional[str], user_id: str) -> List[Question]:
        self.resolve_active_session(access_token, "get all questions posted by a specific user")

        user = self.user_dao.find_user_by_uuid(user_id)
        if user is None:
            raise UserNotFound()

        questions = self.question_dao.find_all_by_owner(user)
        logger.debug("Found %d questions for user %s", len(questions), user.uuid)
        return questions

    def _get_question_or_raise(self, question_id: str) -> Question:
        question = self.question_dao.find_by_uuid(question_id)
        if question is None:
            raise QuestionNotFound()
        return question

from typing import List, Optional

from sqlmodel import Session, select

from quora.models.question import Question
from quora.models.user import User


class QuestionDao:
    def __init__(self, session: Session):
        self.session = session

    def insert(self, question: Question) -> Question:
        self.session.add(question)
        self.session.flush()  # Get the ID
        self.session.refresh(question)
        return question

    def find_by_uuid(self, question_uuid: str) -> Optional[Question]:
        return self.session.exec(select(Question).where(Question.uuid == question_uuid)).first()

    def update(self, question: Question) -> None:
        self.session.add(question)
        self.session.flush()

    def delete(self, question: Question) -> None:
        self.session.delete(question)
        self.session.flush()

    def find_all(self) -> List[Question]:
        """All questions, oldest first"""
        return list(self.session.exec(select(Question).order_by(Question.id)).all())

    def find_all_by_owner(self, user: User) -> List[Question]:
        return list(
            self.session.exec(select(Question).where(Question.user_id == user.id).order_by(Question.id)).all()
        )

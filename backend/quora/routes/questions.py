from typing import List, Optional

from fastapi import APIRouter, Depends, Header
from pydantic import BaseModel, field_validator
from sqlmodel import Session

from quora.dao.question_dao import QuestionDao
from quora.dao.user_dao import UserDao
from quora.database import get_session, unit_of_work
from quora.services.question_service import QuestionService

router = APIRouter()


class QuestionRequest(BaseModel):
    content: str

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        if not v or not v.strip():
            raise ValueError("content is required")
        return v


class QuestionStatusResponse(BaseModel):
    id: str
    status: str


class QuestionDetailsResponse(BaseModel):
    id: str
    content: str


def get_question_service(session: Session = Depends(get_session)) -> QuestionService:
    return QuestionService(user_dao=UserDao(session), question_dao=QuestionDao(session))


def access_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    """Token from the authorization header, with or without a Bearer prefix"""
    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer ") :]
    return authorization


def _details(questions) -> List[QuestionDetailsResponse]:
    return [QuestionDetailsResponse(id=q.uuid, content=q.content) for q in questions]


@router.post("/question/create", response_model=QuestionStatusResponse, status_code=201)
def create_question(
    request: QuestionRequest,
    token: Optional[str] = Depends(access_token),
    session: Session = Depends(get_session),
    service: QuestionService = Depends(get_question_service),
):
    """Post a new question as the signed-in user"""
    with unit_of_work(session):
        question = service.create_question(token, request.content)
        question_uuid = question.uuid
    return QuestionStatusResponse(id=question_uuid, status="QUESTION CREATED")


@router.get("/question/all", response_model=List[QuestionDetailsResponse])
def list_all_questions(
    token: Optional[str] = Depends(access_token),
    service: QuestionService = Depends(get_question_service),
):
    """List every question"""
    return _details(service.list_all_questions(token))


@router.put("/question/edit/{question_id}", response_model=QuestionStatusResponse)
def edit_question(
    question_id: str,
    request: QuestionRequest,
    token: Optional[str] = Depends(access_token),
    session: Session = Depends(get_session),
    service: QuestionService = Depends(get_question_service),
):
    """Replace the content of a question (owner only)"""
    with unit_of_work(session):
        question = service.edit_question(token, question_id, request.content)
        question_uuid = question.uuid
    return QuestionStatusResponse(id=question_uuid, status="QUESTION EDITED")


@router.delete("/question/delete/{question_id}", response_model=QuestionStatusResponse)
def delete_question(
    question_id: str,
    token: Optional[str] = Depends(access_token),
    session: Session = Depends(get_session),
    service: QuestionService = Depends(get_question_service),
):
    """Delete a question (owner or admin)"""
    with unit_of_work(session):
        question = service.delete_question(token, question_id)
    return QuestionStatusResponse(id=question.uuid, status="QUESTION DELETED")


@router.get("/question/all/{user_id}", response_model=List[QuestionDetailsResponse])
def list_questions_by_user(
    user_id: str,
    token: Optional[str] = Depends(access_token),
    service: QuestionService = Depends(get_question_service),
):
    """List the questions posted by one user"""
    return _details(service.list_questions_by_user(token, user_id))

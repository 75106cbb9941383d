"""
mathify/api/routes/questions.py
Question generation and dispatch coverage endpoints.
"""
from typing import List

from fastapi import APIRouter

from mathify.api.schemas import QuestionOut, QuestionRequest
from mathify.core.coverage import coverage_report
from mathify.math_engine.engine import generate_questions_for_topic

router = APIRouter()


@router.post("/questions", response_model=List[QuestionOut], response_model_exclude_none=True)
def questions(payload: QuestionRequest):
    batch = generate_questions_for_topic(
        payload.topic.model_dump(),
        count=payload.count,
        index=payload.index,
        seed=payload.seed,
    )
    return [q.to_dict() for q in batch]


@router.get("/coverage")
def get_coverage():
    return coverage_report()

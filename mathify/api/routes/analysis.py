"""
mathify/api/routes/analysis.py
Progress analysis endpoints: analyze, learning path, per-topic difficulty.
"""
from fastapi import APIRouter

from mathify.api.schemas import (
    AnalyzeRequest, AnalyzeResponse, DifficultyResponse,
    LearningPathRequest, LearningPathResponse, ProgressRecordIn,
)
from mathify.progress.classifier import calculate_difficulty
from mathify.progress.recommender import analyze_student_performance, recommend_learning_path

router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(payload: AnalyzeRequest):
    data = payload.model_dump()
    result = analyze_student_performance(data["studentData"], data["curriculumTopics"])
    return result.to_dict()


@router.post("/learning-path", response_model=LearningPathResponse)
def learning_path(payload: LearningPathRequest):
    data = payload.model_dump()
    return recommend_learning_path(data["studentData"], data["availableTopics"]).to_dict()


@router.post("/difficulty", response_model=DifficultyResponse)
def difficulty(payload: ProgressRecordIn):
    return {"level": calculate_difficulty(payload.model_dump())}

"""
mathify/api/schemas.py
All Pydantic request/response models for the API layer.
No logic here, only data shapes. Field values inside a well-shaped body stay
loose; the engine normalizes them instead of rejecting.
"""
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

from mathify.config import DEFAULT_QUESTION_COUNT, MAX_QUESTION_COUNT


# --- Progress / catalog ---

class ProgressRecordIn(BaseModel):
    topic_id: Any = None
    progress_percentage: Any = 0
    completed: bool = False
    best_score: Any = 0
    attempts: Any = 0
    topic_title: Optional[str] = None


class CurriculumTopicIn(BaseModel):
    id: Any = None
    grade: Any = None
    category: Optional[str] = None
    learning_outcome: Optional[str] = None
    order_index: Any = 0
    topic_code: Optional[str] = None
    topic_title: Optional[str] = None


class StudentDataIn(BaseModel):
    grade: Any = None
    progress: List[ProgressRecordIn] = []


class AnalyzeRequest(BaseModel):
    studentData: StudentDataIn
    curriculumTopics: List[CurriculumTopicIn] = []


class LearningPathRequest(BaseModel):
    studentData: StudentDataIn
    availableTopics: List[CurriculumTopicIn] = []


class Statistics(BaseModel):
    averageScore: int
    completionRate: int
    totalTopics: int
    completedTopics: int
    inProgressTopics: int
    notStartedTopics: int


class AnalyzeResponse(BaseModel):
    summary: str
    strengths: List[str]
    weaknesses: List[str]
    recommendedTopics: List[str]
    remedialActions: List[str]
    difficultyAdjustment: str
    statistics: Statistics
    encouragement: str


class LearningPathResponse(BaseModel):
    nextTopics: List[str]
    reasoning: str
    prerequisites: List[str]
    estimatedTime: str


class DifficultyResponse(BaseModel):
    level: int = Field(..., ge=1, le=5)


# --- Questions ---

class QuestionRequest(BaseModel):
    topic: CurriculumTopicIn
    count: int = Field(DEFAULT_QUESTION_COUNT, ge=1, le=MAX_QUESTION_COUNT)
    index: int = Field(0, ge=0)
    seed: Optional[int] = None


class QuestionOut(BaseModel):
    question: str
    type: str
    options: Optional[List[str]] = None
    correctAnswer: Union[int, float]
    icon: str

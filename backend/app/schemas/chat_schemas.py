# backend/app/schemas/chat_schemas.py
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class IncomingMessage(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str


class TaskConfig(BaseModel):
    topic: Optional[str] = None
    objective: Optional[str] = None
    subject: Optional[str] = None
    grade: Optional[str] = None
    durationMin: Optional[str] = None


class StudentProfile(BaseModel):
    name: Optional[str] = None
    age: Optional[str] = None
    course: Optional[str] = None
    strengths: Optional[str] = None
    challenges: Optional[str] = None


class ChatRequest(BaseModel):
    messages: List[IncomingMessage] = []
    systemPrompt: Optional[str] = None
    model: Optional[str] = None
    apiKey: Optional[str] = None
    taskConfig: Optional[TaskConfig] = None
    student: Optional[StudentProfile] = None
    start: bool = False


class EvaluationStatus(str, Enum):
    APPROVED = "Aprobado"
    IN_PROGRESS = "En proceso"


class EvaluationRecord(BaseModel):
    status: EvaluationStatus = EvaluationStatus.IN_PROGRESS
    score: int = Field(default=0, ge=0, le=100)
    weakConcepts: List[str] = []
    nextActions: List[str] = []
    summary: Optional[str] = None

    def to_wire(self) -> dict:
        # summary is left out entirely when the model did not provide one
        return self.model_dump(mode="json", exclude_none=True)


class ChatResponse(BaseModel):
    text: str
    evaluation: Optional[EvaluationRecord] = None


class ErrorResponse(BaseModel):
    error: str

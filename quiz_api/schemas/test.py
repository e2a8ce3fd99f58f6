"""
Pydantic schemas for test-related requests and responses
"""
from pydantic import BaseModel, Field
from typing import List, Any, Optional
from uuid import UUID
from datetime import datetime

from quiz_api.schemas.tag import TagRef, TagResponse
from quiz_api.schemas.review import ReviewResponse


class QuestionIn(BaseModel):
    """Question as submitted by the admin editor"""
    question_text: Optional[str] = None
    options: Optional[List[Any]] = None
    correct_answer: Any = None  # index or text, stored as text
    points: Optional[int] = Field(None, description="Defaults to 1 when omitted")


class TestCreate(BaseModel):
    """Schema for creating a test"""
    title: Optional[str] = None
    description: Optional[str] = None
    questions: List[QuestionIn]
    tags: Optional[List[TagRef]] = None
    created_by: Optional[UUID] = None


class TestUpdate(BaseModel):
    """Schema for replacing a test's content"""
    title: Optional[str] = None
    description: Optional[str] = None
    questions: List[QuestionIn]
    tags: Optional[List[TagRef]] = None
    updated_by: Optional[UUID] = None


class TestDelete(BaseModel):
    user_id: Optional[UUID] = None


class QuestionResponse(BaseModel):
    """Stored question"""
    id: UUID
    test_id: UUID
    question_text: str
    options: Optional[List[Any]] = None
    correct_answer: Optional[str] = None
    points: int
    order_index: int

    class Config:
        from_attributes = True


class TestResponse(BaseModel):
    """Plain test row"""
    id: UUID
    title: str
    description: Optional[str] = None
    question_count: int
    total_points: int
    is_published: bool
    average_rating: float = 0
    review_count: int = 0
    created_by: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TestSummary(TestResponse):
    """List item with questions, tags and a live rating"""
    questions: List[QuestionResponse] = []
    tags: List[TagResponse] = []


class TestDetail(TestResponse):
    """Single test with everything needed to take it"""
    questions: List[QuestionResponse] = []
    tags: List[TagResponse] = []
    reviews: List[ReviewResponse] = []


class TestEnvelope(BaseModel):
    success: bool = True
    data: TestResponse


class SuccessResponse(BaseModel):
    success: bool = True

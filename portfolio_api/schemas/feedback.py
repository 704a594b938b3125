"""
답변 피드백 스키마
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import ConfigDict, Field, model_validator

from portfolio_api.schemas.base import CamelModel

Sentiment = Literal["up", "down"]

FeedbackReason = Literal[
    "incorrect_data",
    "outdated",
    "not_relevant",
    "unclear",
    "missing_info",
    "wrong_timeframe",
    "wrong_accounts",
    "other",
]


class FeedbackRequest(CamelModel):
    """피드백 요청 (👍 up / 👎 down)"""
    answer_id: Optional[str] = None
    question_id: Optional[str] = None
    question: str = Field(..., min_length=1, description="피드백 대상 질문 원문")
    sentiment: Sentiment
    reasons: Optional[List[FeedbackReason]] = Field(None, description="down일 때 사유 코드")
    comment: Optional[str] = Field(None, max_length=1000)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "answerId": "0f0b6c1e-4c1d-4a53-9f62-1f3c2b8e9a10",
                "question": "What's the YTD performance vs S&P 500?",
                "sentiment": "down",
                "reasons": ["outdated"],
                "comment": "Numbers look like last quarter's."
            }
        },
    )

    @model_validator(mode="after")
    def require_reason_for_negative(self) -> "FeedbackRequest":
        # down 피드백은 사유 1개 이상 또는 코멘트 필수
        if self.sentiment == "down" and not self.reasons and not (self.comment or "").strip():
            raise ValueError(
                "Please select at least one reason or provide additional details."
            )
        return self


class Feedback(CamelModel):
    """저장된 피드백 (append-only)"""
    id: str
    answer_id: Optional[str] = None
    question_id: Optional[str] = None
    question: Optional[str] = None
    sentiment: Sentiment
    reasons: List[str] = Field(default_factory=list)
    comment: Optional[str] = None
    created_at: datetime


class FeedbackResponse(CamelModel):
    """피드백 저장 응답"""
    id: str
    message: str
    feedback: Feedback

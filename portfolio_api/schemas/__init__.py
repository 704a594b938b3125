"""
API 요청/응답 데이터 구조
"""
from portfolio_api.schemas.answers import Answer, AnswerCreate, AnswerPayload, AnswerUpdate
from portfolio_api.schemas.feedback import Feedback, FeedbackRequest, FeedbackResponse
from portfolio_api.schemas.questions import (
    MatchedResponse,
    NoMatchResponse,
    Question,
    QuestionContext,
    QuestionRequest,
    QuestionResponse,
    ReviewResponse,
)

__all__ = [
    # Questions
    "QuestionRequest",
    "QuestionContext",
    "Question",
    "QuestionResponse",
    "MatchedResponse",
    "ReviewResponse",
    "NoMatchResponse",

    # Answers
    "Answer",
    "AnswerPayload",
    "AnswerCreate",
    "AnswerUpdate",

    # Feedback
    "FeedbackRequest",
    "Feedback",
    "FeedbackResponse",
]

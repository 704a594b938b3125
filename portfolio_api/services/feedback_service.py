"""
피드백 서비스
"""
from typing import List

from fastapi import HTTPException

from portfolio_api.logger import get_logger
from portfolio_api.schemas.feedback import Feedback, FeedbackRequest, FeedbackResponse
from portfolio_api.storage.memory_storage import MemoryStorage

logger = get_logger(__name__)

POSITIVE_MESSAGE = "Thank you for your positive feedback!"
NEGATIVE_MESSAGE = "Thank you for your feedback. We'll use this to improve our responses."


def submit_feedback(storage: MemoryStorage, req: FeedbackRequest) -> FeedbackResponse:
    """
    피드백 저장

    answer_id / question_id 존재 여부는 확인하지 않음 (fallback 답변 피드백도 허용)

    Args:
        storage: 앱 저장소
        req: FeedbackRequest (answer_id, question_id, question, sentiment, reasons, comment)

    Returns:
        FeedbackResponse (id, message, feedback)
    """
    try:
        feedback = storage.feedback.create_feedback(
            sentiment=req.sentiment,
            answer_id=req.answer_id,
            question_id=req.question_id,
            question=req.question,
            reasons=req.reasons,
            comment=req.comment
        )
        logger.info(f"✅ [submit_feedback] {feedback.sentiment} 피드백 저장 (answer={feedback.answer_id})")

        return FeedbackResponse(
            id=feedback.id,
            message=POSITIVE_MESSAGE if feedback.sentiment == "up" else NEGATIVE_MESSAGE,
            feedback=feedback
        )

    except Exception as e:
        logger.exception(f"❌ [submit_feedback] 오류: {e}")
        raise HTTPException(status_code=500, detail="Failed to submit feedback")


def get_feedback(storage: MemoryStorage, feedback_id: str) -> Feedback:
    """피드백 단건 조회"""
    feedback = storage.feedback.get_feedback(feedback_id)
    if not feedback:
        raise HTTPException(
            status_code=404,
            detail=f"Feedback ID '{feedback_id}' not found"
        )
    return feedback


def list_feedback(storage: MemoryStorage) -> List[Feedback]:
    """전체 피드백"""
    try:
        return storage.feedback.list_feedback()
    except Exception as e:
        logger.exception(f"❌ [list_feedback] 오류: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch feedback")


def list_feedback_for_answer(storage: MemoryStorage, answer_id: str) -> List[Feedback]:
    """특정 답변의 피드백 (없는 답변 ID면 빈 목록)"""
    try:
        return storage.feedback.get_feedback_for_answer(answer_id)
    except Exception as e:
        logger.exception(f"❌ [list_feedback_for_answer] 오류: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch feedback")

"""
피드백 저장소

answer_id/question_id 존재 여부는 검사하지 않음 (fallback 답변 ID 등도 그대로 저장)
"""
import uuid
from datetime import datetime
from typing import Dict, List, Optional

from portfolio_api.schemas.feedback import Feedback, Sentiment


class FeedbackStore:
    """피드백 (append-only)"""

    def __init__(self):
        self._feedbacks: Dict[str, Feedback] = {}

    def create_feedback(
        self,
        sentiment: Sentiment,
        answer_id: Optional[str] = None,
        question_id: Optional[str] = None,
        question: Optional[str] = None,
        reasons: Optional[List[str]] = None,
        comment: Optional[str] = None
    ) -> Feedback:
        """피드백 저장 (검증 없음 - 요청 검증은 API 스키마에서 수행)"""
        feedback = Feedback(
            id=str(uuid.uuid4()),
            answer_id=answer_id or None,
            question_id=question_id or None,
            question=question,
            sentiment=sentiment,
            reasons=list(reasons or []),
            comment=comment or None,
            created_at=datetime.now()
        )
        self._feedbacks[feedback.id] = feedback
        return feedback

    def get_feedback(self, feedback_id: str) -> Optional[Feedback]:
        """피드백 조회"""
        return self._feedbacks.get(feedback_id)

    def get_feedback_for_answer(self, answer_id: str) -> List[Feedback]:
        """특정 답변의 모든 피드백"""
        return [fb for fb in self._feedbacks.values() if fb.answer_id == answer_id]

    def list_feedback(self) -> List[Feedback]:
        """전체 피드백 (저장 순서)"""
        return list(self._feedbacks.values())

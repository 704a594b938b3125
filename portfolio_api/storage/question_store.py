"""
질문 저장소 (메모리 기반)

질문은 삭제하지 않음 - status/matched_answer_id/updated_at만 변경
"""
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from portfolio_api.schemas.questions import Question, QuestionStatus


class QuestionStore:
    """질문 이력"""

    def __init__(self):
        self._questions: Dict[str, Question] = {}

    def create_question(self, question: str, context: Optional[Dict[str, Any]] = None) -> Question:
        """질문 저장 (status = pending)"""
        now = datetime.now()
        record = Question(
            id=str(uuid.uuid4()),
            question=question,
            context=context,
            status="pending",
            matched_answer_id=None,
            created_at=now,
            updated_at=now
        )
        self._questions[record.id] = record
        return record

    def get_question(self, question_id: str) -> Optional[Question]:
        """질문 조회"""
        return self._questions.get(question_id)

    def update_question_status(
        self,
        question_id: str,
        status: QuestionStatus,
        matched_answer_id: Optional[str] = None
    ) -> Optional[Question]:
        """
        상태 변경

        matched_answer_id는 status가 matched일 때만 저장 (그 외에는 None)
        """
        question = self._questions.get(question_id)
        if question is None:
            return None

        updated = question.model_copy(update={
            "status": status,
            "matched_answer_id": matched_answer_id if status == "matched" else None,
            "updated_at": datetime.now()
        })
        self._questions[question_id] = updated
        return updated

    def get_questions_for_review(self) -> List[Question]:
        """어드바이저 검토 대기 질문 (status = review)"""
        return [q for q in self._questions.values() if q.status == "review"]

    def list_questions(self) -> List[Question]:
        """전체 질문 (저장 순서)"""
        return list(self._questions.values())

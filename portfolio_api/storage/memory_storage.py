"""
저장소 묶음

앱 시작 시 1회 생성 → app.state.storage 에 보관 → 요청마다 의존성 주입
프로세스(워커)마다 독립된 복사본을 가지므로 여러 워커 간 상태는 공유되지 않음
"""
from typing import Any, Dict, Iterable, Optional

from portfolio_api.logger import get_logger
from portfolio_api.storage.answer_store import AnswerStore
from portfolio_api.storage.catalog import DEFAULT_ANSWERS
from portfolio_api.storage.feedback_store import FeedbackStore
from portfolio_api.storage.question_store import QuestionStore

logger = get_logger(__name__)


class MemoryStorage:
    """답변/질문/피드백 저장소를 하나로 묶은 객체"""

    def __init__(self, catalog: Optional[Iterable[Dict[str, Any]]] = DEFAULT_ANSWERS):
        """
        Args:
            catalog: 초기 적재할 답변 목록 (None이면 빈 카탈로그)
        """
        self.answers = AnswerStore()
        self.questions = QuestionStore()
        self.feedback = FeedbackStore()

        if catalog is not None:
            count = self.answers.seed(catalog)
            logger.info(f"✅ [MemoryStorage] 기본 답변 {count}개 적재 완료")

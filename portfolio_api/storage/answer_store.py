"""
답변 저장소 (메모리 기반)

프로덕션에서는 DB(PostgreSQL 등)로 교체 가능 - 메서드 시그니처만 유지하면 됨
"""
import copy
import re
import uuid
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from portfolio_api.schemas.answers import Answer


class AnswerStore:
    """답변 카탈로그 (삽입 순서 유지)"""

    def __init__(self):
        self._answers: Dict[str, Answer] = {}

    def create_answer(
        self,
        title: str,
        content: str,
        category: Optional[str] = None,
        keywords: Optional[List[str]] = None,
        answer_type: Optional[str] = None,
        data: Optional[Any] = None
    ) -> Answer:
        """답변 저장 (항상 활성 상태로 생성)"""
        now = datetime.now()
        answer = Answer(
            id=str(uuid.uuid4()),
            title=title,
            content=content,
            category=category or None,
            keywords=list(keywords or []),
            answer_type=answer_type or None,
            data=data,
            is_active=True,
            created_at=now,
            updated_at=now
        )
        self._answers[answer.id] = answer
        return answer

    def seed(self, catalog: Iterable[Dict[str, Any]]) -> int:
        """
        기본 카탈로그 적재

        Args:
            catalog: create_answer 인자와 같은 키를 가진 dict 목록

        Returns:
            적재된 답변 수
        """
        count = 0
        for item in catalog:
            self.create_answer(**copy.deepcopy(item))
            count += 1
        return count

    def get_answer(self, answer_id: str) -> Optional[Answer]:
        """답변 조회 (비활성 포함)"""
        return self._answers.get(answer_id)

    def update_answer(self, answer_id: str, **changes: Any) -> Optional[Answer]:
        """
        답변 수정

        Args:
            answer_id: 답변 ID
            **changes: 변경할 필드 (title, content, category, keywords, answer_type, data, is_active)

        Returns:
            수정된 답변 or None (없는 ID)
        """
        answer = self._answers.get(answer_id)
        if answer is None:
            return None

        updated = answer.model_copy(update={**changes, "updated_at": datetime.now()})
        self._answers[answer_id] = updated
        return updated

    def set_active(self, answer_id: str, is_active: bool) -> Optional[Answer]:
        """활성/비활성 전환"""
        return self.update_answer(answer_id, is_active=is_active)

    def list_answers(self) -> List[Answer]:
        """활성 답변 전체 (저장 순서)"""
        return [a for a in self._answers.values() if a.is_active]

    def get_answers_by_category(self, category: str) -> List[Answer]:
        """카테고리가 정확히 일치하는 활성 답변"""
        return [a for a in self.list_answers() if a.category == category]

    def search_answers(self, query: str) -> List[Answer]:
        """
        전문 검색 (점수 없음)

        질의를 공백으로 나눈 단어 중 하나라도 제목/본문/카테고리/키워드에 포함되면 결과에 포함
        """
        terms = [t for t in re.split(r"\s+", query.lower()) if t]
        if not terms:
            return []

        results = []
        for answer in self.list_answers():
            searchable = " ".join(
                [answer.title, answer.content, answer.category or "", *answer.keywords]
            ).lower()
            if any(term in searchable for term in terms):
                results.append(answer)
        return results

    def __len__(self) -> int:
        return len(self._answers)

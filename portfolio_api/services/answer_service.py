"""
답변 카탈로그 서비스

목록/검색/생성/수정 (관리자용)
"""
from typing import List, Optional

from fastapi import HTTPException

from portfolio_api.logger import get_logger
from portfolio_api.schemas.answers import Answer, AnswerCreate, AnswerUpdate
from portfolio_api.storage.memory_storage import MemoryStorage

logger = get_logger(__name__)


def list_answers(storage: MemoryStorage, category: Optional[str] = None) -> List[Answer]:
    """
    활성 답변 목록

    Args:
        storage: 앱 저장소
        category: 지정 시 해당 카테고리만 (정확히 일치)
    """
    try:
        if category:
            return storage.answers.get_answers_by_category(category)
        return storage.answers.list_answers()
    except Exception as e:
        logger.exception(f"❌ [list_answers] 오류: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch answers")


def search_answers(storage: MemoryStorage, query: str) -> List[Answer]:
    """전문 검색 (단어 하나라도 포함되면 결과에 포함, 점수 없음)"""
    try:
        return storage.answers.search_answers(query)
    except Exception as e:
        logger.exception(f"❌ [search_answers] 오류: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch answers")


def get_answer(storage: MemoryStorage, answer_id: str) -> Answer:
    """답변 조회 (비활성 포함)"""
    answer = storage.answers.get_answer(answer_id)
    if not answer:
        raise HTTPException(
            status_code=404,
            detail=f"Answer ID '{answer_id}' not found"
        )
    return answer


def create_answer(storage: MemoryStorage, req: AnswerCreate) -> Answer:
    """답변 생성 → 즉시 매칭 대상에 포함"""
    try:
        answer = storage.answers.create_answer(
            title=req.title,
            content=req.content,
            category=req.category,
            keywords=req.keywords,
            answer_type=req.answer_type,
            data=req.data
        )
        logger.info(f"✅ [create_answer] '{answer.title}' 생성 ({answer.id})")
        return answer

    except Exception as e:
        logger.exception(f"❌ [create_answer] 오류: {e}")
        raise HTTPException(status_code=500, detail="Failed to create answer")


def update_answer(storage: MemoryStorage, answer_id: str, req: AnswerUpdate) -> Answer:
    """
    답변 수정 (요청에 포함된 필드만)

    is_active=false 로 보내면 매칭/목록/검색에서 제외됨
    """
    # category/answer_type/data 만 null로 비울 수 있음
    changes = {
        key: value
        for key, value in req.model_dump(exclude_unset=True).items()
        if value is not None or key in ("category", "answer_type", "data")
    }
    answer = storage.answers.update_answer(answer_id, **changes)
    if not answer:
        raise HTTPException(
            status_code=404,
            detail=f"Answer ID '{answer_id}' not found"
        )

    logger.info(f"[update_answer] {answer_id} 수정: {sorted(changes)}")
    return answer

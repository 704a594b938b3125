"""
질문 처리 서비스

질문 저장(pending) → 답변 매칭 → (실패 시) 분류 → 상태 갱신 → 응답 생성
"""
from typing import List

from fastapi import HTTPException

from portfolio_api.logger import get_logger
from portfolio_api.schemas.answers import AnswerPayload
from portfolio_api.schemas.questions import (
    MatchedResponse,
    NoMatchResponse,
    Question,
    QuestionRequest,
    QuestionResponse,
    ReviewResponse,
)
from portfolio_api.services.classification_service import (
    FALLBACK_TITLES,
    Classification,
    FallbackClassifier,
)
from portfolio_api.services.matching_service import QuestionMatcher
from portfolio_api.storage.memory_storage import MemoryStorage

logger = get_logger(__name__)

_classifier = FallbackClassifier()


def submit_question(storage: MemoryStorage, req: QuestionRequest) -> QuestionResponse:
    """
    질문 접수 및 답변 매칭

    Args:
        storage: 앱 저장소
        req: QuestionRequest (question, context, placeholders)

    Returns:
        MatchedResponse | ReviewResponse | NoMatchResponse
    """
    try:
        context = req.context.model_dump(by_alias=True, exclude_none=True) if req.context else None
        question = storage.questions.create_question(req.question, context)

        # 1. 답변 매칭
        matcher = QuestionMatcher(storage.answers)
        match = matcher.find_best_match(req.question, req.placeholders)

        if match:
            storage.questions.update_question_status(question.id, "matched", match.answer.id)
            logger.info(
                f"✅ [submit_question] matched '{match.answer.title}' "
                f"(score={match.score}, confidence={match.confidence})"
            )
            return MatchedResponse(
                id=question.id,
                answer=AnswerPayload.from_answer(match.answer),
                confidence=match.confidence,
                message=f"Found {match.confidence} confidence match"
            )

        # 2. 매칭 실패 → 분류
        classification = _classifier.classify(req.question)

        if classification.type == "financial_advice":
            # 어드바이저 검토 대기열 (답변 없음)
            storage.questions.update_question_status(question.id, "review")
            logger.info(f"[submit_question] review 대기열 등록: {question.id}")
            return ReviewResponse(id=question.id, message=classification.message)

        storage.questions.update_question_status(question.id, "no_match")
        logger.info(f"[submit_question] no_match ({classification.type}): {question.id}")
        return NoMatchResponse(
            id=question.id,
            answer=build_fallback_answer(classification),
            message=classification.message
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"❌ [submit_question] 오류: {e}")
        raise HTTPException(
            status_code=500,
            detail="Internal server error while processing question"
        )


def build_fallback_answer(classification: Classification) -> AnswerPayload:
    """분류 결과로 fallback 답변 카드 생성 (저장하지 않음)"""
    return AnswerPayload(
        id=f"fallback-{classification.type}",
        title=FALLBACK_TITLES.get(classification.type, "Portfolio Analysis"),
        content=classification.message,
        category="Fallback",
        answer_type=classification.type,
        data={
            "fallbackType": classification.type,
            "actionText": classification.action_text,
            "isUnmatched": True
        }
    )


def get_question(storage: MemoryStorage, question_id: str) -> Question:
    """질문 조회"""
    question = storage.questions.get_question(question_id)
    if not question:
        raise HTTPException(
            status_code=404,
            detail=f"Question ID '{question_id}' not found"
        )
    return question


def list_review_questions(storage: MemoryStorage) -> List[Question]:
    """어드바이저 검토 대기 질문 목록"""
    try:
        return storage.questions.get_questions_for_review()
    except Exception as e:
        logger.exception(f"❌ [list_review_questions] 오류: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch questions for review")

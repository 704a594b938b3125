"""
포트폴리오 Q&A API 엔드포인트

- 질문: POST /questions, GET /questions/review, GET /questions/{question_id}
- 답변: GET/POST /answers, GET /answers/search, GET/PATCH /answers/{answer_id}
- 피드백: GET/POST /feedback, GET /feedback/answer/{answer_id}, GET /feedback/{feedback_id}
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from portfolio_api.schemas.answers import Answer, AnswerCreate, AnswerUpdate
from portfolio_api.schemas.feedback import Feedback, FeedbackRequest, FeedbackResponse
from portfolio_api.schemas.questions import Question, QuestionRequest, QuestionResponse
from portfolio_api.services import answer_service, feedback_service, question_service
from portfolio_api.storage.memory_storage import MemoryStorage

router = APIRouter()


def get_storage(request: Request) -> MemoryStorage:
    """앱 시작 시 생성된 저장소 (의존성 주입)"""
    return request.app.state.storage


# ===== 질문 =====

@router.post("/questions", response_model=QuestionResponse, summary="질문 → 답변 매칭")
def submit_question(req: QuestionRequest, storage: MemoryStorage = Depends(get_storage)):
    """
    질문을 받아 기존 답변과 매칭합니다.

    - **question**: 사용자 질문 (필수)
    - **context**: (선택) 계좌/기간 선택 정보
    - **placeholders**: (선택) 질문의 {name} 치환값

    **응답 status:**
    - matched: 답변 + 신뢰도(high/medium/low)
    - review: 어드바이저 검토 대기열 등록 (답변 없음)
    - no_match: 안내용 fallback 답변
    """
    return question_service.submit_question(storage, req)


@router.get("/questions/review", response_model=List[Question], summary="검토 대기 질문 목록")
def list_review_questions(storage: MemoryStorage = Depends(get_storage)):
    """status가 review인 질문 (어드바이저용)"""
    return question_service.list_review_questions(storage)


@router.get("/questions/{question_id}", response_model=Question, summary="질문 조회")
def get_question(question_id: str, storage: MemoryStorage = Depends(get_storage)):
    return question_service.get_question(storage, question_id)


# ===== 답변 =====

@router.get("/answers", response_model=List[Answer], summary="활성 답변 목록")
def list_answers(
    category: Optional[str] = Query(None, description="카테고리 필터 (정확히 일치)"),
    storage: MemoryStorage = Depends(get_storage)
):
    return answer_service.list_answers(storage, category)


@router.post("/answers", response_model=Answer, summary="답변 생성 (관리자)")
def create_answer(req: AnswerCreate, storage: MemoryStorage = Depends(get_storage)):
    return answer_service.create_answer(storage, req)


@router.get("/answers/search", response_model=List[Answer], summary="답변 검색")
def search_answers(
    q: str = Query(..., min_length=1, description="검색어 (공백 구분, 하나라도 포함되면 결과)"),
    storage: MemoryStorage = Depends(get_storage)
):
    return answer_service.search_answers(storage, q)


@router.get("/answers/{answer_id}", response_model=Answer, summary="답변 조회")
def get_answer(answer_id: str, storage: MemoryStorage = Depends(get_storage)):
    return answer_service.get_answer(storage, answer_id)


@router.patch("/answers/{answer_id}", response_model=Answer, summary="답변 수정 / 비활성화")
def update_answer(answer_id: str, req: AnswerUpdate, storage: MemoryStorage = Depends(get_storage)):
    """
    보낸 필드만 수정합니다.

    - **isActive**: false면 매칭/목록/검색에서 제외
    """
    return answer_service.update_answer(storage, answer_id, req)


# ===== 피드백 =====

@router.post("/feedback", response_model=FeedbackResponse, summary="답변 피드백 저장")
def submit_feedback(req: FeedbackRequest, storage: MemoryStorage = Depends(get_storage)):
    """
    답변에 대한 👍/👎 평가를 저장합니다.

    - **sentiment**: up / down
    - **reasons**: down일 때 사유 코드 (사유 또는 comment 중 하나는 필수)
    - **comment**: 최대 1000자
    """
    return feedback_service.submit_feedback(storage, req)


@router.get("/feedback", response_model=List[Feedback], summary="전체 피드백")
def list_feedback(storage: MemoryStorage = Depends(get_storage)):
    return feedback_service.list_feedback(storage)


@router.get("/feedback/answer/{answer_id}", response_model=List[Feedback], summary="답변별 피드백")
def list_feedback_for_answer(answer_id: str, storage: MemoryStorage = Depends(get_storage)):
    return feedback_service.list_feedback_for_answer(storage, answer_id)


@router.get("/feedback/{feedback_id}", response_model=Feedback, summary="피드백 조회")
def get_feedback(feedback_id: str, storage: MemoryStorage = Depends(get_storage)):
    return feedback_service.get_feedback(storage, feedback_id)

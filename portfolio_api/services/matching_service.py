"""
질문 → 답변 매칭 서비스

키워드 점수 기반 (임베딩/NLP 없음)

점수 규칙 (정규화된 질문 문자열 기준, 모두 소문자 부분 문자열 포함 여부):
- 답변 제목 포함       +100
- 키워드 1개 포함마다   +10
- 카테고리 포함        +20
- answer_type 포함    +15

최고 점수가 10 미만이면 매칭 없음
신뢰도: 50 이상 high / 25 이상 medium / 10 이상 low
"""
import re
from dataclasses import dataclass
from typing import Dict, Optional

from portfolio_api.logger import get_logger
from portfolio_api.schemas.answers import Answer
from portfolio_api.schemas.questions import Confidence
from portfolio_api.storage.answer_store import AnswerStore

logger = get_logger(__name__)

TITLE_SCORE = 100
KEYWORD_SCORE = 10
CATEGORY_SCORE = 20
ANSWER_TYPE_SCORE = 15

MIN_MATCH_SCORE = 10
MEDIUM_CONFIDENCE_SCORE = 25
HIGH_CONFIDENCE_SCORE = 50

# {benchmark}, {timeframe} ...
_PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


@dataclass(frozen=True)
class MatchResult:
    """매칭 결과"""
    answer: Answer
    confidence: Confidence
    score: int


def normalize_question(question: str, placeholders: Optional[Dict[str, str]] = None) -> str:
    """
    질문 정규화 (소문자 + 플레이스홀더 치환)

    한 번의 정규식 패스로 {name} 토큰을 모두 치환 (키 대소문자 무시)
    치환값이 없는 토큰은 "{name}" 그대로 남겨 일반 텍스트로 매칭에 참여

    Args:
        question: 원본 질문
        placeholders: {"benchmark": "S&P 500", ...}

    Returns:
        매칭용 문자열
    """
    normalized = question.lower()
    if not placeholders:
        return normalized

    values = {key.lower(): value.lower() for key, value in placeholders.items()}

    def _replace(match: re.Match) -> str:
        return values.get(match.group(1), match.group(0))

    return _PLACEHOLDER_PATTERN.sub(_replace, normalized)


def score_answer(answer: Answer, normalized_question: str) -> int:
    """답변 1개의 점수 계산 (normalized_question은 이미 소문자)"""
    score = 0

    if answer.title.lower() in normalized_question:
        score += TITLE_SCORE

    for keyword in answer.keywords:
        if keyword.lower() in normalized_question:
            score += KEYWORD_SCORE

    if answer.category and answer.category.lower() in normalized_question:
        score += CATEGORY_SCORE

    if answer.answer_type and answer.answer_type.lower() in normalized_question:
        score += ANSWER_TYPE_SCORE

    return score


def confidence_for(score: int) -> Optional[Confidence]:
    """점수 → 신뢰도 (MIN_MATCH_SCORE 미만이면 None)"""
    if score >= HIGH_CONFIDENCE_SCORE:
        return "high"
    if score >= MEDIUM_CONFIDENCE_SCORE:
        return "medium"
    if score >= MIN_MATCH_SCORE:
        return "low"
    return None


class QuestionMatcher:
    """
    저장된 활성 답변 중 질문과 가장 잘 맞는 답변 선택

    주요 메서드:
    - find_best_match(question, placeholders) → MatchResult or None
    """

    def __init__(self, answer_store: AnswerStore):
        self.answer_store = answer_store

    def find_best_match(
        self,
        question: str,
        placeholders: Optional[Dict[str, str]] = None
    ) -> Optional[MatchResult]:
        """
        최고 점수 답변 조회

        저장 순서대로 훑으면서 기존 최고 점수보다 "엄격히" 클 때만 교체 (동점이면 먼저 본 답변 유지)

        Args:
            question: 사용자 질문
            placeholders: 플레이스홀더 치환값

        Returns:
            MatchResult (answer, confidence, score) or None (매칭 없음)
        """
        normalized = normalize_question(question, placeholders)

        best_answer: Optional[Answer] = None
        best_score = 0

        for answer in self.answer_store.list_answers():
            score = score_answer(answer, normalized)
            if score > best_score:
                best_score = score
                best_answer = answer

        confidence = confidence_for(best_score)
        if best_answer is None or confidence is None:
            logger.debug(f"[find_best_match] 매칭 없음 (최고 점수 {best_score}): {normalized!r}")
            return None

        logger.debug(
            f"[find_best_match] '{best_answer.title}' 선택 (점수 {best_score}, {confidence})"
        )
        return MatchResult(answer=best_answer, confidence=confidence, score=best_score)

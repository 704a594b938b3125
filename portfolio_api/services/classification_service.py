"""
매칭 실패 질문 분류 서비스

키워드 그룹을 우선순위대로 검사 → 처음 걸린 그룹으로 분류
1. personal          (개인/계좌 정보)
2. market            (시장 데이터/전망)
3. financial_advice  (투자 자문 → 어드바이저 검토 대기열)
4. portfolio         (기본값)
"""
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

FallbackType = Literal["personal", "market", "financial_advice", "portfolio"]


@dataclass(frozen=True)
class Classification:
    """분류 결과"""
    type: FallbackType
    message: str
    action_text: Optional[str] = None


PERSONAL_KEYWORDS = (
    "name", "address", "phone", "email", "advisor", "contact",
    "who am i", "my information", "account details",
)
MARKET_KEYWORDS = (
    "stock price", "market news", "interest rates", "fed", "inflation",
    "earnings", "when will", "what will happen",
)
ADVICE_KEYWORDS = (
    "should i", "what should", "recommend", "advice", "strategy",
    "buy", "sell", "rebalance", "allocate",
)

PERSONAL = Classification(
    type="personal",
    message=(
        "I can help with portfolio analysis, but I don't have access to personal account "
        "information. You can find your account details in the main dashboard or contact "
        "your advisor directly."
    ),
    action_text="View Account Details",
)
MARKET = Classification(
    type="market",
    message=(
        "I specialize in your portfolio analysis. For real-time market data or economic "
        "forecasts, I'd recommend checking your trading platform or financial news sources."
    ),
    action_text="Open Market Data",
)
FINANCIAL_ADVICE = Classification(
    type="financial_advice",
    message=(
        "This is a great question for personalized advice. I've added it to your advisor's "
        "review queue for detailed analysis. You should receive a response within 24 hours."
    ),
    action_text="Track Review Status",
)
PORTFOLIO = Classification(
    type="portfolio",
    message=(
        "I don't have specific data for this portfolio question yet. I've added it to our "
        "development queue to enhance my capabilities. Meanwhile, your advisor can provide "
        "detailed insights."
    ),
    action_text="Contact Advisor",
)

# 순서 = 우선순위
_RULES: Tuple[Tuple[Tuple[str, ...], Classification], ...] = (
    (PERSONAL_KEYWORDS, PERSONAL),
    (MARKET_KEYWORDS, MARKET),
    (ADVICE_KEYWORDS, FINANCIAL_ADVICE),
)

# fallback 답변 카드 제목
FALLBACK_TITLES = {
    "personal": "Account Information",
    "market": "Market Data",
    "portfolio": "Portfolio Analysis",
}


class FallbackClassifier:
    """키워드 기반 규칙 분류기 (상태 없음)"""

    def classify(self, question: str) -> Classification:
        """
        질문 분류

        Args:
            question: 사용자 질문 (원문, 플레이스홀더 치환 전)

        Returns:
            Classification (type, message, action_text)
        """
        question_lower = question.lower()

        for keywords, classification in _RULES:
            if any(keyword in question_lower for keyword in keywords):
                return classification

        return PORTFOLIO

"""
Portfolio Q&A API 설정

사용 방법:
1. 환경변수로 설정 (또는 .env 파일)
   export PORTFOLIO_API_PORT=8080

2. 또는 이 파일에서 기본값 직접 수정

설정 항목:
  PORTFOLIO_API_TITLE         ← Swagger 제목
  PORTFOLIO_API_PREFIX        ← 모든 엔드포인트 앞에 붙는 경로 (예: "/api")
  PORTFOLIO_API_HOST / PORT   ← uvicorn 바인딩 주소
  PORTFOLIO_API_LOG_LEVEL     ← DEBUG, INFO, WARNING ...
  PORTFOLIO_API_CORS_ORIGINS  ← 쉼표 구분 (기본 "*")
  PORTFOLIO_API_SEED_ANSWERS  ← 시작 시 기본 답변 카탈로그 적재 여부
"""

import os

from dotenv import load_dotenv

load_dotenv()

# ===== 서버 =====
APP_TITLE = os.getenv("PORTFOLIO_API_TITLE", "Portfolio Q&A API")
APP_VERSION = "1.0.0"
API_PREFIX = os.getenv("PORTFOLIO_API_PREFIX", "").rstrip("/")

HOST = os.getenv("PORTFOLIO_API_HOST", "127.0.0.1")
PORT = int(os.getenv("PORTFOLIO_API_PORT", "8000"))

# ===== 로깅 =====
LOG_LEVEL = os.getenv("PORTFOLIO_API_LOG_LEVEL", "INFO").upper()

# ===== CORS =====
# 기본: 모든 출처 허용
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("PORTFOLIO_API_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# ===== 저장소 =====
# false면 빈 저장소로 시작 (테스트/관리자용)
SEED_ANSWERS = os.getenv("PORTFOLIO_API_SEED_ANSWERS", "true").lower() == "true"


def describe() -> dict:
    """현재 적용된 설정값"""
    return {
        "APP_TITLE": APP_TITLE,
        "APP_VERSION": APP_VERSION,
        "API_PREFIX": API_PREFIX or "(none)",
        "HOST": HOST,
        "PORT": PORT,
        "LOG_LEVEL": LOG_LEVEL,
        "CORS_ORIGINS": CORS_ORIGINS,
        "SEED_ANSWERS": SEED_ANSWERS,
    }


if __name__ == "__main__":
    # python -m portfolio_api.config 실행 시 설정 확인
    print("=" * 70)
    print("Portfolio Q&A API 설정")
    print("=" * 70)
    for key, value in describe().items():
        print(f"  - {key}: {value}")

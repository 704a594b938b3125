"""
API 점검 스크립트 (실행 중인 서버 대상)

서버 실행 후 다른 터미널에서 실행:
    python -m portfolio_api.check_api [BASE_URL]
"""
import json
import sys

import requests

from portfolio_api import config

BASE_URL = f"http://localhost:{config.PORT}{config.API_PREFIX}"


def print_json(title, data):
    """JSON 데이터를 보기 좋게 출력"""
    print(f"\n{title}")
    print(json.dumps(data, indent=2, ensure_ascii=False))


def check_health(base_url: str = BASE_URL) -> bool:
    """서버 상태 체크"""
    print("\n" + "=" * 80)
    print("🏥 서버 체크")
    print("=" * 80)

    root_url = base_url[: -len(config.API_PREFIX)] if config.API_PREFIX else base_url
    response = requests.get(f"{root_url}/health", timeout=5)

    if response.status_code != 200:
        print(f"❌ 서버 오류: HTTP {response.status_code}")
        return False

    print("✅ 서버 정상 작동")
    print_json("📥 Response:", response.json())
    return True


def check_question_flow(base_url: str = BASE_URL) -> None:
    """질문 3종 (matched / review / no_match) + 피드백 + 검토 대기열"""
    scenarios = [
        ("1️⃣  matched", {"question": "What's the YTD performance vs S&P 500?"}),
        ("2️⃣  review", {"question": "Should I rebalance toward small caps?"}),
        ("3️⃣  no_match", {"question": "What's my home address?"}),
    ]

    answer_id = None
    for label, body in scenarios:
        print("\n" + "=" * 80)
        print(f"{label}  POST /questions")
        print("=" * 80)
        print_json("📤 Request:", body)

        response = requests.post(f"{base_url}/questions", json=body, timeout=10)
        if response.status_code != 200:
            print(f"\n❌ 오류 발생: HTTP {response.status_code}")
            print(response.text)
            return

        data = response.json()
        display = dict(data)
        if display.get("answer"):
            # 본문/데이터는 길어서 제목만
            display["answer"] = {"id": data["answer"]["id"], "title": data["answer"]["title"]}
        print_json("📥 Response:", display)

        if data["status"] == "matched":
            answer_id = data["answer"]["id"]
        print(f"\n✅ status: {data['status']}")

    # ===== 피드백 =====
    print("\n" + "=" * 80)
    print("4️⃣  POST /feedback")
    print("=" * 80)

    feedback_body = {
        "answerId": answer_id,
        "question": scenarios[0][1]["question"],
        "sentiment": "down",
        "reasons": ["outdated"],
        "comment": "check_api 점검용"
    }
    print_json("📤 Request:", feedback_body)

    response = requests.post(f"{base_url}/feedback", json=feedback_body, timeout=10)
    if response.status_code != 200:
        print(f"\n❌ 오류 발생: HTTP {response.status_code}")
        print(response.text)
        return
    print_json("📥 Response:", response.json())

    if answer_id:
        response = requests.get(f"{base_url}/feedback/answer/{answer_id}", timeout=10)
        print(f"\n✅ 답변별 피드백: {len(response.json())}개")

    # ===== 검토 대기열 =====
    print("\n" + "=" * 80)
    print("5️⃣  GET /questions/review")
    print("=" * 80)
    response = requests.get(f"{base_url}/questions/review", timeout=10)
    print(f"✅ 검토 대기 질문: {len(response.json())}개")


if __name__ == "__main__":
    base_url = sys.argv[1].rstrip("/") if len(sys.argv) > 1 else BASE_URL
    try:
        if check_health(base_url):
            check_question_flow(base_url)

        print("\n" + "=" * 80)
        print("✅ 전체 점검 완료!")
        print("=" * 80)
        print(f"\n💡 Swagger UI에서도 테스트 가능: http://localhost:{config.PORT}/docs")

    except requests.exceptions.ConnectionError:
        print("\n" + "=" * 80)
        print("❌ 서버 연결 실패")
        print("=" * 80)
        print("\n서버를 먼저 실행하세요:")
        print("  uvicorn portfolio_api.main:app --reload")

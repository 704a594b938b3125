"""
API 테스트 (TestClient)
"""
from portfolio_api.services.feedback_service import NEGATIVE_MESSAGE, POSITIVE_MESSAGE


def ask(client, question, **extra):
    response = client.post("/questions", json={"question": question, **extra})
    assert response.status_code == 200
    return response.json()


# ===== 기본 =====

def test_root_lists_endpoints(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "questions" in response.json()["endpoints"]


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy", "answers": 13}


def test_options_preflight_is_empty_200(client):
    response = client.options("/questions")

    assert response.status_code == 200
    assert response.text == ""


def test_unsupported_method(client):
    response = client.delete("/questions")

    assert response.status_code == 405
    assert "message" in response.json()


# ===== 질문 =====

def test_matched_question(client):
    body = ask(client, "What's the YTD performance vs S&P 500?")

    assert body["status"] == "matched"
    assert body["confidence"] == "high"
    assert body["message"] == "Found high confidence match"
    assert body["answer"]["title"] == "YTD Performance vs S&P 500"
    assert body["answer"]["answerType"] == "performance"
    assert body["answer"]["data"]["portfolioReturn"] == 14.7

    stored = client.get(f"/questions/{body['id']}").json()
    assert stored["status"] == "matched"
    assert stored["matchedAnswerId"] == body["answer"]["id"]


def test_placeholders_and_context_are_accepted(client):
    body = ask(
        client,
        "What's the {timeframe} performance vs {benchmark}?",
        placeholders={"timeframe": "YTD", "benchmark": "S&P 500"},
        context={"accounts": ["Growth Portfolio"], "timeframe": "YTD", "selectionMode": "accounts"},
    )

    assert body["status"] == "matched"
    assert body["answer"]["title"] == "YTD Performance vs S&P 500"

    stored = client.get(f"/questions/{body['id']}").json()
    assert stored["context"]["selectionMode"] == "accounts"
    assert stored["question"] == "What's the {timeframe} performance vs {benchmark}?"


def test_advice_question_goes_to_review(empty_client):
    body = ask(empty_client, "Should I sell my tech stocks?")

    assert body["status"] == "review"
    assert "answer" not in body
    assert "advisor's review queue" in body["message"]

    stored = empty_client.get(f"/questions/{body['id']}").json()
    assert stored["status"] == "review"
    assert stored["matchedAnswerId"] is None

    queue = empty_client.get("/questions/review").json()
    assert [q["id"] for q in queue] == [body["id"]]


def test_advice_question_with_seeded_catalog(client):
    body = ask(client, "Should I rebalance toward small caps?")
    assert body["status"] == "review"


def test_personal_question_gets_fallback_answer(client):
    body = ask(client, "What's my home address?")

    assert body["status"] == "no_match"
    answer = body["answer"]
    assert answer["id"] == "fallback-personal"
    assert answer["title"] == "Account Information"
    assert answer["category"] == "Fallback"
    assert answer["answerType"] == "personal"
    assert answer["data"] == {
        "fallbackType": "personal",
        "actionText": "View Account Details",
        "isUnmatched": True,
    }
    assert answer["content"] == body["message"]

    stored = client.get(f"/questions/{body['id']}").json()
    assert stored["status"] == "no_match"
    assert client.get("/questions/review").json() == []


def test_generic_question_gets_portfolio_fallback(empty_client):
    body = ask(empty_client, "How is my cash drag trending?")

    assert body["status"] == "no_match"
    assert body["answer"]["id"] == "fallback-portfolio"
    assert body["answer"]["data"]["actionText"] == "Contact Advisor"


def test_missing_question_is_400(client):
    response = client.post("/questions", json={})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid request format"
    assert body["errors"]


def test_empty_question_is_400(client):
    response = client.post("/questions", json={"question": ""})
    assert response.status_code == 400


def test_unknown_question_is_404(client):
    response = client.get("/questions/nope")

    assert response.status_code == 404
    assert response.json() == {"message": "Question ID 'nope' not found"}


def test_question_processing_error_is_500(client, storage, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("storage down")

    monkeypatch.setattr(storage.questions, "create_question", boom)
    response = client.post("/questions", json={"question": "anything"})

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error while processing question"}


# ===== 답변 =====

def test_list_answers_camel_case(client):
    answers = client.get("/answers").json()

    assert len(answers) == 13
    first = answers[0]
    assert first["title"] == "YTD Performance vs S&P 500"
    for key in ("answerType", "isActive", "createdAt", "updatedAt"):
        assert key in first


def test_answers_by_category(client):
    answers = client.get("/answers", params={"category": "Risk"}).json()
    assert [a["category"] for a in answers] == ["Risk", "Risk"]


def test_search_answers(client):
    answers = client.get("/answers/search", params={"q": "dividend"}).json()
    assert "Dividend Income & Yield Analysis" in [a["title"] for a in answers]


def test_search_requires_query(client):
    response = client.get("/answers/search")

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request format"


def test_created_answer_is_matched_immediately(empty_client):
    created = empty_client.post(
        "/answers",
        json={
            "title": "Cash Position Overview",
            "content": "Cash is 3.1% of the portfolio.",
            "category": "Holdings",
            "keywords": ["cash", "liquidity"],
            "answerType": "holdings",
        },
    )
    assert created.status_code == 200
    answer = created.json()
    assert answer["isActive"] is True

    body = ask(empty_client, "Show me the cash position overview")
    assert body["status"] == "matched"
    assert body["answer"]["id"] == answer["id"]


def test_create_answer_requires_title(client):
    response = client.post("/answers", json={"content": "no title"})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid answer format"


def test_blank_title_is_rejected(empty_client):
    response = empty_client.post("/answers", json={"title": "   ", "content": "c"})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid answer format"

    # 저장되지 않았으므로 자문 질문은 그대로 검토 대기열로
    assert ask(empty_client, "Should I sell?")["status"] == "review"


def test_blank_keyword_is_rejected(empty_client):
    response = empty_client.post(
        "/answers", json={"title": "X", "content": "c", "keywords": ["cash", ""]}
    )

    assert response.status_code == 400
    assert empty_client.get("/answers").json() == []
    assert ask(empty_client, "completely unrelated")["status"] == "no_match"


def test_answer_fields_are_stripped(empty_client):
    answer = empty_client.post(
        "/answers",
        json={"title": "  Cash Drag ", "content": "c", "keywords": [" cash "], "category": " "},
    ).json()

    assert answer["title"] == "Cash Drag"
    assert answer["keywords"] == ["cash"]
    assert answer["category"] is None


def test_patch_rejects_blank_values(client):
    answer_id = client.get("/answers").json()[0]["id"]

    assert client.patch(f"/answers/{answer_id}", json={"title": " "}).status_code == 400
    assert client.patch(f"/answers/{answer_id}", json={"keywords": [" "]}).status_code == 400
    assert client.get(f"/answers/{answer_id}").json()["title"] == "YTD Performance vs S&P 500"


def test_listing_errors_are_500(client, storage, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("storage down")

    monkeypatch.setattr(storage.answers, "list_answers", boom)
    monkeypatch.setattr(storage.answers, "search_answers", boom)
    monkeypatch.setattr(storage.questions, "get_questions_for_review", boom)
    monkeypatch.setattr(storage.feedback, "list_feedback", boom)
    monkeypatch.setattr(storage.feedback, "get_feedback_for_answer", boom)

    expected = {
        "/answers": "Failed to fetch answers",
        "/answers?category=Risk": "Failed to fetch answers",
        "/answers/search?q=risk": "Failed to fetch answers",
        "/questions/review": "Failed to fetch questions for review",
        "/feedback": "Failed to fetch feedback",
        "/feedback/answer/a-1": "Failed to fetch feedback",
    }
    for url, message in expected.items():
        response = client.get(url)
        assert response.status_code == 500, url
        assert response.json() == {"message": message}


def test_deactivated_answer(client):
    answer_id = client.get("/answers").json()[0]["id"]

    response = client.patch(f"/answers/{answer_id}", json={"isActive": False})
    assert response.status_code == 200
    assert response.json()["isActive"] is False

    assert answer_id not in [a["id"] for a in client.get("/answers").json()]
    assert client.get(f"/answers/{answer_id}").json()["isActive"] is False

    body = ask(client, "YTD Performance vs S&P 500")
    assert body.get("answer", {}).get("id") != answer_id


def test_patch_only_changes_sent_fields(client):
    answer = client.get("/answers").json()[0]

    updated = client.patch(f"/answers/{answer['id']}", json={"title": "Renamed"}).json()

    assert updated["title"] == "Renamed"
    assert updated["content"] == answer["content"]
    assert updated["keywords"] == answer["keywords"]


def test_patch_unknown_answer_is_404(client):
    response = client.patch("/answers/nope", json={"title": "x"})

    assert response.status_code == 404
    assert response.json() == {"message": "Answer ID 'nope' not found"}


# ===== 피드백 =====

def test_positive_feedback(client):
    response = client.post(
        "/feedback",
        json={"answerId": "a-1", "question": "What's my beta?", "sentiment": "up"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == POSITIVE_MESSAGE
    assert body["feedback"]["sentiment"] == "up"
    assert body["feedback"]["reasons"] == []

    assert client.get(f"/feedback/{body['id']}").json()["answerId"] == "a-1"


def test_negative_feedback_with_reasons(client):
    response = client.post(
        "/feedback",
        json={
            "answerId": "a-1",
            "question": "What's my beta?",
            "sentiment": "down",
            "reasons": ["outdated", "wrong_timeframe"],
        },
    )

    assert response.status_code == 200
    assert response.json()["message"] == NEGATIVE_MESSAGE

    stored = client.get("/feedback/answer/a-1").json()
    assert [fb["reasons"] for fb in stored] == [["outdated", "wrong_timeframe"]]


def test_negative_feedback_with_comment_only(client):
    response = client.post(
        "/feedback",
        json={"question": "What's my beta?", "sentiment": "down", "comment": "Too vague"},
    )
    assert response.status_code == 200


def test_negative_feedback_needs_reason_or_comment(client):
    response = client.post(
        "/feedback",
        json={"question": "What's my beta?", "sentiment": "down", "comment": "   "},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid feedback format"
    assert client.get("/feedback").json() == []


def test_unknown_reason_code_is_400(client):
    response = client.post(
        "/feedback",
        json={"question": "q", "sentiment": "down", "reasons": ["too_long"]},
    )
    assert response.status_code == 400


def test_comment_too_long_is_400(client):
    response = client.post(
        "/feedback",
        json={"question": "q", "sentiment": "up", "comment": "x" * 1001},
    )
    assert response.status_code == 400


def test_feedback_for_fallback_answer_is_accepted(client):
    body = ask(client, "What's my home address?")

    response = client.post(
        "/feedback",
        json={
            "answerId": body["answer"]["id"],
            "questionId": body["id"],
            "question": "What's my home address?",
            "sentiment": "up",
        },
    )

    assert response.status_code == 200
    assert len(client.get("/feedback/answer/fallback-personal").json()) == 1


def test_unknown_feedback_is_404(client):
    response = client.get("/feedback/nope")

    assert response.status_code == 404
    assert response.json() == {"message": "Feedback ID 'nope' not found"}


def test_feedback_storage_error_is_500(client, storage, monkeypatch):
    def boom(**kwargs):
        raise RuntimeError("storage down")

    monkeypatch.setattr(storage.feedback, "create_feedback", boom)
    response = client.post("/feedback", json={"question": "q", "sentiment": "up"})

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to submit feedback"}


def test_feedback_accepts_snake_case_fields(client):
    response = client.post(
        "/feedback",
        json={"answer_id": "a-2", "question": "q", "sentiment": "up"},
    )

    assert response.status_code == 200
    assert response.json()["feedback"]["answerId"] == "a-2"

from portfolio_api.storage.answer_store import AnswerStore
from portfolio_api.storage.catalog import DEFAULT_ANSWERS
from portfolio_api.storage.feedback_store import FeedbackStore
from portfolio_api.storage.memory_storage import MemoryStorage
from portfolio_api.storage.question_store import QuestionStore


def test_seeded_catalog_keeps_order(storage):
    titles = [a.title for a in storage.answers.list_answers()]

    assert len(titles) == len(DEFAULT_ANSWERS) == 13
    assert titles[0] == "YTD Performance vs S&P 500"
    assert titles[-1] == "Market Volatility Impact"


def test_storages_do_not_share_catalog_data():
    first, second = MemoryStorage(), MemoryStorage()
    first.answers.list_answers()[0].data["portfolioReturn"] = 0

    assert second.answers.list_answers()[0].data["portfolioReturn"] == 14.7
    assert DEFAULT_ANSWERS[0]["data"]["portfolioReturn"] == 14.7


def test_create_answer_defaults():
    store = AnswerStore()
    answer = store.create_answer(title="Cash", content="Cash overview", category="")

    assert answer.is_active is True
    assert answer.category is None
    assert answer.keywords == []
    assert store.get_answer(answer.id) == answer


def test_deactivated_answer_is_excluded_from_listing():
    store = AnswerStore()
    answer = store.create_answer(title="Cash", content="Cash overview", category="Holdings")

    store.set_active(answer.id, False)

    assert answer.id not in [a.id for a in store.list_answers()]
    assert store.get_answers_by_category("Holdings") == []
    assert store.search_answers("cash") == []
    assert store.get_answer(answer.id).is_active is False


def test_update_answer_unknown_id():
    assert AnswerStore().update_answer("missing", title="x") is None


def test_answers_by_category_is_exact(storage):
    risk = storage.answers.get_answers_by_category("Risk")

    assert [a.title for a in risk] == ["Risk Metrics & Portfolio Beta", "Market Volatility Impact"]
    assert storage.answers.get_answers_by_category("risk") == []


def test_search_any_term(storage):
    titles = [a.title for a in storage.answers.search_answers("aristocrats zzzz")]
    assert titles == ["Dividend Income & Yield Analysis"]


def test_search_blank_query(storage):
    assert storage.answers.search_answers("   ") == []


def test_question_lifecycle():
    store = QuestionStore()
    question = store.create_question("What's my beta?", {"timeframe": "YTD"})
    assert question.status == "pending"
    assert question.matched_answer_id is None

    updated = store.update_question_status(question.id, "matched", "answer-1")
    assert updated.status == "matched"
    assert updated.matched_answer_id == "answer-1"
    assert updated.updated_at >= question.updated_at


def test_matched_answer_id_only_kept_for_matched():
    store = QuestionStore()
    question = store.create_question("Should I sell?")

    updated = store.update_question_status(question.id, "review", "answer-1")

    assert updated.matched_answer_id is None
    assert store.get_questions_for_review() == [updated]


def test_update_unknown_question():
    assert QuestionStore().update_question_status("missing", "review") is None


def test_feedback_store_accepts_unvalidated_input():
    store = FeedbackStore()
    feedback = store.create_feedback(sentiment="down", answer_id="does-not-exist")

    assert feedback.reasons == []
    assert feedback.comment is None
    assert store.get_feedback_for_answer("does-not-exist") == [feedback]
    assert store.list_feedback() == [feedback]

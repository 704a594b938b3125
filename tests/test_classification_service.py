import pytest

from portfolio_api.services.classification_service import FallbackClassifier


@pytest.fixture
def classifier():
    return FallbackClassifier()


@pytest.mark.parametrize(
    "question, expected_type, action_text",
    [
        ("What's my home address?", "personal", "View Account Details"),
        ("Who am I talking to?", "personal", "View Account Details"),
        ("What is the stock price of Apple?", "market", "Open Market Data"),
        ("When will rates come down?", "market", "Open Market Data"),
        ("Should I sell my tech stocks?", "financial_advice", "Track Review Status"),
        ("Time to rebalance?", "financial_advice", "Track Review Status"),
        ("How is my cash drag trending?", "portfolio", "Contact Advisor"),
    ],
)
def test_keyword_families(classifier, question, expected_type, action_text):
    result = classifier.classify(question)

    assert result.type == expected_type
    assert result.action_text == action_text


def test_personal_wins_over_advice(classifier):
    result = classifier.classify("Can my advisor recommend a fund?")
    assert result.type == "personal"


def test_market_wins_over_advice(classifier):
    result = classifier.classify("Should I buy before the Fed meets?")
    assert result.type == "market"


def test_is_case_insensitive(classifier):
    assert classifier.classify("SHOULD I REBALANCE").type == "financial_advice"


def test_messages(classifier):
    assert "advisor's review queue" in classifier.classify("Should I sell?").message
    assert "development queue" in classifier.classify("Cash drag?").message
    assert "trading platform" in classifier.classify("Any market news?").message
    assert "personal account information" in classifier.classify("My email?").message


def test_is_deterministic(classifier):
    question = "What will happen to my bonds?"
    assert classifier.classify(question) == classifier.classify(question)

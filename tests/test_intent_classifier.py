import pytest

from inventory_assistant.intent_classifier import Intent, IntentClassifier


@pytest.fixture
def classifier(en_locale):
    return IntentClassifier.from_patterns(en_locale.intent_patterns)


@pytest.mark.parametrize(
    "message, expected",
    [
        ("show low stock items", Intent.LOW_STOCK),
        ("Which items are LOW STOCK?", Intent.LOW_STOCK),
        ("anything lowstock today", Intent.LOW_STOCK),
        ("total value", Intent.TOTAL_VALUE),
        ("How much is the inventory worth?", Intent.TOTAL_VALUE),
        ("what's the inventory value", Intent.TOTAL_VALUE),
        ("total stock please", Intent.TOTAL_STOCK),
        ("How many units do we have", Intent.TOTAL_STOCK),
        ("how many different items are there", Intent.DISTINCT_COUNT),
        ("How many items?", Intent.DISTINCT_COUNT),
        ("add a new item with code X9", Intent.UNCLASSIFIED),
        ("", Intent.UNCLASSIFIED),
        (None, Intent.UNCLASSIFIED),
    ],
)
def test_classify_english(classifier, message, expected):
    assert classifier.classify(message) is expected


def test_first_matching_rule_wins(classifier):
    # Matches both the low-stock and the item-count vocabulary.
    assert classifier.classify("how many items have low stock") is Intent.LOW_STOCK


def test_classification_is_deterministic_and_case_insensitive(classifier):
    results = {classifier.classify(text) for text in ["TOTAL VALUE", "total value", "Total Value"]}
    assert results == {Intent.TOTAL_VALUE}


@pytest.mark.parametrize(
    "message, expected",
    [
        ("Toon alle items met lage voorraad", Intent.LOW_STOCK),
        ("Wat is de totale waarde?", Intent.TOTAL_VALUE),
        ("hoeveel stuks hebben we", Intent.TOTAL_STOCK),
        ("Hoeveel verschillende items zijn er?", Intent.DISTINCT_COUNT),
        ("voeg een item toe", Intent.UNCLASSIFIED),
    ],
)
def test_classify_dutch(nl_locale, message, expected):
    classifier = IntentClassifier.from_patterns(nl_locale.intent_patterns)
    assert classifier.classify(message) is expected


def test_rule_order_follows_pack():
    classifier = IntentClassifier.from_patterns([("distinct_count", "items"), ("low_stock", "low")])
    assert classifier.classify("low items") is Intent.DISTINCT_COUNT
    assert [rule.intent for rule in classifier.rules] == [Intent.DISTINCT_COUNT, Intent.LOW_STOCK]


def test_unknown_intent_name_rejected():
    with pytest.raises(ValueError):
        IntentClassifier.from_patterns([("restock", "restock")])


def test_unclassified_cannot_be_a_rule():
    with pytest.raises(ValueError):
        IntentClassifier.from_patterns([("unclassified", ".*")])

from inventory_assistant.response_normalizer import ensure_low_stock_newlines

MARKER = "has a low stock of"


def test_text_without_marker_is_unchanged():
    text = "The item was added successfully. Anything else?"
    assert ensure_low_stock_newlines(text, MARKER) == text


def test_empty_and_none_are_unchanged():
    assert ensure_low_stock_newlines("", MARKER) == ""
    assert ensure_low_stock_newlines(None, MARKER) is None


def test_run_on_listing_is_split_per_item():
    text = "X, Y, has a low stock of 3. Z, W, has a low stock of 1."
    result = ensure_low_stock_newlines(text, MARKER)
    lines = result.split("\n")
    assert lines == ["X, Y, has a low stock of 3.", "Z, W, has a low stock of 1."]
    assert all(line.endswith(".") for line in lines)


def test_already_split_listing_is_stable():
    text = "X, Y, has a low stock of 3.\nZ, W, has a low stock of 1."
    assert ensure_low_stock_newlines(text, MARKER) == text


def test_decimal_stock_is_split_known_limitation():
    text = "X, Y, has a low stock of 2.5."
    assert ensure_low_stock_newlines(text, MARKER) == "X, Y, has a low stock of 2.\n5."


def test_dutch_marker():
    text = "A, B, heeft een lage voorraad van 1. C, D, heeft een lage voorraad van 2."
    result = ensure_low_stock_newlines(text, "heeft een lage voorraad")
    assert result.count("\n") == 1

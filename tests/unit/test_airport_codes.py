from flightmail.parsers.airport_codes import (
    COMMON_WORD_STOPLIST,
    VALID_AIRPORT_CODES,
    find_codes_in_text,
    is_valid_code,
)


def test_is_valid_code_known_codes():
    assert is_valid_code("LAX")
    assert is_valid_code("CDG")
    assert is_valid_code("lax")
    assert is_valid_code(" jfk ")


def test_is_valid_code_rejects_unknown_and_malformed():
    assert not is_valid_code("XYZ")
    assert not is_valid_code("LAXX")
    assert not is_valid_code("LA")
    assert not is_valid_code("")
    assert not is_valid_code(None)


def test_common_words_are_not_airports():
    for word in ("THE", "AND", "FOR", "SAT", "MAR", "USD", "EST"):
        assert not is_valid_code(word), word


def test_registry_excludes_stoplist():
    assert VALID_AIRPORT_CODES.isdisjoint(COMMON_WORD_STOPLIST)


def test_find_codes_ignores_plain_words():
    assert find_codes_in_text("AND THE SAT IS HARD") == []


def test_find_codes_distinct_in_order():
    text = "Outbound SEA to LAX, then LAX back to SEA via DEN"

    assert find_codes_in_text(text) == ["SEA", "LAX", "DEN"]


def test_find_codes_requires_uppercase_tokens():
    assert find_codes_in_text("the sea was calm near lax") == []
    assert find_codes_in_text("SEATTLE") == []


def test_find_codes_empty_input():
    assert find_codes_in_text("") == []
    assert find_codes_in_text(None) == []

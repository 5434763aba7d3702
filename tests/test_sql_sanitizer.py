import re

import pytest

from permenkit.sql_sanitizer import (
    SanitizationError,
    build_safe_in_clause,
    generate_placeholder_for_ids,
    is_ascii,
    sanitize_ascii_input,
    sanitize_for_in_clause,
    sanitize_ids,
    sanitize_order_by,
    validate_column_name,
    wrap_arguments_with_ids,
)


@pytest.mark.parametrize("value", ["abc-123_x", "a, b. c", "ID 42"])
def test_safe_value_returned_unchanged(value):
    assert sanitize_for_in_clause(value) == value


def test_empty_input_rejected():
    with pytest.raises(SanitizationError, match="input cannot be empty"):
        sanitize_for_in_clause("")


def test_percent_rejected():
    with pytest.raises(SanitizationError, match="percent sign"):
        sanitize_for_in_clause("abc%s")


@pytest.mark.parametrize(
    "value",
    ["a--b", "a/*b", "a*/b", "a;b", "xp_cmd", "sp_who", "exec x", "EXECUTE", "Union",
     "insert", "Update", "delete", "DROP", "create", "alter", "javascript"],
)
def test_injection_patterns_rejected(value):
    with pytest.raises(SanitizationError, match="SQL injection pattern"):
        sanitize_for_in_clause(value)


def test_injection_message_names_pattern():
    with pytest.raises(SanitizationError, match=re.escape("pattern '--'")):
        sanitize_for_in_clause("x--y")


@pytest.mark.parametrize("value", ["a'b", "a(b)", "a=b", "naïve"])
def test_invalid_characters_rejected(value):
    with pytest.raises(SanitizationError, match="only alphanumeric"):
        sanitize_for_in_clause(value)


def test_sanitize_ids_round_trip():
    ids = ["one", "two-2", "three_3"]
    assert sanitize_ids(ids) == ids


def test_sanitize_ids_empty():
    with pytest.raises(SanitizationError, match="ids array cannot be empty"):
        sanitize_ids([])


def test_sanitize_ids_reports_position():
    with pytest.raises(SanitizationError, match="position 2"):
        sanitize_ids(["ok", "bad;"])


def test_build_safe_in_clause():
    assert build_safe_in_clause(["id1", "id2", "id3"]) == "'id1', 'id2', 'id3'"


def test_build_safe_in_clause_invariants():
    ids = ["a", "b", "c", "d"]
    result = build_safe_in_clause(ids)
    assert result.split(", ") == [f"'{item}'" for item in ids]


def test_build_safe_in_clause_rejects_bad_id():
    with pytest.raises(SanitizationError):
        build_safe_in_clause(["a", "b'; drop"])


@pytest.mark.parametrize("name", ["user_id", "_private", "Col9"])
def test_valid_column_names(name):
    assert validate_column_name(name) == name


@pytest.mark.parametrize("name", ["1abc", "a-b", "a b", "col;"])
def test_invalid_column_names(name):
    with pytest.raises(SanitizationError, match="invalid column name"):
        validate_column_name(name)


def test_empty_column_name():
    with pytest.raises(SanitizationError, match="column name cannot be empty"):
        validate_column_name("")


@pytest.mark.parametrize("keyword", ["SELECT", "Drop", "convert"])
def test_keyword_column_names(keyword):
    with pytest.raises(SanitizationError, match="SQL keyword: " + keyword.lower()):
        validate_column_name(keyword)


def test_order_by_normalizes_direction():
    assert sanitize_order_by("name", " desc ") == ("name", "DESC")


def test_order_by_defaults_to_asc():
    assert sanitize_order_by("name", "") == ("name", "ASC")


def test_order_by_bad_direction():
    with pytest.raises(SanitizationError, match="must be ASC or DESC"):
        sanitize_order_by("name", "sideways")


def test_order_by_bad_column():
    with pytest.raises(SanitizationError, match="invalid ORDER BY column"):
        sanitize_order_by("1bad", "ASC")


@pytest.mark.parametrize("value, expected", [("", True), ("abc 123", True), ("é", False), ("a世", False)])
def test_is_ascii(value, expected):
    assert is_ascii(value) is expected


def test_sanitize_ascii_input_accepts_plain():
    assert sanitize_ascii_input("hello") == "hello"


def test_sanitize_ascii_input_rejects_non_ascii():
    with pytest.raises(SanitizationError, match="non-ASCII"):
        sanitize_ascii_input("héllo")


def test_sanitize_ascii_input_still_checks_patterns():
    with pytest.raises(SanitizationError, match="SQL injection pattern"):
        sanitize_ascii_input("a;b")


def test_placeholder_for_ids():
    query, args = generate_placeholder_for_ids(["a", "b", "c"], "SELECT * FROM t WHERE id IN")
    assert query == "SELECT * FROM t WHERE id IN (?,?,?)"
    assert args == ["a", "b", "c"]


def test_placeholder_count_matches_args():
    values = [str(n) for n in range(7)]
    query, args = generate_placeholder_for_ids(values, "Q")
    assert query.count("?") == len(args) == len(values)
    assert query.endswith(")")


def test_placeholder_for_no_ids():
    query, args = generate_placeholder_for_ids([], "Q")
    assert query == "Q ()"
    assert args == []


def test_wrap_arguments_puts_ids_last():
    assert wrap_arguments_with_ids(["a", "b"], 1, 2) == [1, 2, "a", "b"]


def test_wrap_arguments_without_others():
    assert wrap_arguments_with_ids(["a"]) == ["a"]
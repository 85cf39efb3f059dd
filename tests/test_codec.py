import pytest

from leetkit.codec import join, parse_int_list, serialize_list, serialize_nested, split


@pytest.mark.parametrize(
    "values", [[], [0], [3, 9, 20, -1, -1, 15, 7], [-5, 12, 0]]
)
def test_serialize_list_round_trip(values):
    assert parse_int_list(serialize_list(values)) == values


def test_serialize_list_empty():
    assert serialize_list([]) == "[]"


def test_serialize_list_format():
    assert serialize_list([1, 2, 3]) == "[1,2,3]"


def test_serialize_nested_empty():
    assert serialize_nested([]) == "[]"


def test_serialize_nested_rows():
    assert serialize_nested([[3], [9, 20], [15, 7]]) == "[[3],[9,20],[15,7]]"


def test_serialize_nested_contains_each_row():
    rows = [[1, 2], [], [3]]
    text = serialize_nested(rows)
    assert text.startswith("[") and text.endswith("]")
    for row in rows:
        assert serialize_list(row) in text


def test_parse_null_becomes_minus_one():
    assert parse_int_list("[3,9,20,null,null,15,7]") == [3, 9, 20, -1, -1, 15, 7]


def test_parse_empty():
    assert parse_int_list("[]") == []


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_int_list("[1,x]")


@pytest.mark.parametrize(
    "text, delims",
    [
        ("a,,b,", ","),
        (",a;b,c;", ",;"),
        ("", ","),
        ("abc", ","),
        ("1.2-3]4", ".-]"),
    ],
)
def test_split_drops_delimiters(text, delims):
    pieces = split(text, delims)
    assert all(piece and not any(d in piece for d in delims) for piece in pieces)
    assert "".join(pieces) == "".join(ch for ch in text if ch not in delims)


def test_split_keeps_order():
    assert split("x,y,z", ",") == ["x", "y", "z"]


def test_split_without_delimiters():
    assert split("abc", "") == ["abc"]
    assert split("", "") == []


def test_join_empty():
    assert join([], ",") == ""


def test_join_numbers_round_trip():
    items = [1, -2, 30]
    assert join(items, ", ").split(", ") == ["1", "-2", "30"]


def test_join_strings_round_trip():
    items = ["3", "null", "7"]
    assert split(join(items, ","), ",") == items
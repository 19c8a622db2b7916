"""
Unit tests for the record codec.

Tests verify:
- Encoding layout of a stored row
- Decoding of valid rows, including every accepted boolean literal
- FormatError for wrong field counts
- ParseError for invalid ids, booleans and timestamps
"""

from datetime import UTC, datetime

import pytest

from csvtodo.core.domain.codec import decode, encode, parse_bool, parse_int
from csvtodo.core.domain.errors import FormatError, ParseError
from csvtodo.core.domain.todo import Todo

CREATED = datetime(2026, 1, 1, 9, 30, tzinfo=UTC)
CREATED_UNIX = "1767259800"


class TestEncode:
    def test_encode_field_layout(self):
        todo = Todo("buy milk", completed=False, created_at=CREATED)

        assert encode(1, todo) == ["1", "buy milk", "false", CREATED_UNIX]

    def test_encode_completed_as_true(self):
        todo = Todo("done", completed=True, created_at=CREATED)

        assert encode(42, todo)[2] == "true"

    def test_encode_drops_sub_second_precision(self):
        todo = Todo("x", created_at=CREATED.replace(microsecond=987654))

        assert encode(1, todo)[3] == CREATED_UNIX


class TestDecode:
    def test_decode_valid_row(self):
        todo_id, todo = decode(["7", "buy milk", "true", CREATED_UNIX])

        assert todo_id == 7
        assert todo == Todo("buy milk", completed=True, created_at=CREATED)
        assert todo.created_at.tzinfo == UTC

    @pytest.mark.parametrize(
        "todo_id,todo",
        [
            (1, Todo("buy milk", completed=False, created_at=CREATED)),
            (99, Todo("", completed=True, created_at=datetime(1970, 1, 1, tzinfo=UTC))),
            (3, Todo('comma, "quotes"\nand newline', created_at=CREATED)),
        ],
    )
    def test_decode_inverts_encode(self, todo_id, todo):
        assert decode(encode(todo_id, todo)) == (todo_id, todo)

    @pytest.mark.parametrize("row", [[], ["1", "a", "false"], ["1", "a", "false", "0", "x"]])
    def test_wrong_field_count_raises_format_error(self, row):
        with pytest.raises(FormatError) as exc_info:
            decode(row)

        assert exc_info.value.code == "format_error"
        assert exc_info.value.details["field_count"] == len(row)

    @pytest.mark.parametrize("raw_id", ["abc", "", "1.5", " 1", "0", "-3"])
    def test_invalid_id_raises_parse_error(self, raw_id):
        with pytest.raises(ParseError) as exc_info:
            decode([raw_id, "a", "false", CREATED_UNIX])

        assert exc_info.value.field == "id"

    @pytest.mark.parametrize("raw_completed", ["yes", "", "TRUE ", "tRuE", "2"])
    def test_invalid_completed_raises_parse_error(self, raw_completed):
        with pytest.raises(ParseError) as exc_info:
            decode(["1", "a", raw_completed, CREATED_UNIX])

        assert exc_info.value.field == "completed"

    @pytest.mark.parametrize("raw_created", ["", "soon", "1.0", "1_000"])
    def test_invalid_timestamp_raises_parse_error(self, raw_created):
        with pytest.raises(ParseError) as exc_info:
            decode(["1", "a", "false", raw_created])

        assert exc_info.value.field == "created_at"

    def test_out_of_range_timestamp_raises_parse_error(self):
        with pytest.raises(ParseError):
            decode(["1", "a", "false", "9" * 30])


class TestLiterals:
    @pytest.mark.parametrize("literal", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true_literals(self, literal):
        assert parse_bool(literal) is True

    @pytest.mark.parametrize("literal", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_literals(self, literal):
        assert parse_bool(literal) is False

    def test_parse_int_accepts_sign(self):
        assert parse_int("+12", field="id") == 12
        assert parse_int("-12", field="created_at") == -12

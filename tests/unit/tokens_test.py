"""Unit tests for extracting the quoted token under a cursor."""

import pytest

from keys_lsp.core.errors import TokenNotFound
from keys_lsp.core.tokens import extract_token

LINE = 'label = t("tr:nested.works") + "x"'


class TestExtractToken:
    @pytest.mark.parametrize("cursor", range(LINE.index('"') + 1, LINE.index('")')))
    def test_returns_literal_for_every_cursor_inside_it(self, cursor: int) -> None:
        assert extract_token(LINE, cursor) == "tr:nested.works"

    def test_cursor_on_closing_quote_belongs_to_literal(self) -> None:
        assert extract_token(LINE, LINE.index('")')) == "tr:nested.works"

    def test_cursor_on_opening_quote_has_no_left_quote(self) -> None:
        with pytest.raises(TokenNotFound):
            extract_token('"abc"', 0)

    def test_no_quote_to_the_left(self) -> None:
        with pytest.raises(TokenNotFound):
            extract_token('abc"', 1)

    def test_no_quote_to_the_right(self) -> None:
        with pytest.raises(TokenNotFound):
            extract_token('x = "abc', 6)

    @pytest.mark.parametrize("cursor", [-1, 5, 100])
    def test_cursor_outside_line(self, cursor: int) -> None:
        with pytest.raises(TokenNotFound):
            extract_token('"abc"', cursor)

    def test_empty_line(self) -> None:
        with pytest.raises(TokenNotFound):
            extract_token("", 0)

    def test_empty_literal(self) -> None:
        assert extract_token('x("")', 3) == ""

    def test_escaped_quote_ends_token_early(self) -> None:
        line = r'"tr:say \"hi\" now"'
        assert extract_token(line, 2) == "tr:say \\"

    def test_between_two_literals_returns_the_gap(self) -> None:
        # Quote matching is purely positional.
        assert extract_token('"a", "b"', 3) == ", "

"""Unit tests for splitting key paths into prefix and segments."""

import pytest
from pydantic import ValidationError

from keys_lsp.core.keypath import parse_key_path
from keys_lsp.models import PathSpec


class TestParseKeyPath:
    def test_prefix_and_segments(self) -> None:
        spec = parse_key_path("a:b.c")
        assert spec.prefix == "a"
        assert spec.segments == ("b", "c")

    def test_prefix_only(self) -> None:
        assert parse_key_path("a") == PathSpec(prefix="a", segments=())

    def test_empty_token(self) -> None:
        assert parse_key_path("") == PathSpec(prefix="", segments=())

    def test_separators_are_interchangeable(self) -> None:
        assert parse_key_path("a.b:c").segments == ("b", "c")
        assert parse_key_path("a:b:c").segments == ("b", "c")

    def test_empty_fragments_are_kept(self) -> None:
        assert parse_key_path("a:.b.").segments == ("", "b", "")

    def test_template_placeholders_stay_in_segments(self) -> None:
        spec = parse_key_path("tr:nested.works.${things}")
        assert spec.segments == ("nested", "works", "${things}")

    def test_path_spec_is_immutable(self) -> None:
        spec = parse_key_path("a:b")
        with pytest.raises(ValidationError):
            spec.prefix = "z"  # type: ignore[misc]

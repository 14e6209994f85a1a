"""Unit tests for text utilities."""

import pytest

from workboard.core.constants import MAX_SLUG_LENGTH
from workboard.core.utils.text import generate_slug, normalize_email


class TestGenerateSlug:
    """Tests for generate_slug."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Acme Rockets", "acme-rockets"),
            ("  Acme   Rockets  ", "acme-rockets"),
            ("Hello! World@2024", "hello-world2024"),
            ("R&D - Labs", "rd---labs"),
            ("already-slugged", "already-slugged"),
        ],
    )
    def test_slug_derivation(self, name, expected):
        assert generate_slug(name) == expected

    def test_symbols_only_falls_back(self):
        assert generate_slug("!!!???") == "org"

    def test_truncates_to_max_length(self):
        assert len(generate_slug("a" * 500)) == MAX_SLUG_LENGTH


class TestNormalizeEmail:
    def test_trims_and_lowercases(self):
        assert normalize_email("  Ada@Example.COM ") == "ada@example.com"

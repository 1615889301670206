"""
Tests for ValueTransducer.

Each test class covers one of the four algorithms (apply / remove on raw /
formatted values) in both directions.
"""
from __future__ import annotations

import pytest

from editmask.models import LocaleSeparators
from editmask.parser.mask_compiler import MaskCompiler
from editmask.transducer.value_transducer import ValueTransducer


def _transducer(pattern, separators=None):
    return ValueTransducer(MaskCompiler().compile(pattern), separators)


# ─────────────────────────────────────────────────────────────────────────────
# Apply – raw values
# ─────────────────────────────────────────────────────────────────────────────


class TestApplyRaw:
    def test_phone_number(self):
        t = _transducer("(999) 999-9999")
        assert t.apply("8005551212", "_", formatted=False) == "(800) 555-1212"

    def test_short_value_padded_with_blanks(self):
        t = _transducer("999-99")
        assert t.apply("12", "_", formatted=False) == "12 -  "

    def test_short_value_right_to_left(self):
        t = _transducer("!999-99")
        assert t.apply("12", "_", formatted=False) == "   -12"

    def test_long_value_truncated_left_to_right(self):
        assert _transducer("999").apply("12345", "_", formatted=False) == "123"

    def test_long_value_truncated_right_to_left(self):
        assert _transducer("!999").apply("12345", "_", formatted=False) == "345"

    def test_one_character_per_slot(self):
        t = _transducer("[ABC]")
        assert t.apply("aaa", "*", formatted=False) == "a"

    def test_separators_are_not_data_slots(self):
        t = _transducer("99/99/9999", LocaleSeparators(".", ":"))
        assert t.apply("01022024", "_", formatted=False) == "01.02.2024"

    def test_empty_value(self):
        assert _transducer("9-9").apply("", "_", formatted=False) == " - "


# ─────────────────────────────────────────────────────────────────────────────
# Apply – formatted values
# ─────────────────────────────────────────────────────────────────────────────


class TestApplyFormatted:
    def test_aligned_value_unchanged(self):
        t = _transducer("(999) 999-9999")
        assert t.apply("(800) 555-1212", " ", formatted=True) == "(800) 555-1212"

    def test_short_segments_leave_placeholders(self):
        t = _transducer("(999) 999-9999")
        assert t.apply("(80) 55-1212", " ", formatted=True) == "(80 ) 55 -1212"

    def test_long_segments_truncated(self):
        t = _transducer("(99) 99-9999")
        assert t.apply("(800) 555-1212", " ", formatted=True) == "(80) 55-1212"

    def test_no_literals_pours_whole_value(self):
        t = _transducer("c" * 40)
        result = t.apply("This is a test", " ", formatted=True)
        assert len(result) == 40
        assert result.strip() == "This is a test"

    def test_leading_literal_mismatch_places_nothing(self):
        assert _transducer("(999)").apply("800)", "_", formatted=True) == "(___)"

    def test_empty_value_with_leading_literal(self):
        assert _transducer("(999)").apply("", "_", formatted=True) == "(___)"

    def test_missing_anchor_ends_processing(self):
        t = _transducer("99-99-99")
        assert t.apply("12-3456", "_", formatted=True) == "12-34-__"

    def test_right_to_left_packs_right(self):
        assert _transducer("!(999)").apply("(8)", "_", formatted=True) == "(__8)"

    def test_right_to_left_drops_leading_excess(self):
        assert _transducer("!99-99").apply("123-4567", "_", formatted=True) == "23-67"

    def test_left_to_right_drops_trailing_excess(self):
        assert _transducer("99-99").apply("123-4567", "_", formatted=True) == "12-45"

    def test_locale_separator_anchor(self):
        t = _transducer("99/99", LocaleSeparators("-", ":"))
        assert t.apply("1-2", "_", formatted=True) == "1_-2_"


# ─────────────────────────────────────────────────────────────────────────────
# Remove
# ─────────────────────────────────────────────────────────────────────────────


class TestRemoveFormatted:
    def test_phone_number(self):
        t = _transducer("(999) 999-9999")
        assert t.remove("(800) 555-1212", formatted=True) == "8005551212"

    def test_short_segments_condensed(self):
        t = _transducer("(999) 999-9999")
        assert t.remove("(80) 55-1212", formatted=True) == "80551212"

    def test_placeholders_in_value_are_kept(self):
        t = _transducer("(999) 999-9999")
        assert t.remove("(80_) 555-1212", formatted=True) == "80_5551212"

    def test_leading_literal_mismatch_returns_empty(self):
        assert _transducer("(999)").remove("800)", formatted=True) == ""

    def test_time_separator_removed(self):
        t = _transducer("99:99", LocaleSeparators("/", "."))
        assert t.remove("12.34", formatted=True) == "1234"


class TestRemoveRaw:
    def test_exact_length(self):
        t = _transducer("(999) 999-9999")
        assert t.remove("8005551212", formatted=False) == "8005551212"

    def test_short_value_padded(self):
        assert _transducer("999-99").remove("12", formatted=False) == "12   "

    def test_long_value_truncated(self):
        assert _transducer("999-99").remove("1234567", formatted=False) == "12345"

    def test_right_to_left(self):
        assert _transducer("!999-99").remove("12", formatted=False) == "   12"


# ─────────────────────────────────────────────────────────────────────────────
# Totality
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("pattern", ["(999) 999-9999", "!99/99", "[A-Z]c-c", ""])
@pytest.mark.parametrize("value", ["", ")))", "\x00\x01", "(((((((((((((((((", "a-b-c"])
@pytest.mark.parametrize("formatted", [True, False])
def test_apply_length_matches_mask(pattern, value, formatted):
    t = _transducer(pattern)
    assert len(t.apply(value, "_", formatted=formatted)) == len(t.mask)
    assert len(t.remove(value, formatted=formatted)) <= len(t.mask)

"""Tests for join key normalization."""

import pytest

from partner_recon.models.records import KeyMode
from partner_recon.normalization import id_key, join_key, normalize_name


class TestNormalizeName:
    """Name keys fold case and surrounding whitespace only."""

    @pytest.mark.parametrize("raw", ["Acme Corp ", "acme corp", "ACME CORP", "  Acme Corp\t"])
    def test_equivalent_spellings(self, raw: str) -> None:
        """Case and edge whitespace variants share one key."""
        assert normalize_name(raw) == "acme corp"

    def test_none_is_empty(self) -> None:
        """None normalizes to the empty string."""
        assert normalize_name(None) == ""

    def test_inner_whitespace_kept(self) -> None:
        """Only leading/trailing whitespace is removed."""
        assert normalize_name("Acme  Corp") != normalize_name("Acme Corp")

    def test_non_string_is_stringified(self) -> None:
        """Numbers are converted before folding."""
        assert normalize_name(42) == "42"


class TestIdKey:
    """Identifier keys are exact stringified values."""

    def test_int_and_string_collide(self) -> None:
        """15 and "15" are the same key."""
        assert id_key(15) == id_key("15") == "15"

    def test_no_folding(self) -> None:
        """Ids are not trimmed or lower-cased."""
        assert id_key(" AB ") == " AB "

    def test_none_stays_none(self) -> None:
        """Missing ids have no key."""
        assert id_key(None) is None


def test_join_key_dispatches_on_mode() -> None:
    """join_key picks the mode's key function."""
    assert join_key(" Acme ", KeyMode.NAME) == "acme"
    assert join_key(" Acme ", KeyMode.ID) == " Acme "

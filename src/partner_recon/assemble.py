"""Output assembly: order reconciled partners and unmatched groups."""

import unicodedata
from typing import Iterable, Optional

from partner_recon.models.records import KeyMode, OutputDocument, PartnerRecord, UnmatchedGroup
from partner_recon.reconcile import ReconcileResult


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def _char_rank(c: str) -> int:
    """Whitespace and punctuation, then digits, then letters."""
    if c.isdigit():
        return 1
    if c.isalpha():
        return 2
    return 0


def collation_key(value: Optional[str]) -> tuple[tuple[tuple[int, str], ...], str, str]:
    """
    Sort key approximating locale-aware string comparison.
    Base letters decide first ("apple" < "Banana" < "cherry"), then accents
    ("resume" < "résumé"), then case with lower-case first ("acme" < "Acme").
    Punctuation and symbols sort before digits, digits before letters.

    Only an approximation of root collation: characters within a class
    still compare by code point (so "_" vs "-" or non-Latin scripts may
    differ from a full locale comparison), and punctuation is not ignored.
    """
    text = unicodedata.normalize("NFC", value or "")
    folded = text.casefold()
    primary = tuple((_char_rank(c), c) for c in _strip_accents(folded))
    return (primary, folded, text.swapcase())


def _group_sort_value(group: UnmatchedGroup, key_mode: KeyMode) -> str:
    # groups without a declared owner id sort as the empty string
    if key_mode is KeyMode.ID and group.partner_id is None:
        return ""
    return group.group_key


def assemble(
    partner_map: dict[str, PartnerRecord],
    unkeyed_partners: Iterable[PartnerRecord],
    unmatched: Iterable[UnmatchedGroup],
    key_mode: KeyMode = KeyMode.ID,
) -> OutputDocument:
    """
    Concatenate keyed and unkeyed partners and sort them by display name;
    sort unmatched groups by their raw group key (a group with no owner id
    sorts as the empty string). Both sorts are stable, so
    ties keep first-seen order.
    """
    partners = list(partner_map.values()) + list(unkeyed_partners)
    partners.sort(key=lambda p: collation_key(p.partner_name))
    groups = sorted(unmatched, key=lambda g: collation_key(_group_sort_value(g, key_mode)))
    return OutputDocument(key_mode=key_mode, partners=partners, unmatched=groups)


def assemble_result(result: ReconcileResult) -> OutputDocument:
    """Assemble straight from a ReconcileResult."""
    return assemble(
        result.partner_map,
        result.unkeyed_partners,
        result.unmatched.values(),
        key_mode=result.key_mode,
    )

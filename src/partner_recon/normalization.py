"""Join key derivation for partner/solution matching."""

from typing import Any, Optional

from partner_recon.models.records import KeyMode


def normalize_name(raw: Any) -> str:
    """
    Canonical name key: None -> "", stringify, strip, lower-case.
    "Acme Corp ", "acme corp" and "ACME CORP" all map to "acme corp".
    """
    if raw is None:
        return ""
    return str(raw).strip().lower()


def id_key(raw: Any) -> Optional[str]:
    """Identifier key: exact stringified value. 15 and "15" are the same key."""
    if raw is None:
        return None
    return str(raw)


def join_key(raw: Any, key_mode: KeyMode) -> Optional[str]:
    """Key for raw name or id under the given mode."""
    if key_mode is KeyMode.ID:
        return id_key(raw)
    return normalize_name(raw)

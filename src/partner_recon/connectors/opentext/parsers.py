"""Decoders for OpenText partner directory and marketplace assets.

Partner assets carry their data under `contentJson.Partners`, solution
assets under `contentJson.Solutions.Solution`. Field names are the
site's own (mixed case, e.g. `solutionpartnername`).
"""

from typing import Optional

from partner_recon.models.raw import RawAsset
from partner_recon.models.records import Identifier, KeyMode, PartnerSeed, SolutionRecord


def _identifier(value: object) -> Optional[Identifier]:
    """
    Ids pass through as int or str. JSON numbers with no fraction (15.0)
    become int so they join with 15; booleans become "true"/"false".
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, str)):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return str(value)


def partner_by_name(asset: RawAsset) -> Optional[PartnerSeed]:
    """Display name from `Partners.PartnerDisplay.Name`; None when empty."""
    name = asset.dig("contentJson", "Partners", "PartnerDisplay", "Name")
    if not name:
        return None
    return PartnerSeed(name=str(name))


def partner_by_id(asset: RawAsset) -> Optional[PartnerSeed]:
    """
    Id and name from `Partners.Partner`. The Partner object is required,
    its fields are not (partners without an Id are still kept).
    """
    partner = asset.dig("contentJson", "Partners", "Partner")
    if not isinstance(partner, dict):
        return None
    name = partner.get("Name")
    return PartnerSeed(
        partner_id=_identifier(partner.get("Id")),
        name=str(name) if name is not None else None,
    )


def solution_by_name(asset: RawAsset) -> Optional[SolutionRecord]:
    """Requires both `solutionname` and `solutionpartnername`."""
    solution = asset.dig("contentJson", "Solutions", "Solution")
    if not isinstance(solution, dict):
        return None
    name = solution.get("solutionname")
    owner = solution.get("solutionpartnername")
    if not name or not owner:
        return None
    return SolutionRecord(name=str(name), owner_name=str(owner))


def solution_by_id(asset: RawAsset) -> Optional[SolutionRecord]:
    """Only the Solution object is required; missing fields stay None."""
    solution = asset.dig("contentJson", "Solutions", "Solution")
    if not isinstance(solution, dict):
        return None
    name = solution.get("solutionname")
    owner_name = solution.get("solutionpartnername")
    return SolutionRecord(
        solution_id=_identifier(solution.get("solutionid")),
        name=str(name) if name is not None else None,
        owner_id=_identifier(solution.get("solutionpartner")),
        owner_name=str(owner_name) if owner_name is not None else None,
    )


PARTNER_PARSERS = {
    KeyMode.NAME: partner_by_name,
    KeyMode.ID: partner_by_id,
}

SOLUTION_PARSERS = {
    KeyMode.NAME: solution_by_name,
    KeyMode.ID: solution_by_id,
}

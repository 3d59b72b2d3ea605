"""Data models for listing assets, reconciled records and run config."""

from partner_recon.models.config import RunConfig, load_config
from partner_recon.models.raw import RawAsset
from partner_recon.models.records import (
    KeyMode,
    OutputDocument,
    PartnerRecord,
    PartnerSeed,
    SolutionRecord,
    SolutionRef,
    UnmatchedGroup,
)

__all__ = [
    "KeyMode",
    "OutputDocument",
    "PartnerRecord",
    "PartnerSeed",
    "RawAsset",
    "RunConfig",
    "SolutionRecord",
    "SolutionRef",
    "UnmatchedGroup",
    "load_config",
]

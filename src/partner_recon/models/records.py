"""Partner, solution and output document models."""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Identifier = Union[int, str]


class KeyMode(str, Enum):
    """How solutions are joined to partners. One mode per run."""

    NAME = "name"
    ID = "id"


class PartnerSeed(BaseModel):
    """Partner as decoded from the directory listing, before reconciliation."""

    name: Optional[str] = None
    partner_id: Optional[Identifier] = None


class SolutionRecord(BaseModel):
    """Solution as decoded from the catalog listing."""

    name: Optional[str] = None
    solution_id: Optional[Identifier] = None
    owner_name: Optional[str] = None
    owner_id: Optional[Identifier] = None


class SolutionRef(BaseModel):
    """Solution entry attached to a partner or an unmatched group."""

    model_config = ConfigDict(populate_by_name=True)

    solution_name: Optional[str] = Field(default=None, alias="solutionName")
    solution_id: Optional[Identifier] = Field(default=None, alias="solutionId")


class PartnerRecord(BaseModel):
    """Partner with the solutions joined to it."""

    model_config = ConfigDict(populate_by_name=True)

    partner_name: Optional[str] = Field(default=None, alias="partnerName")
    partner_id: Optional[Identifier] = Field(default=None, alias="id")
    solutions: list[SolutionRef] = Field(default_factory=list)


class UnmatchedGroup(BaseModel):
    """Solutions whose declared owner matched no known partner."""

    model_config = ConfigDict(populate_by_name=True)

    group_key: str = Field(..., alias="groupKey", description="Raw owner name or id")
    partner_id: Optional[Identifier] = Field(
        default=None,
        alias="partnerId",
        description="Owner id as declared (id mode); None when the solution had none",
    )
    partner_name: Optional[str] = Field(default=None, alias="partnerName")
    solutions: list[SolutionRef] = Field(default_factory=list)


class OutputDocument(BaseModel):
    """Final reconciled document handed to the persistence step."""

    model_config = ConfigDict(populate_by_name=True)

    key_mode: KeyMode = KeyMode.ID
    partners: list[PartnerRecord] = Field(default_factory=list)
    unmatched: list[UnmatchedGroup] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """
        JSON-ready dict with camelCase keys.
        Identifier fields (`id`, `solutionId`, `partnerId`) and the unmatched `partnerName`
        are only emitted when keying by id.
        """
        if self.key_mode is KeyMode.ID:
            partner_exclude: Optional[dict] = None
            group_exclude: Optional[dict] = None
        else:
            partner_exclude = {"partner_id": True, "solutions": {"__all__": {"solution_id"}}}
            group_exclude = {"partner_id": True, "partner_name": True, "solutions": {"__all__": {"solution_id"}}}
        return {
            "partners": [
                p.model_dump(mode="json", by_alias=True, exclude=partner_exclude)
                for p in self.partners
            ],
            "unmatched": [
                g.model_dump(mode="json", by_alias=True, exclude=group_exclude)
                for g in self.unmatched
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], key_mode: KeyMode = KeyMode.ID) -> "OutputDocument":
        """Rebuild a document from the dict produced by `to_dict`."""
        return cls.model_validate(
            {
                "key_mode": key_mode,
                "partners": data.get("partners") or [],
                "unmatched": data.get("unmatched") or [],
            }
        )

    @property
    def solution_count(self) -> int:
        """Total solutions across partners and unmatched groups."""
        return sum(len(p.solutions) for p in self.partners) + sum(
            len(g.solutions) for g in self.unmatched
        )

"""Reconciler: joins catalog solutions to directory partners by key."""

import logging
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from partner_recon.models.records import (
    KeyMode,
    PartnerRecord,
    PartnerSeed,
    SolutionRecord,
    SolutionRef,
    UnmatchedGroup,
)
from partner_recon.normalization import id_key, join_key

logger = logging.getLogger(__name__)

# Group key for id-mode solutions that declare no owner id
MISSING_OWNER_KEY = "null"


class ReconcileResult(BaseModel):
    """Joined partners plus solutions that matched no partner."""

    key_mode: KeyMode
    partner_map: dict[str, PartnerRecord] = Field(
        default_factory=dict,
        description="Join key -> partner, in first-seen order",
    )
    unkeyed_partners: list[PartnerRecord] = Field(
        default_factory=list,
        description="Partners without an id (id mode only)",
    )
    unmatched: dict[str, UnmatchedGroup] = Field(
        default_factory=dict,
        description="Raw owner key -> group, in first-seen order",
    )

    @property
    def matched_count(self) -> int:
        return sum(len(p.solutions) for p in self.partner_map.values())

    @property
    def unmatched_count(self) -> int:
        return sum(len(g.solutions) for g in self.unmatched.values())


class Reconciler:
    """
    Attaches each solution to exactly one destination: the partner whose
    join key equals the solution's owner key, or the unmatched group for the
    solution's raw owner value.

    Name mode folds case and surrounding whitespace on both sides.
    Id mode compares stringified ids exactly; partners without an id are
    kept apart and never receive solutions.
    """

    def __init__(self, key_mode: KeyMode = KeyMode.ID):
        self.key_mode = KeyMode(key_mode)

    def reconcile(
        self,
        partners: Iterable[PartnerSeed],
        solutions: Iterable[SolutionRecord],
    ) -> ReconcileResult:
        """Build the partner map, then route every solution in stream order."""
        result = ReconcileResult(key_mode=self.key_mode)
        self._index_partners(result, partners)
        for solution in solutions:
            self._route(result, solution)

        logger.info(
            "Reconciled %d partners (%d without key): %d solutions matched, %d unmatched in %d groups",
            len(result.partner_map),
            len(result.unkeyed_partners),
            result.matched_count,
            result.unmatched_count,
            len(result.unmatched),
        )
        return result

    def _partner_key(self, seed: PartnerSeed) -> Optional[str]:
        raw = seed.partner_id if self.key_mode is KeyMode.ID else seed.name
        return join_key(raw, self.key_mode)

    def _index_partners(self, result: ReconcileResult, partners: Iterable[PartnerSeed]) -> None:
        for seed in partners:
            record = PartnerRecord(
                partner_name=seed.name,
                partner_id=seed.partner_id if self.key_mode is KeyMode.ID else None,
            )
            key = self._partner_key(seed)
            if key is None:
                result.unkeyed_partners.append(record)
            elif key not in result.partner_map:
                result.partner_map[key] = record
            else:
                logger.debug("Duplicate partner key %r ignored (%s)", key, seed.name)

    def _route(self, result: ReconcileResult, solution: SolutionRecord) -> None:
        if self.key_mode is KeyMode.ID:
            key = join_key(solution.owner_id, self.key_mode)
            ref = SolutionRef(solution_name=solution.name, solution_id=solution.solution_id)
        else:
            key = join_key(solution.owner_name, self.key_mode)
            ref = SolutionRef(solution_name=solution.name)

        partner = result.partner_map.get(key) if key is not None else None
        if partner is not None:
            partner.solutions.append(ref)
            return

        raw_key = self._raw_owner_key(solution)
        group = result.unmatched.get(raw_key)
        if group is None:
            group = UnmatchedGroup(
                group_key=raw_key,
                partner_id=solution.owner_id if self.key_mode is KeyMode.ID else None,
            )
            result.unmatched[raw_key] = group
        if self.key_mode is KeyMode.ID and not group.partner_name and solution.owner_name:
            group.partner_name = solution.owner_name
        group.solutions.append(ref)

    def _raw_owner_key(self, solution: SolutionRecord) -> str:
        """
        Owner value as declared on the solution: stringified id, or trimmed name.
        A missing owner id groups under "null", together with an owner id that
        is literally the string "null", so group keys stay unique.
        """
        if self.key_mode is KeyMode.ID:
            key = id_key(solution.owner_id)
            return MISSING_OWNER_KEY if key is None else key
        return (solution.owner_name or "").strip()


def reconcile(
    partners: Iterable[PartnerSeed],
    solutions: Iterable[SolutionRecord],
    key_mode: KeyMode = KeyMode.ID,
) -> ReconcileResult:
    """Reconcile with a one-off Reconciler."""
    return Reconciler(key_mode).reconcile(partners, solutions)

"""Pipeline orchestration: collect partners → collect solutions → reconcile → assemble."""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel

from partner_recon.assemble import assemble_result
from partner_recon.connectors.registry import ConnectorRegistry
from partner_recon.models.config import RunConfig
from partner_recon.models.records import OutputDocument
from partner_recon.reconcile import Reconciler

logger = logging.getLogger(__name__)


class PipelineResult(BaseModel):
    """Output document plus run counts for reporting."""

    document: OutputDocument
    partners_fetched: int = 0
    solutions_fetched: int = 0
    solutions_matched: int = 0
    solutions_unmatched: int = 0


def run_reconciliation(
    config: Optional[RunConfig] = None,
    *,
    client: Optional[httpx.Client] = None,
) -> PipelineResult:
    """
    Run one full reconciliation. Datasets are fetched one after the other:
    every partner must be known before any solution can be classified.
    A failing page only shortens its dataset; see PaginatedCollector.
    """
    config = config or RunConfig()
    own_client = client is None
    client = client or httpx.Client(
        timeout=config.timeout,
        follow_redirects=True,
        headers=config.headers,
    )
    try:
        partners = ConnectorRegistry.get("partners", config=config, client=client).fetch_all()
        solutions = ConnectorRegistry.get("solutions", config=config, client=client).fetch_all()
    finally:
        if own_client:
            client.close()

    logger.info("Fetched %d partners and %d solutions", len(partners), len(solutions))

    result = Reconciler(config.key_mode).reconcile(partners, solutions)
    document = assemble_result(result)
    return PipelineResult(
        document=document,
        partners_fetched=len(partners),
        solutions_fetched=len(solutions),
        solutions_matched=result.matched_count,
        solutions_unmatched=result.unmatched_count,
    )

"""OpenText partner directory and application marketplace connectors.

Both datasets are served by the same kind of `.ajax` listing endpoint
(see `PaginatedCollector`). The partner directory is walked with the
site's default sort, the marketplace sorted by name.
"""

from typing import Optional

from partner_recon.connectors.base import BaseConnector
from partner_recon.models.raw import RawAsset
from partner_recon.models.records import PartnerSeed, SolutionRecord

from .parsers import PARTNER_PARSERS, SOLUTION_PARSERS


class PartnerDirectoryConnector(BaseConnector[PartnerSeed]):
    """Partner directory listing. Decodes partner name, or id and name."""

    dataset_id = "partners"

    @property
    def endpoint(self) -> str:
        return self.config.partners_url

    @property
    def sorter(self) -> str:
        return self.config.partners_sorter

    def transform(self, asset: RawAsset) -> Optional[PartnerSeed]:
        return PARTNER_PARSERS[self.key_mode](asset)


class SolutionCatalogConnector(BaseConnector[SolutionRecord]):
    """Application marketplace listing. Decodes solutions and their declared owner."""

    dataset_id = "solutions"

    @property
    def endpoint(self) -> str:
        return self.config.solutions_url

    @property
    def sorter(self) -> str:
        return self.config.solutions_sorter

    def transform(self, asset: RawAsset) -> Optional[SolutionRecord]:
        return SOLUTION_PARSERS[self.key_mode](asset)

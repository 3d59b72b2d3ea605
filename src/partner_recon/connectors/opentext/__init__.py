"""OpenText partner directory and marketplace connectors."""

from partner_recon.connectors.opentext.connector import (
    PartnerDirectoryConnector,
    SolutionCatalogConnector,
)

__all__ = ["PartnerDirectoryConnector", "SolutionCatalogConnector"]

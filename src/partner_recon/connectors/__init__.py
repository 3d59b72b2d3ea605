"""Paginated dataset connectors."""

from partner_recon.connectors.base import BaseConnector
from partner_recon.connectors.collector import PaginatedCollector
from partner_recon.connectors.registry import ConnectorRegistry

__all__ = ["BaseConnector", "ConnectorRegistry", "PaginatedCollector"]

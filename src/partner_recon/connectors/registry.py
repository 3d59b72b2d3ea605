"""Dataset id lookup for the OpenText connectors."""

from typing import Type

from partner_recon.connectors.base import BaseConnector
from partner_recon.connectors.opentext import (
    PartnerDirectoryConnector,
    SolutionCatalogConnector,
)

# Fetch order: the partner map must exist before solutions are routed
_DATASETS: tuple[Type[BaseConnector], ...] = (
    PartnerDirectoryConnector,
    SolutionCatalogConnector,
)


class ConnectorRegistry:
    """Resolves a dataset id such as "partners" to a configured connector."""

    _by_id: dict[str, Type[BaseConnector]] = {c.dataset_id: c for c in _DATASETS}

    @classmethod
    def connector_class(cls, dataset_id: str) -> Type[BaseConnector]:
        """Connector class for a dataset id (case-insensitive)."""
        try:
            return cls._by_id[dataset_id.strip().lower()]
        except KeyError:
            known = ", ".join(cls._by_id)
            raise ValueError(f"Unknown dataset {dataset_id!r}; expected one of: {known}") from None

    @classmethod
    def get(cls, dataset_id: str, **kwargs) -> BaseConnector:
        """Instantiate the connector; kwargs (config, client) go to its constructor."""
        return cls.connector_class(dataset_id)(**kwargs)

    @classmethod
    def available_datasets(cls) -> list[str]:
        return list(cls._by_id)

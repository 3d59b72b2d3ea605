"""Abstract base class for dataset connectors."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

import httpx

from partner_recon.connectors.collector import PaginatedCollector
from partner_recon.models.config import RunConfig
from partner_recon.models.raw import RawAsset
from partner_recon.models.records import KeyMode

T = TypeVar("T")


class BaseConnector(ABC, Generic[T]):
    """
    Standard interface for one paginated dataset.
    Subclasses say where the listing lives, how it is sorted, and how a raw
    asset decodes into a typed record.
    """

    dataset_id: str = ""

    def __init__(
        self,
        config: Optional[RunConfig] = None,
        *,
        key_mode: Optional[KeyMode] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.config = config or RunConfig()
        self.key_mode = key_mode or self.config.key_mode
        self._collector = PaginatedCollector(
            client,
            headers=self.config.headers,
            timeout=self.config.timeout,
        )

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Base URL of the listing."""

    @property
    @abstractmethod
    def sorter(self) -> str:
        """Sort-key token understood by the listing."""

    @abstractmethod
    def transform(self, asset: RawAsset) -> Optional[T]:
        """
        Decode one raw asset; None when required fields are missing.
        """

    def fetch_all(self) -> list[T]:
        """Walk the whole listing and return decoded records in page order."""
        return self._collector.collect(
            self.endpoint,
            page_size=self.config.page_size,
            sorter=self.sorter,
            transform=self.transform,
        )

    def close(self) -> None:
        self._collector.close()

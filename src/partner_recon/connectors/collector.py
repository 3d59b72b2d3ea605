"""Paginated collector for offset-based asset listings.

The remote listings are plain GET endpoints that take
`q`, `start`, `max` and `sorter` query parameters and answer with
`{"total": N, "results": {"assets": [...]}}`.

The collector walks the listing one page at a time until the offset
reaches the announced total. Transport errors and malformed pages end the
walk early, but everything gathered up to that point is still returned.
"""

import logging
from typing import Any, Callable, Optional, TypeVar

import httpx

from partner_recon.errors import MalformedResponseError
from partner_recon.models.raw import RawAsset

logger = logging.getLogger(__name__)

T = TypeVar("T")

Transform = Callable[[RawAsset], Optional[T]]


class PaginatedCollector:
    """Drives one remote listing to exhaustion. No retries, no backoff."""

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        *,
        headers: Optional[dict[str, str]] = None,
        timeout: float = 30.0,
    ):
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers=headers,
        )

    def close(self) -> None:
        self._client.close()

    def _fetch_page(self, endpoint: str, *, start: int, page_size: int, sorter: str) -> dict:
        """GET one page and return the decoded JSON body."""
        params = {
            "q": "",
            "start": start,
            "max": page_size,
            "sorter": sorter,
        }
        resp = self._client.get(endpoint, params=params)
        resp.raise_for_status()
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Response is not JSON (content-type={resp.headers.get('content-type', '')})",
                offset=start,
            ) from e

    @staticmethod
    def _parse_page(payload: Any, start: int) -> tuple[list[Any], int]:
        """
        Split a page body into (assets, total).
        Raises MalformedResponseError when results.assets is not a list.
        """
        results = payload.get("results") if isinstance(payload, dict) else None
        assets = results.get("assets") if isinstance(results, dict) else None
        if not isinstance(assets, list):
            raise MalformedResponseError(
                f"Unexpected response structure at start={start}", offset=start
            )
        return assets, _coerce_total(payload.get("total"))

    def collect(
        self,
        endpoint: str,
        *,
        page_size: int,
        sorter: str,
        transform: Transform,
    ) -> list:
        """
        Fetch every page of `endpoint` and return transformed records in
        page order. Assets that transform to None are dropped.
        """
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")

        start = 0
        total: float = float("inf")
        results: list = []

        while start < total:
            try:
                payload = self._fetch_page(endpoint, start=start, page_size=page_size, sorter=sorter)
                assets, total = self._parse_page(payload, start)
            except MalformedResponseError as e:
                logger.warning("%s (%s); stopping with %d records", e, endpoint, len(results))
                break
            except httpx.HTTPError as e:
                logger.error(
                    "Error fetching %s at start=%d: %s; stopping with %d records",
                    endpoint,
                    start,
                    e,
                    len(results),
                )
                break

            items = []
            for asset in assets:
                item = transform(RawAsset(data=_as_dict(asset)))
                if item is not None:
                    items.append(item)
            results.extend(items)
            logger.debug(
                "Page start=%d: %d assets, %d kept (total=%d)",
                start,
                len(assets),
                len(items),
                total,
            )
            start += page_size

        logger.info("Collected %d records from %s", len(results), endpoint)
        return results


def _coerce_total(value: Any) -> int:
    """Missing, falsy or non-numeric totals count as 0."""
    if not value or isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_dict(asset: Any) -> dict:
    return asset if isinstance(asset, dict) else {}

"""Pytest fixtures for partner-recon tests."""

from typing import Any, Callable, Optional

import httpx
import pytest

from partner_recon.models.config import RunConfig

PARTNERS_URL = "https://example.test/partners.ajax"
SOLUTIONS_URL = "https://example.test/solutions.ajax"


def partner_asset(name: Optional[str] = None, partner_id: Any = None) -> dict:
    """Directory asset carrying both the display and the id-bearing partner blocks."""
    return {
        "contentJson": {
            "Partners": {
                "PartnerDisplay": {"Name": name},
                "Partner": {"Id": partner_id, "Name": name},
            }
        }
    }


def solution_asset(
    name: Optional[str],
    owner_name: Optional[str] = None,
    owner_id: Any = None,
    solution_id: Any = None,
) -> dict:
    """Marketplace asset."""
    return {
        "contentJson": {
            "Solutions": {
                "Solution": {
                    "solutionid": solution_id,
                    "solutionname": name,
                    "solutionpartner": owner_id,
                    "solutionpartnername": owner_name,
                }
            }
        }
    }


def page(assets: list, total: Any) -> dict:
    """Listing response body."""
    return {"total": total, "results": {"assets": assets}}


def paged_handler(
    pages_by_url: dict[str, list[dict]],
    seen: Optional[list[httpx.Request]] = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """
    MockTransport handler serving pages[start // max] for each base URL.
    Requests beyond the last page get a 500.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        base = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        pages = pages_by_url.get(base, [])
        start = int(request.url.params["start"])
        size = int(request.url.params["max"])
        index = start // size
        if index >= len(pages):
            return httpx.Response(500, json={"error": "no such page"})
        return httpx.Response(200, json=pages[index])

    return handler


@pytest.fixture
def config() -> RunConfig:
    """Config pointing at test URLs with a small page size."""
    return RunConfig(partners_url=PARTNERS_URL, solutions_url=SOLUTIONS_URL, page_size=2)


@pytest.fixture
def make_client() -> Callable[..., httpx.Client]:
    """Factory for httpx clients backed by a MockTransport; closes them after the test."""
    clients: list[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()

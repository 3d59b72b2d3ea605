"""Integration tests for the full reconciliation run."""

import httpx

from conftest import PARTNERS_URL, SOLUTIONS_URL, page, paged_handler, partner_asset, solution_asset
from partner_recon.pipeline import run_reconciliation


class TestRunReconciliation:
    """
    Full flow: registry -> connectors -> collect -> reconcile -> assemble.
    HTTP is served by a MockTransport so results are deterministic.
    """

    def test_id_mode_end_to_end(self, config, make_client) -> None:
        """Partners and solutions over several pages join by id."""
        pages = {
            PARTNERS_URL: [
                page([partner_asset("Zeta Systems", 2), partner_asset("Acme", 1)], 3),
                page([partner_asset("No Id Partner")], 3),
            ],
            SOLUTIONS_URL: [
                page(
                    [
                        solution_asset("Sol A", "Acme", owner_id=1, solution_id=100),
                        solution_asset("Sol B", None, owner_id=77, solution_id=101),
                    ],
                    4,
                ),
                page(
                    [
                        solution_asset("Sol C", "Seventy Seven", owner_id="77", solution_id=102),
                        solution_asset("Sol D", "Zeta", owner_id="2", solution_id=103),
                    ],
                    4,
                ),
            ],
        }
        client = make_client(paged_handler(pages))

        result = run_reconciliation(config, client=client)

        assert result.partners_fetched == 3
        assert result.solutions_fetched == 4
        assert result.solutions_matched == 2
        assert result.solutions_unmatched == 2
        assert result.document.to_dict() == {
            "partners": [
                {"partnerName": "Acme", "id": 1, "solutions": [{"solutionName": "Sol A", "solutionId": 100}]},
                {"partnerName": "No Id Partner", "id": None, "solutions": []},
                {"partnerName": "Zeta Systems", "id": 2, "solutions": [{"solutionName": "Sol D", "solutionId": 103}]},
            ],
            "unmatched": [
                {
                    "groupKey": "77",
                    "partnerId": 77,
                    "partnerName": "Seventy Seven",
                    "solutions": [
                        {"solutionName": "Sol B", "solutionId": 101},
                        {"solutionName": "Sol C", "solutionId": 102},
                    ],
                }
            ],
        }

    def test_name_mode_end_to_end(self, config, make_client) -> None:
        """Name mode joins on normalized names and groups leftovers by raw name."""
        pages = {
            PARTNERS_URL: [page([partner_asset("Acme Corp"), partner_asset("beta")], 2)],
            SOLUTIONS_URL: [
                page([solution_asset("One", "ACME CORP "), solution_asset("Two", "Gamma")], 3),
                page([solution_asset("Three", "Beta")], 3),
            ],
        }
        client = make_client(paged_handler(pages))

        result = run_reconciliation(config.with_overrides(key_mode="name"), client=client)

        assert result.document.to_dict() == {
            "partners": [
                {"partnerName": "Acme Corp", "solutions": [{"solutionName": "One"}]},
                {"partnerName": "beta", "solutions": [{"solutionName": "Three"}]},
            ],
            "unmatched": [{"groupKey": "Gamma", "solutions": [{"solutionName": "Two"}]}],
        }

    def test_failed_solution_page_still_reconciles_partial(self, config, make_client) -> None:
        """A transport failure mid-catalog reconciles what was fetched."""
        pages = {
            PARTNERS_URL: [page([partner_asset("Acme", 1)], 1)],
            SOLUTIONS_URL: [page([solution_asset("Sol A", "Acme", owner_id=1)], 10)],
        }
        client = make_client(paged_handler(pages))

        result = run_reconciliation(config, client=client)

        assert result.solutions_fetched == 1
        assert result.document.partners[0].solutions[0].solution_name == "Sol A"

    def test_unreachable_directory_yields_all_unmatched(self, config, make_client) -> None:
        """With no partners every solution is unmatched."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("partners.ajax"):
                raise httpx.ConnectError("down", request=request)
            return httpx.Response(200, json=page([solution_asset("S", "Acme", owner_id=1)], 1))

        result = run_reconciliation(config, client=make_client(handler))

        assert result.partners_fetched == 0
        assert result.document.partners == []
        assert [g.group_key for g in result.document.unmatched] == ["1"]

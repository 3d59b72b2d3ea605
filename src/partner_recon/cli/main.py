"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger("partner_recon.cli")


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="partner-recon",
        description="Join the OpenText partner directory with the application marketplace",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging (one line per fetched page)",
    )
    # config flags shared by run and fetch
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (endpoints, paging, key_mode)",
    )
    common.add_argument(
        "--key-mode",
        choices=["name", "id"],
        default=None,
        help="Join solutions to partners by normalized name or by partner id (default: id)",
    )
    common.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Assets requested per page (default: 15)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # run
    run_parser = subparsers.add_parser(
        "run",
        parents=[common],
        help="Fetch both datasets, reconcile and write JSON",
    )
    run_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON path, or '-' for stdout (default depends on key mode)",
    )

    # fetch
    fetch_parser = subparsers.add_parser(
        "fetch",
        parents=[common],
        help="Fetch one dataset and print decoded records",
    )
    fetch_parser.add_argument(
        "dataset",
        choices=["partners", "solutions"],
        help="Dataset to fetch",
    )
    fetch_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSON to file (default: stdout)",
    )

    # datasets
    subparsers.add_parser("datasets", help="List available datasets")

    args = parser.parse_args(argv)

    from partner_recon.log_config import configure_logging

    configure_logging(verbose=args.verbose)

    if args.command == "run":
        _run_reconcile(args)
    elif args.command == "fetch":
        _run_fetch(args)
    elif args.command == "datasets":
        _run_datasets(args)
    else:
        parser.print_help()


def _load_config(args: argparse.Namespace):
    """Defaults → YAML → env → CLI flags."""
    from partner_recon.errors import ConfigError
    from partner_recon.models.config import load_config

    try:
        config = load_config(args.config)
        return config.with_overrides(key_mode=args.key_mode, page_size=args.page_size)
    except ConfigError as e:
        raise SystemExit(str(e))


def _run_reconcile(args: argparse.Namespace) -> None:
    """Run reconcile command."""
    from partner_recon.pipeline import run_reconciliation
    from partner_recon.store import dump_document, write_document

    config = _load_config(args)
    if args.output and args.output != "-":
        config = config.with_overrides(output_path=Path(args.output))

    try:
        result = run_reconciliation(config)
        if args.output == "-":
            print(dump_document(result.document))
            out_path = None
        else:
            out_path = write_document(result.document, config.resolved_output_path)
    except Exception:
        logger.exception("Reconciliation failed; no output written")
        raise SystemExit(1)

    print(f"Total partners fetched: {result.partners_fetched}", file=sys.stderr)
    print(f"Total solutions fetched: {result.solutions_fetched}", file=sys.stderr)
    print(
        f"Solutions matched: {result.solutions_matched}, unmatched: {result.solutions_unmatched} "
        f"(in {len(result.document.unmatched)} groups)",
        file=sys.stderr,
    )
    if out_path is not None:
        print(f"Final JSON with solutions grouped by partner saved to {out_path}", file=sys.stderr)


def _run_fetch(args: argparse.Namespace) -> None:
    """Run fetch command."""
    from partner_recon.connectors.registry import ConnectorRegistry

    config = _load_config(args)
    connector = ConnectorRegistry.get(args.dataset, config=config)
    try:
        records = connector.fetch_all()
    finally:
        connector.close()

    output = json.dumps(
        [r.model_dump(mode="json") for r in records],
        indent=2,
        ensure_ascii=False,
    )
    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Wrote {len(records)} {args.dataset} to {args.output}", file=sys.stderr)
    else:
        print(output)


def _run_datasets(args: argparse.Namespace) -> None:
    """Run datasets command."""
    from partner_recon.connectors.registry import ConnectorRegistry

    for dataset_id in ConnectorRegistry.available_datasets():
        print(dataset_id)


if __name__ == "__main__":
    main()

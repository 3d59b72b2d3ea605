#!/usr/bin/env python3
"""Quick live check of both OpenText listings: first page only.

Run:
  poetry run python scripts/fetch_live_sample.py            # id mode
  poetry run python scripts/fetch_live_sample.py name       # name mode
"""

import sys

from partner_recon.connectors.registry import ConnectorRegistry
from partner_recon.models.config import RunConfig
from partner_recon.models.raw import RawAsset


def main() -> None:
    key_mode = sys.argv[1] if len(sys.argv) > 1 else "id"
    config = RunConfig(key_mode=key_mode, page_size=5)

    for dataset_id in ConnectorRegistry.available_datasets():
        connector = ConnectorRegistry.get(dataset_id, config=config)
        collector = connector._collector
        try:
            payload = collector._fetch_page(
                connector.endpoint,
                start=0,
                page_size=config.page_size,
                sorter=connector.sorter,
            )
            assets, total = collector._parse_page(payload, 0)
        except Exception as e:
            print(f"⚠️ {dataset_id}: {e}")
            continue
        finally:
            connector.close()

        print(f"{dataset_id}: total={total}, first page has {len(assets)} assets")
        for i, asset in enumerate(assets, 1):
            print(f"  {i}. {connector.transform(RawAsset(data=asset))}")


if __name__ == "__main__":
    main()

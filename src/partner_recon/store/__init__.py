"""Persistence of reconciled documents."""

from partner_recon.store.json_store import dump_document, load_document, write_document

__all__ = ["dump_document", "load_document", "write_document"]

"""JSON persistence for reconciled output documents."""

import json
import logging
from pathlib import Path

from partner_recon.models.records import KeyMode, OutputDocument

logger = logging.getLogger(__name__)


def dump_document(document: OutputDocument) -> str:
    """Serialize to pretty-printed JSON, keeping non-ASCII characters."""
    return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)


def write_document(document: OutputDocument, path: str | Path) -> Path:
    """
    Write the document to path, creating parent directories.
    The JSON is built before the file is opened, so a serialization error
    leaves no partial file behind.
    """
    out = Path(path)
    payload = dump_document(document)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(payload, encoding="utf-8")
    logger.info(
        "Wrote %d partners and %d unmatched groups to %s",
        len(document.partners),
        len(document.unmatched),
        out,
    )
    return out


def load_document(path: str | Path, key_mode: KeyMode = KeyMode.ID) -> OutputDocument:
    """Read a document written by write_document."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return OutputDocument.from_dict(data, key_mode=key_mode)

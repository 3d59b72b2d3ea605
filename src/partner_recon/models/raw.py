"""Raw listing asset before per-dataset decoding."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawAsset(BaseModel):
    """
    One opaque record from a remote asset listing.
    Only the dataset parsers know what lives inside `data`.
    """

    model_config = ConfigDict(extra="allow")

    data: dict[str, Any] = Field(default_factory=dict)

    def dig(self, *path: str) -> Any:
        """Walk nested dict keys; returns None as soon as a step is missing."""
        node: Any = self.data
        for key in path:
            if not isinstance(node, dict):
                return None
            node = node.get(key)
            if node is None:
                return None
        return node

"""Run configuration: endpoints, paging and keying mode."""

import os
from pathlib import Path
from typing import Any, Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for config loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, Field, ValidationError

from partner_recon.errors import ConfigError
from partner_recon.models.records import KeyMode

PARTNERS_URL = "https://www.opentext.com/en/partners/partners-directory-overview/1716790338234.ajax"
SOLUTIONS_URL = "https://www.opentext.com/en/partners/ApplicationMarketplace/1754971906819.ajax"

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/120.0.0.0 Safari/537.36",
    "Accept": "application/json, text/plain, */*",
    "Referer": "https://www.opentext.com/partners/partner-directory",
}

DEFAULT_OUTPUT = {
    KeyMode.NAME: Path("partners_solutions.json"),
    KeyMode.ID: Path("partners_solutions_withId.json"),
}

ENV_PREFIX = "PARTNER_RECON_"


class RunConfig(BaseModel):
    """Everything a reconciliation run needs besides the HTTP client."""

    partners_url: str = PARTNERS_URL
    solutions_url: str = SOLUTIONS_URL
    page_size: int = Field(default=15, gt=0, description="Assets requested per page")
    partners_sorter: str = "Default_Sort"
    solutions_sorter: str = "Name"
    key_mode: KeyMode = KeyMode.ID
    output_path: Optional[Path] = Field(
        default=None,
        description="Defaults to a per-key-mode filename",
    )
    timeout: float = Field(default=30.0, gt=0)
    headers: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_HEADERS))

    @property
    def resolved_output_path(self) -> Path:
        return self.output_path or DEFAULT_OUTPUT[self.key_mode]

    def with_overrides(self, **overrides: Any) -> "RunConfig":
        """Copy with non-None overrides applied and re-validated."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return _validate(data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RunConfig":
        """
        Load config from YAML. Supports flat keys or nested
        `endpoints:` (partners_url, solutions_url) and
        `paging:` (page_size, partners_sorter, solutions_sorter) sections.
        """
        p = Path(path)
        if not p.exists():
            raise ConfigError(f"Config file not found: {p}")
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {p}")

        flat: dict[str, Any] = {}
        for section in ("endpoints", "paging"):
            nested = data.get(section) or {}
            flat.update(nested)
        flat.update({k: v for k, v in data.items() if k not in ("endpoints", "paging")})
        if isinstance(flat.get("headers"), dict):
            flat["headers"] = {**DEFAULT_HEADERS, **flat["headers"]}
        return _validate(flat)

    @classmethod
    def from_env(cls, base: Optional["RunConfig"] = None) -> "RunConfig":
        """Apply PARTNER_RECON_* environment overrides on top of base (or defaults)."""
        base = base or cls()
        return base.with_overrides(
            partners_url=os.environ.get(f"{ENV_PREFIX}PARTNERS_URL") or None,
            solutions_url=os.environ.get(f"{ENV_PREFIX}SOLUTIONS_URL") or None,
            page_size=os.environ.get(f"{ENV_PREFIX}PAGE_SIZE") or None,
            key_mode=(os.environ.get(f"{ENV_PREFIX}KEY_MODE") or "").lower() or None,
        )


def load_config(path: Optional[str | Path] = None) -> RunConfig:
    """Defaults, then YAML file (if given), then environment."""
    base = RunConfig.from_yaml(path) if path else RunConfig()
    return RunConfig.from_env(base)


def _validate(data: dict[str, Any]) -> RunConfig:
    try:
        return RunConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

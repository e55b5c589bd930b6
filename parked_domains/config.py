# === FILE: parked_domains/config.py ===
"""
Loading and validation of the ParkedDomains scanner configuration.
The schema is described and checked with Pydantic.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from parked_domains.classifier import DEFAULT_SIGNATURES

DEFAULT_USER_AGENT = "Mozilla/5.0 Gecko/18.1 Firefox/18.1"


class ScannerConfig(BaseModel):
    """Settings for a single scan run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    threads: int = Field(10, ge=1, description="Number of concurrent workers.")
    timeout: float = Field(25.0, gt=0, description="Per-request timeout (seconds).")
    insecure: bool = Field(True, description="Skip TLS certificate verification.")
    verbose: bool = Field(False, description="Show per-URL fetch errors.")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="User-Agent header.")
    max_redirects: int = Field(10, ge=0, description="Same-host redirect hops to follow.")
    signatures: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SIGNATURES),
        description="Signature phrases of parked pages.",
    )
    signatures_file: Optional[Path] = Field(
        None, description="Extra signature phrases, one per line."
    )

    @model_validator(mode="after")
    def _check_signatures_file_exists(self) -> ScannerConfig:
        if self.signatures_file is not None and not self.signatures_file.is_file():
            raise FileNotFoundError(
                errno.ENOENT, os.strerror(errno.ENOENT), str(self.signatures_file)
            )
        return self


_DEFAULT_CFG = Path("parked_domains.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> ScannerConfig:
    """
    Reads YAML or JSON and returns a validated ScannerConfig.
    Without *path*, ``parked_domains.yaml`` in the working directory is used
    when present; otherwise the defaults apply.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return ScannerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    # relative paths inside a config file point next to that file
    if isinstance(data.get("signatures_file"), str):
        signatures_file = Path(data["signatures_file"]).expanduser()
        if not signatures_file.is_absolute():
            signatures_file = path_obj.parent / signatures_file
        data["signatures_file"] = signatures_file

    return ScannerConfig(**data)


def with_overrides(config: ScannerConfig, **overrides: Any) -> ScannerConfig:
    """Returns a re-validated copy of *config*; ``None`` overrides are ignored."""
    update = {k: v for k, v in overrides.items() if v is not None}
    if not update:
        return config
    return ScannerConfig(**{**config.model_dump(), **update})


__all__ = ["DEFAULT_USER_AGENT", "ScannerConfig", "ValidationError", "load_config", "with_overrides"]

"""
Global Configuration and Defaults.

Centralizes the layout constants and view defaults, and loads optional
overrides from a ``certmap.yaml`` file:

    data:
      path: ./my-catalog.json
    layout:
      x_gap: 400
      y_gap: 160
    view:
      vendor: Azure
      show_recommended: false
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.errors import SchemaError
from .core.types import Vendor

logger = logging.getLogger(__name__)

# --- Layout ---
# Horizontal distance between level columns
DEFAULT_X_GAP = 400
# Vertical distance between stacked slots of one level
DEFAULT_Y_GAP = 160
DEFAULT_X_OFFSET = 40
DEFAULT_Y_OFFSET = 40

# --- View ---
DEFAULT_VENDOR = Vendor.AWS
DEFAULT_SHOW_RECOMMENDED = True
DEFAULT_SUGGESTION_LIMIT = 8
DEFAULT_VIEW_CACHE_SIZE = 64

CONFIG_FILENAME = "certmap.yaml"


class DataSection(BaseModel):
    path: Path | None = None

    model_config = ConfigDict(extra="forbid")


class LayoutSection(BaseModel):
    x_gap: float = DEFAULT_X_GAP
    y_gap: float = DEFAULT_Y_GAP
    x_offset: float = DEFAULT_X_OFFSET
    y_offset: float = DEFAULT_Y_OFFSET

    model_config = ConfigDict(extra="forbid")


class ViewSection(BaseModel):
    vendor: Vendor = DEFAULT_VENDOR
    show_recommended: bool = DEFAULT_SHOW_RECOMMENDED

    model_config = ConfigDict(extra="forbid")


class CertmapConfig(BaseModel):
    """User configuration. Every section is optional."""
    data: DataSection = Field(default_factory=DataSection)
    layout: LayoutSection = Field(default_factory=LayoutSection)
    view: ViewSection = Field(default_factory=ViewSection)

    model_config = ConfigDict(extra="forbid")


def load_config(path: Path | str | None = None) -> CertmapConfig:
    """
    Load configuration from YAML.

    Args:
        path: Explicit config file. Defaults to ``certmap.yaml`` in the
            current directory.

    Returns:
        The parsed config, or defaults when the file does not exist.

    Raises:
        SchemaError: If the file is not valid YAML or has unknown keys
            or wrongly typed values.
    """
    config_path = Path(path) if path else Path.cwd() / CONFIG_FILENAME
    if not config_path.exists():
        logger.debug(f"No config at {config_path}, using defaults")
        return CertmapConfig()

    try:
        raw: Any = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise SchemaError(f"invalid YAML: {e}", path=str(config_path)) from e

    if not isinstance(raw, dict):
        raise SchemaError("config root must be a mapping", path=str(config_path))

    try:
        config = CertmapConfig.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(part) for part in first["loc"])
        raise SchemaError(f"{loc}: {first['msg']}", path=str(config_path)) from e

    # Relative data paths resolve against the config file, not the cwd
    if config.data.path is not None and not config.data.path.is_absolute():
        config = config.model_copy(
            update={"data": DataSection(path=config_path.parent / config.data.path)}
        )
    return config

"""Runtime settings for modifierswift.

Resolution order (later wins):
    1. Defaults declared on ``Settings``
    2. YAML file (``modifierswift.yaml`` in the working directory, or an explicit path)
    3. ``MODIFIERSWIFT_<FIELD>`` environment variables (``.env`` is loaded first)
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .core.constants import (
    DEFAULT_MAX_TYPE_DEPTH,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_UNION_SUFFIX,
    SWIFT_FILE_EXTENSION,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "modifierswift.yaml"
ENV_PREFIX = "MODIFIERSWIFT_"

# Fields that cannot be expressed as a single environment variable
_NON_ENV_FIELDS = frozenset({"union_names"})


class Settings(BaseModel):
    output_dir: str = DEFAULT_OUTPUT_DIR
    log_level: str = "INFO"
    file_extension: str = SWIFT_FILE_EXTENSION
    union_suffix: str = DEFAULT_UNION_SUFFIX
    # Per-category enum names, e.g. {"Layout": "LayoutStyle"}
    union_names: Dict[str, str] = Field(default_factory=dict)
    skip_generic_modifiers: bool = True
    deduplicate_overloads: bool = True
    emit_default_values: bool = True
    max_type_depth: int = Field(default=DEFAULT_MAX_TYPE_DEPTH, ge=1)
    clean_output: bool = False

    def union_name(self, category_label: str) -> str:
        """Enum name for a category label: ``Layout`` -> ``LayoutModifier``."""
        return self.union_names.get(category_label, f"{category_label}{self.union_suffix}")


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"{path} must contain a mapping at the top level")
    logger.debug(f"Loaded settings from {path}: {sorted(config)}")
    return config


def _env_overrides() -> Dict[str, str]:
    overrides = {}
    for name in Settings.model_fields:
        if name in _NON_ENV_FIELDS:
            continue
        value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = value
    return overrides


def load_settings(config_path: Optional[str] = None) -> Settings:
    """Build Settings from defaults, an optional YAML file and the environment.

    Args:
        config_path: Explicit YAML path. When omitted, ``modifierswift.yaml``
            in the working directory is used if present.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist
        pydantic.ValidationError: If a value has the wrong type
    """
    load_dotenv()

    data: Dict[str, Any] = {}
    if config_path:
        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        data.update(_read_yaml(path))
    elif Path(DEFAULT_CONFIG_FILE).is_file():
        data.update(_read_yaml(Path(DEFAULT_CONFIG_FILE)))

    data.update(_env_overrides())
    return Settings(**data)


@lru_cache(maxsize=None)
def get_settings(config_path: Optional[str] = None) -> Settings:
    """Cached ``load_settings`` for process-wide use."""
    return load_settings(config_path)

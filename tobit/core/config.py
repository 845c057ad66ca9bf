"""
Ingestion configuration: which manuscripts to load, from where, in what order.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from tobit.core.constants import DEFAULT_MANUSCRIPTS, ERROR_INVALID_CONFIG, MANUSCRIPTS_ENV_VAR
from tobit.core.errors import ConfigError
from tobit.core.models import CorpusConfig, ManuscriptSource


def default_config(base: Optional[str] = None) -> CorpusConfig:
    """The five Georgian witnesses of Tobit, in display order."""
    if base is None:
        base = os.environ.get(MANUSCRIPTS_ENV_VAR, "")
    return CorpusConfig(
        base=base,
        manuscripts=[ManuscriptSource(**entry) for entry in DEFAULT_MANUSCRIPTS],
    )


def load_config(path: Union[str, Path], base: Optional[str] = None) -> CorpusConfig:
    """
    Load an ingestion configuration from a JSON file.

    The file holds an object with a ``manuscripts`` list and optionally a
    ``base`` directory or URL. A relative ``base`` is taken relative to the
    configuration file itself; an explicit ``base`` argument overrides it.

    Raises:
        ConfigError: If the file cannot be read or does not validate
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        config = CorpusConfig.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"{ERROR_INVALID_CONFIG.format(path=path)}: {e}") from e

    if base is not None:
        config.base = base
    elif not config.base:
        config.base = str(path.parent)
    elif "://" not in config.base and not Path(config.base).is_absolute():
        config.base = str(path.parent / config.base)
    return config

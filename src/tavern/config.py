"""Loading named validator chains from configuration files.

A chains file maps names to validator configurations (see ``tavern.factory``):

    ```yaml
    chains:
      username:
        - type: required
        - type: length
          min: ${USERNAME_MIN_LENGTH:3}
          max: 20
      email:
        - type: email
    ```

``${VAR}`` and ``${VAR:default}`` references are replaced from the
environment before the validators are built. Substituted values are always
strings; numeric bounds such as ``min`` are converted by the factory.
"""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .exceptions import ConfigurationError
from .factory import validator_factory
from .validators.base import Validator

logger = logging.getLogger(__name__)

_ENV_REFERENCE = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


def substitute_env_vars(data: Any) -> Any:
    """Recursively substitute environment variables in configuration.

    Supports formats:
    - ${VAR_NAME}: Required variable, raises error if not set
    - ${VAR_NAME:default_value}: Optional with default

    Args:
        data: Configuration data (dict, list, string, or primitive)

    Returns:
        Data with environment variables substituted

    Raises:
        ConfigurationError: If a required environment variable is not set
    """
    if isinstance(data, dict):
        return {k: substitute_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [substitute_env_vars(item) for item in data]
    elif isinstance(data, str):
        return _substitute_string(data)
    else:
        return data


def _substitute_string(value: str) -> str:
    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default_value = match.group(2)

        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value
        elif default_value is not None:
            return default_value
        raise ConfigurationError(
            f"Required environment variable not set: {var_name}",
            context={"variable": var_name},
        )

    return _ENV_REFERENCE.sub(replacer, value)


def _read_file(path: Path) -> Any:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}", context={"path": str(path)})

    suffix = path.suffix.lower()
    try:
        with open(path) as f:
            if suffix in [".yaml", ".yml"]:
                return yaml.safe_load(f)
            elif suffix == ".json":
                return json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot parse {path}: {e}", context={"path": str(path)}) from e
    raise ConfigurationError(f"Unsupported file format: {suffix}", context={"path": str(path)})


def load_chains(source: Union[str, Path, dict]) -> Dict[str, List[Validator]]:
    """Load named validator chains.

    Args:
        source: Path to a YAML or JSON file, or an already loaded dictionary,
            with a top-level ``chains`` mapping

    Returns:
        Validator chains by name, in file order

    Raises:
        ConfigurationError: If the source cannot be read or a chain is invalid
    """
    if isinstance(source, dict):
        data = source
    elif isinstance(source, (str, Path)):
        data = _read_file(Path(source).resolve())
    else:
        raise ConfigurationError(f"Invalid source type: {type(source).__name__}")

    if not isinstance(data, dict) or not isinstance(data.get("chains"), dict):
        raise ConfigurationError("Configuration must contain a 'chains' mapping")

    loaded: Dict[str, List[Validator]] = {}
    for name, configs in substitute_env_vars(data["chains"]).items():
        if not isinstance(configs, list):
            raise ConfigurationError(
                f"Chain '{name}' must be a list of validators", context={"chain": name}
            )
        loaded[str(name)] = validator_factory.create_all(configs)
        logger.info(f"Loaded validator chain: {name} ({len(loaded[str(name)])} validators)")
    return loaded

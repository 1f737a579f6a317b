"""
Configuration loader for YAML-based lattice setup.

Provides functions to load a lattice configuration from YAML files or
dictionaries and build a LatticeMap from it.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from pykmc.core import LatticeConfig, LatticeConfigurationError, LatticeMap, PyKMCConfig

logger = logging.getLogger(__name__)


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        path: Path to YAML file.

    Returns:
        Dictionary with configuration.

    Raises:
        LatticeConfigurationError: If the file is not valid YAML or the
            document is not a mapping.
    """
    with open(path, "r") as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise LatticeConfigurationError(
                f"Malformed YAML in configuration file {path}: {exc}"
            ) from exc

    if not isinstance(config, dict):
        raise LatticeConfigurationError(
            f"Configuration file {path} must contain a mapping, got {type(config).__name__}"
        )
    return config


def parse_config(config: Dict[str, Any]) -> PyKMCConfig:
    """
    Validate a configuration dictionary.

    Raises:
        LatticeConfigurationError: Wrapping the pydantic validation error.
    """
    try:
        return PyKMCConfig.model_validate(config)
    except ValidationError as exc:
        raise LatticeConfigurationError(f"Invalid lattice configuration: {exc}") from exc


def build_lattice_map(config: Union[Dict[str, Any], LatticeConfig]) -> LatticeMap:
    """
    Build a LatticeMap from configuration.

    Args:
        config: Either a full configuration dictionary (with a ``lattice``
            section) or an already validated LatticeConfig.

    Returns:
        Configured LatticeMap.

    Example config:
        lattice:
          basis: 2
          repetitions: [4, 4, 4]
          periodic: [true, true, false]
    """
    if isinstance(config, LatticeConfig):
        lattice_config = config
    else:
        lattice_config = parse_config(config).lattice

    lattice = LatticeMap(
        n_basis=lattice_config.n_basis,
        repetitions=lattice_config.repetitions,
        periodic=lattice_config.periodic,
    )
    logger.info("Built %r", lattice)
    return lattice


def load_lattice_map(path: Union[str, Path]) -> LatticeMap:
    """
    Load configuration from YAML and build the LatticeMap.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Configured LatticeMap.
    """
    logger.debug("Loading lattice configuration from %s", path)
    return build_lattice_map(load_yaml(path))

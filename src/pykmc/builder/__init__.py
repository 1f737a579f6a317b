"""
Builder module for constructing lattice maps from configuration.
"""

from .config_loader import build_lattice_map, load_lattice_map, load_yaml, parse_config

__all__ = [
    "build_lattice_map",
    "load_lattice_map",
    "load_yaml",
    "parse_config",
]

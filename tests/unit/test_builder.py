"""
Unit tests for builder module.
"""
from pathlib import Path

import pytest

from pykmc.builder import build_lattice_map, load_lattice_map, load_yaml, parse_config
from pykmc.core import (
    LatticeConfig,
    LatticeConfigurationError,
    LatticeMap,
    Periodicity,
    Repetitions,
)


SLAB_YAML = """\
lattice:
  basis: 2
  repetitions: [4, 3, 5]
  periodic: [true, true, false]
"""


@pytest.fixture
def slab_file(tmp_path: Path) -> Path:
    path = tmp_path / "slab.yaml"
    path.write_text(SLAB_YAML)
    return path


class TestBuildLatticeMap:
    """Tests for building a LatticeMap from a dictionary."""

    def test_basic(self) -> None:
        lattice = build_lattice_map({
            "lattice": {"basis": 2, "repetitions": [2, 3, 4], "periodic": [True, False, True]},
        })
        assert isinstance(lattice, LatticeMap)
        assert lattice.n_basis == 2
        assert lattice.repetitions == Repetitions(2, 3, 4)
        assert lattice.periodic == Periodicity(True, False, True)

    def test_defaults(self) -> None:
        lattice = build_lattice_map({"lattice": {"repetitions": [2, 2, 2]}})
        assert lattice.n_basis == 1
        assert lattice.periodic == Periodicity(True, True, True)

    def test_basis_point_list(self) -> None:
        """A list of basis points counts as that many basis sites."""
        lattice = build_lattice_map({
            "lattice": {
                "basis": [[0.0, 0.0, 0.0], [0.5, 0.5, 0.5]],
                "repetitions": [3, 3, 3],
            },
        })
        assert lattice.n_basis == 2

    def test_from_validated_model(self) -> None:
        config = LatticeConfig(basis=3, repetitions=[1, 2, 3])
        assert build_lattice_map(config).n_sites == 18

    def test_other_sections_ignored(self) -> None:
        lattice = build_lattice_map({
            "lattice": {"repetitions": [2, 2, 2]},
            "processes": [{"rate": 1.0}],
        })
        assert lattice.n_sites == 8

    @pytest.mark.parametrize("lattice_section", [
        {"repetitions": [0, 2, 2]},
        {"repetitions": [2, 2]},
        {"repetitions": [2, 2, 2], "basis": 0},
        {"repetitions": [2, 2, 2], "basis": []},
        {"repetitions": [2, 2, 2], "basis": True},
        {"repetitions": [True, 2, 2]},
        {"repetitions": ["2", 2, 2]},
        {"repetitions": [2, 2, 2], "periodic": [True]},
        {"repetitions": [2, 2, 2], "shape": "cubic"},
        {"basis": 1},
    ])
    def test_invalid_lattice_section(self, lattice_section) -> None:
        with pytest.raises(LatticeConfigurationError, match="Invalid lattice configuration"):
            build_lattice_map({"lattice": lattice_section})

    def test_missing_lattice_section(self) -> None:
        with pytest.raises(LatticeConfigurationError):
            build_lattice_map({})

    def test_logging_section(self) -> None:
        config = parse_config({
            "lattice": {"repetitions": [1, 1, 1]},
            "logging": {"level": "debug"},
        })
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "plain"

    @pytest.mark.parametrize("logging_section", [
        {"level": 10},
        {"level": "CHATTY"},
        {"format": "json"},
        {"level": "INFO", "colour": True},
    ])
    def test_invalid_logging_section(self, logging_section) -> None:
        with pytest.raises(LatticeConfigurationError, match="Invalid lattice configuration"):
            parse_config({
                "lattice": {"repetitions": [1, 1, 1]},
                "logging": logging_section,
            })

    def test_default_periodicity(self) -> None:
        config = parse_config({"lattice": {"repetitions": [1, 1, 1]}})
        assert Periodicity(*config.lattice.periodic) == Periodicity.all_periodic()


class TestLoadYaml:
    """Tests for YAML file loading."""

    def test_load_yaml(self, slab_file: Path) -> None:
        config = load_yaml(slab_file)
        assert config["lattice"]["repetitions"] == [4, 3, 5]

    def test_load_lattice_map(self, slab_file: Path) -> None:
        lattice = load_lattice_map(slab_file)
        assert lattice.n_sites == 2 * 4 * 3 * 5
        assert lattice.boundary.get_name() == "Mixed(AB periodic)"

    def test_load_lattice_map_str_path(self, slab_file: Path) -> None:
        assert load_lattice_map(str(slab_file)) == load_lattice_map(slab_file)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(LatticeConfigurationError, match="must contain a mapping"):
            load_yaml(path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("lattice: [unclosed\n")
        with pytest.raises(LatticeConfigurationError, match="Malformed YAML"):
            load_yaml(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_lattice_map(tmp_path / "missing.yaml")

"""
Pydantic models for lattice configuration payloads.

All validation and field constraints for configuration read from YAML
files or dictionaries live here. The loader imports these models; it never
checks fields itself.
"""
from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from .cell import Periodicity

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LatticeConfig(BaseModel):
    """The ``lattice:`` section of a configuration file."""

    model_config = ConfigDict(extra="forbid")

    # Strict: booleans are not counts, same as the LatticeMap constructor
    basis: Union[StrictInt, List[List[float]]] = Field(
        1,
        description="Number of basis sites per cell, or the list of basis points",
    )
    repetitions: List[StrictInt] = Field(
        ...,
        description="Number of cells along the a, b and c axes",
    )
    periodic: List[bool] = Field(
        default_factory=lambda: list(Periodicity.all_periodic()),
        description="Periodicity of the a, b and c axes",
    )

    @field_validator("basis")
    @classmethod
    def basis_must_be_non_empty(cls, v: Union[int, List[List[float]]]):
        if isinstance(v, int):
            if v <= 0:
                raise ValueError(f"basis must be positive, got {v}")
        elif not v:
            raise ValueError("basis point list cannot be empty")
        return v

    @field_validator("repetitions")
    @classmethod
    def repetitions_must_be_positive_triple(cls, v: List[int]) -> List[int]:
        if len(v) != 3:
            raise ValueError(f"repetitions must have 3 entries, got {len(v)}")
        if any(n <= 0 for n in v):
            raise ValueError(f"repetitions must be positive, got {v}")
        return v

    @field_validator("periodic")
    @classmethod
    def periodic_must_be_triple(cls, v: List[bool]) -> List[bool]:
        if len(v) != 3:
            raise ValueError(f"periodic must have 3 entries, got {len(v)}")
        return v

    @property
    def n_basis(self) -> int:
        return self.basis if isinstance(self.basis, int) else len(self.basis)


class LoggingConfig(BaseModel):
    """The ``logging:`` section of a configuration file."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field("WARNING", description=f"Level name ({', '.join(LOG_LEVELS)})")
    format: Literal["structured", "plain"] = Field(
        "plain",
        description="'structured' adds timestamp and logger name",
    )

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in LOG_LEVELS:
            raise ValueError(f"level must be one of {LOG_LEVELS}, got {v!r}")
        return v_upper


class PyKMCConfig(BaseModel):
    """Top-level configuration document."""

    lattice: LatticeConfig
    logging: Optional[LoggingConfig] = Field(
        None,
        description="Optional logging settings (level, format)",
    )

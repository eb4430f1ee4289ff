"""Typed application defaults for command line runs."""
from __future__ import annotations

from dataclasses import dataclass, field

# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class StampDefaults:
    """Defaults for the command line flags (millimetres, opacity 0..1)."""
    anchor: int = 1
    offset_x: float = 10.0
    offset_y: float = 10.0
    width: float = 0.0
    height: float = 0.0
    opacity: float = 0.8


@dataclass(frozen=True)
class GeneralConfig:
    log_level: str = "WARNING"


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class ConfigService:
    """
    Fixed, embedded configuration. No config file and no environment
    overrides are read: the command line is the only way to change a run.
    """
    stamp: StampDefaults = field(default_factory=StampDefaults)
    general: GeneralConfig = field(default_factory=GeneralConfig)

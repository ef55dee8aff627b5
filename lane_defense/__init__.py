"""
Lane Defense - a lane-based tower-defense simulation core.
NO UI DEPENDENCIES.
"""
from .config import Settings, get_settings
from .entities import PlantType, Plant, Projectile, Attacker, Resource, PLANT_COSTS
from .errors import InvariantViolation
from .game import Game
from .state import Snapshot
from .waves import WavePhase, RoundConfig, round_config

__all__ = [
    "Game", "Settings", "get_settings", "Snapshot",
    "PlantType", "Plant", "Projectile", "Attacker", "Resource", "PLANT_COSTS",
    "WavePhase", "RoundConfig", "round_config", "InvariantViolation",
]

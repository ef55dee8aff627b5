"""
Events emitted by the simulation for presentation and audio to react to.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .entities import PlantType

if TYPE_CHECKING:
    from .waves import WavePhase


@dataclass(frozen=True)
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass(frozen=True)
class FireEvent(GameEvent):
    """A shooter spawned a projectile."""
    plant_id: str
    projectile_id: str
    row: int


@dataclass(frozen=True)
class ResourceSpawnedEvent(GameEvent):
    """A generator emitted a resource."""
    resource_id: str
    x: float
    y: float


@dataclass(frozen=True)
class ResourceCollectedEvent(GameEvent):
    """The player collected a resource."""
    resource_id: str
    amount: int
    new_balance: int


@dataclass(frozen=True)
class ResourceExpiredEvent(GameEvent):
    """A resource ran out of time uncollected."""
    resource_id: str


@dataclass(frozen=True)
class PlantPlacedEvent(GameEvent):
    """A plant was placed and paid for."""
    plant_id: str
    plant_type: PlantType
    row: int
    col: int
    cost: int


@dataclass(frozen=True)
class PlantDestroyedEvent(GameEvent):
    """A plant was eaten down to zero hp."""
    plant_id: str
    row: int
    col: int


@dataclass(frozen=True)
class EatingEvent(GameEvent):
    """An attacker spent this tick eating a plant."""
    attacker_id: str
    plant_id: str


@dataclass(frozen=True)
class AttackerSpawnedEvent(GameEvent):
    """The wave director released an attacker."""
    attacker_id: str
    row: int


@dataclass(frozen=True)
class AttackerKilledEvent(GameEvent):
    """An attacker's hp reached zero."""
    attacker_id: str
    row: int


@dataclass(frozen=True)
class RoundStartedEvent(GameEvent):
    """A new round began spawning."""
    round_number: int
    spawn_count: int


@dataclass(frozen=True)
class PhaseChangedEvent(GameEvent):
    """Wave director phase changed."""
    old_phase: 'WavePhase'
    new_phase: 'WavePhase'


@dataclass(frozen=True)
class GameOverEvent(GameEvent):
    """An attacker reached the near boundary."""
    round_number: int
    attacker_id: str

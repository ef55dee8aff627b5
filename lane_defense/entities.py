"""
Simulation entities: Plant, Projectile, Attacker, Resource.
NO UI DEPENDENCIES.

Entities never hold references to each other. Relationships such as
"this attacker is eating that plant" are looked up by tile address
every tick.
"""
from dataclasses import dataclass
from enum import Enum

from .constants import (
    PLANT_HP, PLANT_INITIAL_COOLDOWN,
    SINGLE_SHOOTER_CADENCE, DOUBLE_SHOOTER_CADENCE
)


class PlantType(Enum):
    """Types of plants that can be placed."""
    GENERATOR = "generator"            # emits resources
    SINGLE_SHOOTER = "single-shooter"  # one projectile per shot
    DOUBLE_SHOOTER = "double-shooter"  # two projectiles per shot, staggered

    @property
    def is_shooter(self) -> bool:
        return self is not PlantType.GENERATOR


# Placement cost for each plant type
PLANT_COSTS = {
    PlantType.GENERATOR: 50,
    PlantType.SINGLE_SHOOTER: 100,
    PlantType.DOUBLE_SHOOTER: 200,
}

# Seconds between shots for each shooter type
FIRE_CADENCE = {
    PlantType.SINGLE_SHOOTER: SINGLE_SHOOTER_CADENCE,
    PlantType.DOUBLE_SHOOTER: DOUBLE_SHOOTER_CADENCE,
}


@dataclass
class Plant:
    """A defender occupying one tile."""
    id: str
    type: PlantType
    row: int
    col: int
    cooldown: float = PLANT_INITIAL_COOLDOWN
    hp: float = PLANT_HP

    @property
    def is_alive(self) -> bool:
        return self.hp > 0


@dataclass
class Projectile:
    """A shot travelling right along a lane."""
    id: str
    row: int
    x: float
    speed: float


@dataclass
class Attacker:
    """An enemy walking left along a lane."""
    id: str
    row: int
    x: float
    hp: float
    speed: float
    eating: bool = False

    @property
    def is_alive(self) -> bool:
        return self.hp > 0


@dataclass
class Resource:
    """A collectible dropped by a generator. Expires when ttl runs out."""
    id: str
    x: float
    y: float
    ttl: float

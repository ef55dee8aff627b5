"""
Economy: balance, resource generation, decay, and collection.
NO UI DEPENDENCIES.
"""
import logging
from typing import List, Optional, TYPE_CHECKING

from .constants import GENERATOR_INTERVAL, RESOURCE_AMOUNT, RESOURCE_TTL, EXPIRY_EPSILON
from .entities import PlantType, Plant, Resource, PLANT_COSTS
from .errors import InvariantViolation
from .events import (
    GameEvent, PlantPlacedEvent, ResourceSpawnedEvent,
    ResourceCollectedEvent, ResourceExpiredEvent
)

if TYPE_CHECKING:
    from .state import SimulationState

logger = logging.getLogger(__name__)


class Wallet:
    """The player's resource balance. Never negative."""

    def __init__(self, balance: int):
        if balance < 0:
            raise InvariantViolation(f"Starting balance {balance} is negative")
        self.balance = balance

    def can_afford(self, cost: int) -> bool:
        return self.balance >= cost

    def debit(self, cost: int) -> None:
        """Spend `cost`. Callers check can_afford() first."""
        if cost > self.balance:
            raise InvariantViolation(f"Debit of {cost} exceeds balance {self.balance}")
        self.balance -= cost

    def credit(self, amount: int) -> None:
        self.balance += amount

    def __repr__(self) -> str:
        return f"Wallet({self.balance})"


def _is_tile_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def try_place_plant(state: 'SimulationState', row: int, col: int,
                    plant_type: PlantType) -> Optional[PlantPlacedEvent]:
    """
    Place and pay for a plant, or do nothing at all.

    Returns the placement event on success, None if any check fails
    (paused, game over, off-grid tile, insufficient funds, occupied tile).
    """
    if state.paused or state.game_over:
        return None
    if not _is_tile_index(row) or not _is_tile_index(col):
        return None
    if not state.geometry.in_bounds(row, col):
        return None
    if plant_type not in PLANT_COSTS:
        return None
    cost = PLANT_COSTS[plant_type]
    if not state.wallet.can_afford(cost) or state.plants.is_occupied(row, col):
        return None

    plant = Plant(id=state.next_id("plant"), type=plant_type, row=row, col=col)
    if not state.plants.add(plant):
        raise InvariantViolation(f"Tile ({row}, {col}) filled between check and add")
    state.wallet.debit(cost)

    logger.debug(f"Placed {plant_type.value} at ({row}, {col}) for {cost}")
    return PlantPlacedEvent(plant.id, plant_type, row, col, cost)


def collect_resource(state: 'SimulationState', resource_id: str) -> Optional[ResourceCollectedEvent]:
    """
    Collect a resource and credit its value.
    Returns None if the resource is already gone or the game is not running.
    """
    if state.paused or state.game_over:
        return None
    resource = state.resources.remove(resource_id)
    if resource is None:
        return None
    state.wallet.credit(RESOURCE_AMOUNT)
    return ResourceCollectedEvent(resource.id, RESOURCE_AMOUNT, state.wallet.balance)


def generator_phase(state: 'SimulationState', dt: float) -> List[GameEvent]:
    """Count down generator cooldowns and emit a resource at each that expires."""
    events: List[GameEvent] = []
    for plant in state.plants:
        if plant.type != PlantType.GENERATOR:
            continue

        plant.cooldown -= dt
        if plant.cooldown > 0:
            continue

        x, y = state.geometry.tile_center(plant.row, plant.col)
        resource = Resource(id=state.next_id("resource"), x=x, y=y, ttl=RESOURCE_TTL)
        state.resources.add(resource)
        plant.cooldown = GENERATOR_INTERVAL
        events.append(ResourceSpawnedEvent(resource.id, x, y))
    return events


def resource_decay_phase(state: 'SimulationState', dt: float) -> List[GameEvent]:
    """Age every resource and drop the ones that ran out."""
    for resource in state.resources:
        resource.ttl -= dt
    expired = state.resources.remove_where(lambda r: r.ttl <= EXPIRY_EPSILON)
    return [ResourceExpiredEvent(r.id) for r in expired]

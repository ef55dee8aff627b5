"""
Occupancy and eating: attackers stop at plants and chew through them.
NO UI DEPENDENCIES.
"""
import logging
from typing import Dict, List, TYPE_CHECKING

from .constants import EAT_DPS
from .entities import Plant
from .events import GameEvent, EatingEvent, PlantDestroyedEvent

if TYPE_CHECKING:
    from .state import SimulationState

logger = logging.getLogger(__name__)


def eating_phase(state: 'SimulationState', dt: float) -> List[GameEvent]:
    """
    Gate attacker movement on tile occupancy and apply eating damage.

    Occupancy is decided for every attacker before any plant takes damage,
    so an attacker that finishes a plant this tick stays put and walks on
    the next tick. A plant loses EAT_DPS * dt once per tick no matter how
    many attackers are eating it.
    """
    events: List[GameEvent] = []
    eaten: Dict[str, Plant] = {}

    for attacker in state.attackers:
        col = state.geometry.column_at(attacker.x)
        plant = state.plants.at(attacker.row, col)
        if plant is not None:
            attacker.eating = True
            eaten[plant.id] = plant
            events.append(EatingEvent(attacker.id, plant.id))
        else:
            attacker.eating = False
            attacker.x -= attacker.speed * dt

    for plant in eaten.values():
        plant.hp -= EAT_DPS * dt

    destroyed = state.plants.remove_where(lambda p: not p.is_alive)
    for plant in destroyed:
        logger.debug(f"Plant {plant.id} at ({plant.row}, {plant.col}) eaten")
        events.append(PlantDestroyedEvent(plant.id, plant.row, plant.col))
    return events

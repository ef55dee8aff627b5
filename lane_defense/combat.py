"""
Shooters, projectiles, and the combat resolver.
NO UI DEPENDENCIES.

Hit policy: a projectile is consumed by its first hit. It damages at most
one attacker, exactly once, and is removed in the same tick.
"""
import logging
from typing import List, Optional, TYPE_CHECKING

from .constants import (
    PROJECTILE_SPEED, PROJECTILE_DAMAGE, PROJECTILE_SPAWN_FRACTION,
    PROJECTILE_EXIT_MARGIN, SHOOTER_SIGHT_OFFSET, DOUBLE_SHOT_DELAY
)
from .entities import Plant, PlantType, Projectile, Attacker, FIRE_CADENCE
from .events import GameEvent, FireEvent, AttackerKilledEvent

if TYPE_CHECKING:
    from .state import SimulationState

logger = logging.getLogger(__name__)


def has_target(state: 'SimulationState', plant: Plant) -> bool:
    """True if an attacker in the plant's lane is ahead of (right of) it."""
    sight_line = state.geometry.tile_left(plant.col) + SHOOTER_SIGHT_OFFSET
    return any(a.row == plant.row and a.x > sight_line for a in state.attackers)


def spawn_projectile(state: 'SimulationState', plant: Plant) -> FireEvent:
    """Create a projectile at the plant's muzzle."""
    geometry = state.geometry
    x = geometry.tile_left(plant.col) + geometry.tile_w * PROJECTILE_SPAWN_FRACTION
    projectile = Projectile(id=state.next_id("projectile"), row=plant.row, x=x, speed=PROJECTILE_SPEED)
    state.projectiles.add(projectile)
    return FireEvent(plant.id, projectile.id, plant.row)


def fire_phase(state: 'SimulationState', dt: float) -> List[GameEvent]:
    """
    Count down shooter cooldowns and fire at attackers ahead in-lane.
    A double-shooter's second projectile follows DOUBLE_SHOT_DELAY later.
    """
    events: List[GameEvent] = []
    for plant in state.plants:
        if not plant.type.is_shooter:
            continue

        plant.cooldown = max(0.0, plant.cooldown - dt)
        if plant.cooldown > 0 or not has_target(state, plant):
            continue

        events.append(spawn_projectile(state, plant))
        plant.cooldown = FIRE_CADENCE[plant.type]

        if plant.type == PlantType.DOUBLE_SHOOTER:
            _schedule_second_shot(state, plant)
    return events


def _schedule_second_shot(state: 'SimulationState', plant: Plant) -> None:
    # Copy: the plant may be eaten before the second shot leaves.
    shooter = Plant(id=plant.id, type=plant.type, row=plant.row, col=plant.col)

    def fire_again() -> None:
        state.outbox.append(spawn_projectile(state, shooter))

    state.scheduler.schedule(DOUBLE_SHOT_DELAY, fire_again, label=f"second shot {plant.id}")


def projectile_phase(state: 'SimulationState', dt: float) -> List[GameEvent]:
    """Move projectiles right and drop those past the far edge."""
    for projectile in state.projectiles:
        projectile.x += projectile.speed * dt
    far_edge = state.geometry.width + PROJECTILE_EXIT_MARGIN
    state.projectiles.remove_where(lambda p: p.x > far_edge)
    return []


def _find_hit(projectile: Projectile, attackers: List[Attacker], threshold: float) -> Optional[Attacker]:
    """Nearest live attacker in the projectile's lane within the threshold."""
    best: Optional[Attacker] = None
    best_gap = threshold
    for attacker in attackers:
        if attacker.row != projectile.row or not attacker.is_alive:
            continue
        gap = abs(projectile.x - attacker.x)
        if gap < best_gap:
            best, best_gap = attacker, gap
    return best


def combat_phase(state: 'SimulationState', dt: float) -> List[GameEvent]:
    """
    Resolve projectile/attacker collisions.
    Dead attackers are removed before movement runs.
    """
    threshold = state.geometry.hit_threshold()
    attackers = list(state.attackers)

    for projectile in state.projectiles:
        target = _find_hit(projectile, attackers, threshold)
        if target is None:
            continue
        target.hp -= PROJECTILE_DAMAGE
        state.projectiles.remove(projectile.id)

    killed = state.attackers.remove_where(lambda a: not a.is_alive)
    for attacker in killed:
        logger.debug(f"Attacker {attacker.id} killed in lane {attacker.row}")
    return [AttackerKilledEvent(a.id, a.row) for a in killed]

"""
Wave director - round scheduling and difficulty scaling.
NO UI DEPENDENCIES.

    IDLE -> SPAWNING -> CLEARED -> IDLE (next round)
    any  -> GAME_OVER (terminal until reset)
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, TYPE_CHECKING

from .constants import (
    ROWS, ATTACKER_BASE_HP, ATTACKER_BASE_SPEED, ATTACKER_SPAWN_MARGIN,
    SPEED_JITTER_MIN, SPEED_JITTER_RANGE, NEAR_BOUNDARY,
    ROUND_BASE_COUNT, ROUND_COUNT_INCREMENT, ROUND_HP_GROWTH, ROUND_SPEED_GROWTH,
    SPAWN_STAGGER, ROUND_CLEAR_DELAY, ROUND_ANNOUNCE_DURATION
)
from .entities import Attacker
from .errors import InvariantViolation
from .events import (
    GameEvent, AttackerSpawnedEvent, RoundStartedEvent,
    PhaseChangedEvent, GameOverEvent
)

if TYPE_CHECKING:
    from .state import SimulationState

logger = logging.getLogger(__name__)


class WavePhase(Enum):
    """Current phase of the wave director."""
    IDLE = auto()       # Waiting to start the next round
    SPAWNING = auto()   # Round active, attackers being released or alive
    CLEARED = auto()    # Round beaten, waiting out the delay
    GAME_OVER = auto()  # An attacker got through


@dataclass(frozen=True)
class RoundConfig:
    """Spawn count and attacker stats for one round."""
    count: int
    hp: float
    speed: float


def round_config(round_number: int) -> RoundConfig:
    """
    Difficulty for a round.

    count grows linearly; hp and speed grow by a fixed fraction of their
    base value per round after the first.
    """
    if round_number < 1:
        raise InvariantViolation(f"Round number {round_number} is below 1")
    return RoundConfig(
        count=ROUND_BASE_COUNT + round_number * ROUND_COUNT_INCREMENT,
        hp=ATTACKER_BASE_HP * (1 + (round_number - 1) * ROUND_HP_GROWTH),
        speed=ATTACKER_BASE_SPEED * (1 + (round_number - 1) * ROUND_SPEED_GROWTH),
    )


def _set_phase(state: 'SimulationState', new_phase: WavePhase) -> GameEvent:
    old_phase = state.phase
    state.phase = new_phase
    return PhaseChangedEvent(old_phase, new_phase)


def start_round(state: 'SimulationState') -> List[GameEvent]:
    """Enter SPAWNING and stagger this round's spawns."""
    config = round_config(state.round_number)
    events = [_set_phase(state, WavePhase.SPAWNING)]

    state.pending_spawns = config.count
    for i in range(config.count):
        state.scheduler.schedule(
            i * SPAWN_STAGGER,
            lambda: state.outbox.append(spawn_attacker(state, config)),
            label=f"spawn {i + 1}/{config.count} of round {state.round_number}",
        )

    state.round_announcement = True
    state.scheduler.schedule(ROUND_ANNOUNCE_DURATION, lambda: _end_announcement(state),
                             label="round announcement")

    logger.info(f"Round {state.round_number} started: {config.count} attackers, "
                f"hp {config.hp:.0f}, speed {config.speed:.1f}")
    events.append(RoundStartedEvent(state.round_number, config.count))
    return events


def _end_announcement(state: 'SimulationState') -> None:
    state.round_announcement = False


def spawn_attacker(state: 'SimulationState', config: RoundConfig) -> AttackerSpawnedEvent:
    """Release one attacker in a random lane at the far edge."""
    if state.pending_spawns <= 0:
        raise InvariantViolation("Spawn fired with no spawns pending")
    state.pending_spawns -= 1

    row = state.rng.randrange(ROWS)
    jitter = SPEED_JITTER_MIN + state.rng.random() * SPEED_JITTER_RANGE
    attacker = Attacker(
        id=state.next_id("attacker"),
        row=row,
        x=state.geometry.width + ATTACKER_SPAWN_MARGIN,
        hp=config.hp,
        speed=config.speed * jitter,
    )
    state.attackers.add(attacker)
    logger.debug(f"Spawned {attacker.id} in lane {row} (speed {attacker.speed:.1f})")
    return AttackerSpawnedEvent(attacker.id, row)


def _advance_round(state: 'SimulationState') -> None:
    state.round_number += 1
    state.outbox.append(_set_phase(state, WavePhase.IDLE))


def director_phase(state: 'SimulationState', dt: float) -> List[GameEvent]:
    """Re-evaluate the round state machine after this tick's combat."""
    if state.paused or state.game_over:
        return []

    if state.phase == WavePhase.IDLE and len(state.attackers) == 0:
        return start_round(state)

    if (state.phase == WavePhase.SPAWNING
            and state.pending_spawns == 0
            and len(state.attackers) == 0):
        logger.info(f"Round {state.round_number} cleared")
        event = _set_phase(state, WavePhase.CLEARED)
        state.scheduler.schedule(ROUND_CLEAR_DELAY, lambda: _advance_round(state),
                                 label=f"advance past round {state.round_number}")
        return [event]

    return []


def game_over_phase(state: 'SimulationState', dt: float) -> List[GameEvent]:
    """End the game the moment any attacker reaches the near boundary."""
    if state.game_over:
        return []

    breacher = next((a for a in state.attackers if a.x <= NEAR_BOUNDARY), None)
    if breacher is None:
        return []

    events = [_set_phase(state, WavePhase.GAME_OVER)]
    state.scheduler.clear()
    state.pending_spawns = 0
    state.round_announcement = False
    logger.info(f"Game over in round {state.round_number}: {breacher.id} reached lane {breacher.row}'s end")
    events.append(GameOverEvent(state.round_number, breacher.id))
    return events

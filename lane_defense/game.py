"""
Main Game class - owns the simulation state and runs the tick.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
import random
from typing import Callable, List, Optional, Tuple

from .config import Settings, get_settings
from .entities import PlantType
from .errors import InvariantViolation
from .events import GameEvent
from .geometry import BoardGeometry
from .state import SimulationState, Snapshot
from .waves import WavePhase
from . import combat, eating, economy, waves

logger = logging.getLogger(__name__)

Phase = Callable[[SimulationState, float], List[GameEvent]]

# Tick order. Combat sees attacker positions from before this tick's movement.
TICK_PHASES: Tuple[Tuple[str, Phase], ...] = (
    ("generators", economy.generator_phase),
    ("shooters", combat.fire_phase),
    ("projectiles", combat.projectile_phase),
    ("combat", combat.combat_phase),
    ("eating", eating.eating_phase),
    ("resources", economy.resource_decay_phase),
    ("director", waves.director_phase),
    ("game_over", waves.game_over_phase),
)


class Game:
    """
    The controller that owns one simulation.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as snapshots and accepts commands as method calls.
    Commands that fail validation return False and change nothing.

    Usage:
        game = Game()
        game.place_plant(2, 3, PlantType.GENERATOR)
        while not game.game_over:
            events = game.update(dt)
            # UI reads game.snapshot() and renders
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings if settings is not None else get_settings()
        self.state = SimulationState(
            geometry=BoardGeometry.for_board(self.settings.board_width, self.settings.board_height),
            rng=random.Random(self.settings.seed),
            starting_balance=self.settings.starting_balance,
        )

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def place_plant(self, row: int, col: int, plant_type: PlantType) -> bool:
        """Buy and place a plant. Rejected if unaffordable, occupied, or off-grid."""
        event = economy.try_place_plant(self.state, row, col, plant_type)
        if event is None:
            return False
        self._emit_now(event)
        return True

    def collect_resource(self, resource_id: str) -> bool:
        """Collect a resource. No-op if it is already gone."""
        event = economy.collect_resource(self.state, resource_id)
        if event is None:
            return False
        self._emit_now(event)
        return True

    def set_paused(self, paused: bool) -> None:
        """Freeze or resume the tick. Time spent paused is discarded."""
        if paused != self.state.paused:
            logger.info(f"Game {'paused' if paused else 'resumed'} at {self.state.elapsed:.2f}s")
        self.state.paused = paused

    def set_muted(self, muted: bool) -> None:
        """Audio preference. Events are still emitted; audio reads the flag."""
        self.state.muted = muted

    def reset(self) -> None:
        """Clear everything and cancel pending spawns and round changes."""
        self.state.clear()
        self.state.rng.seed(self.settings.seed)
        logger.info("Game reset")

    def resize_board(self, width: float, height: float) -> None:
        """Recompute tile geometry. Entities keep their logical positions."""
        self.state.geometry = self.state.geometry.resized(width, height)

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, dt: float) -> List[GameEvent]:
        """
        Advance the simulation by dt seconds (clamped to max_frame_dt).
        Returns the events that occurred.
        """
        if dt < 0:
            raise InvariantViolation(f"Negative tick delta {dt}")
        if self.state.paused or self.state.game_over:
            return []

        dt = min(dt, self.settings.max_frame_dt)
        state = self.state

        # Due spawns, second shots and round changes run first
        state.scheduler.advance(dt)
        events: List[GameEvent] = list(state.outbox)
        state.outbox.clear()

        for _, phase in TICK_PHASES:
            events.extend(phase(state, dt))

        self._check_invariants()
        return events

    def _emit_now(self, event: GameEvent) -> None:
        # Command events are delivered with the next tick's events.
        self.state.outbox.append(event)

    def _check_invariants(self) -> None:
        state = self.state
        if state.wallet.balance < 0:
            raise InvariantViolation(f"Balance went negative: {state.wallet.balance}")
        if state.pending_spawns < 0:
            raise InvariantViolation(f"Pending spawns went negative: {state.pending_spawns}")
        for plant in state.plants:
            if not state.geometry.in_bounds(plant.row, plant.col):
                raise InvariantViolation(f"Plant {plant.id} off the grid at ({plant.row}, {plant.col})")

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()

    @property
    def balance(self) -> int:
        return self.state.wallet.balance

    @property
    def round_number(self) -> int:
        return self.state.round_number

    @property
    def phase(self) -> WavePhase:
        return self.state.phase

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def paused(self) -> bool:
        return self.state.paused

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, seconds: float, dt: float = 0.05) -> List[GameEvent]:
        """
        Simulate the game for a number of seconds.
        Returns all events that occurred.
        """
        all_events = []
        step = min(dt, self.settings.max_frame_dt)
        elapsed = 0.0
        while elapsed < seconds - 1e-9 and not self.game_over:
            all_events.extend(self.update(step))
            elapsed += step
        return all_events

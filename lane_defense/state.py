"""
Simulation state aggregate and read-only snapshots.
NO UI DEPENDENCIES.

Every tick phase takes a SimulationState and mutates it through its
stores. Nothing outside the controller should hold on to the state
itself; presentation reads Snapshot objects instead.
"""
import itertools
import random
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from .constants import STARTING_BALANCE
from .entities import Plant, Projectile, Attacker, Resource
from .events import GameEvent
from .economy import Wallet
from .geometry import BoardGeometry
from .scheduler import Scheduler
from .stores import EntityStore, PlantStore
from .waves import WavePhase


@dataclass
class SimulationState:
    """Everything one game owns. Exclusively owned by the Game controller."""
    geometry: BoardGeometry
    rng: random.Random
    starting_balance: int = STARTING_BALANCE

    plants: PlantStore = field(default_factory=PlantStore)
    projectiles: EntityStore[Projectile] = field(default_factory=lambda: EntityStore("projectile"))
    attackers: EntityStore[Attacker] = field(default_factory=lambda: EntityStore("attacker"))
    resources: EntityStore[Resource] = field(default_factory=lambda: EntityStore("resource"))
    scheduler: Scheduler = field(default_factory=Scheduler)
    wallet: Wallet = field(init=False)

    # Round state
    round_number: int = 1
    phase: WavePhase = WavePhase.IDLE
    pending_spawns: int = 0
    round_announcement: bool = False

    # Player-facing flags
    paused: bool = False
    muted: bool = False

    # Events raised by scheduled actions, drained by the tick
    outbox: List[GameEvent] = field(default_factory=list)

    _ids: itertools.count = field(default_factory=itertools.count, repr=False)

    def __post_init__(self):
        self.wallet = Wallet(self.starting_balance)

    def next_id(self, prefix: str) -> str:
        """Unique, deterministic identifier for a new entity."""
        return f"{prefix}_{next(self._ids)}"

    @property
    def game_over(self) -> bool:
        return self.phase == WavePhase.GAME_OVER

    @property
    def elapsed(self) -> float:
        """Simulated seconds since the game (or last reset) began."""
        return self.scheduler.now

    def clear(self) -> None:
        """Return to the initial state. The mute preference survives."""
        self.plants.clear()
        self.projectiles.clear()
        self.attackers.clear()
        self.resources.clear()
        self.scheduler.reset()
        self.wallet = Wallet(self.starting_balance)
        self.round_number = 1
        self.phase = WavePhase.IDLE
        self.pending_spawns = 0
        self.round_announcement = False
        self.paused = False
        self.outbox.clear()
        self._ids = itertools.count()

    def snapshot(self) -> 'Snapshot':
        return Snapshot(
            plants=tuple(replace(p) for p in self.plants),
            projectiles=tuple(replace(p) for p in self.projectiles),
            attackers=tuple(replace(a) for a in self.attackers),
            resources=tuple(replace(r) for r in self.resources),
            balance=self.wallet.balance,
            round_number=self.round_number,
            phase=self.phase,
            paused=self.paused,
            muted=self.muted,
            game_over=self.game_over,
            round_announcement=self.round_announcement,
            board_width=self.geometry.width,
            board_height=self.geometry.height,
            elapsed=self.elapsed,
        )


@dataclass(frozen=True)
class Snapshot:
    """
    Read-only view of one frame for rendering and audio.

    Entities are copies; changing them has no effect on the simulation.
    """
    plants: Tuple[Plant, ...]
    projectiles: Tuple[Projectile, ...]
    attackers: Tuple[Attacker, ...]
    resources: Tuple[Resource, ...]
    balance: int
    round_number: int
    phase: WavePhase
    paused: bool
    muted: bool
    game_over: bool
    round_announcement: bool
    board_width: float
    board_height: float
    elapsed: float

    def plant_at(self, row: int, col: int) -> Optional[Plant]:
        for plant in self.plants:
            if plant.row == row and plant.col == col:
                return plant
        return None

#!/usr/bin/env python3
"""
Lane Defense - Headless Driver

Runs a scripted session without any rendering: buys generators until the
back column is full, then shooters, collects every resource as soon as it
drops, and logs what happens.

Usage:
    python main.py --seconds 120 --seed 7
"""
import argparse
import logging
from collections import Counter

from lane_defense import Game, PlantType, Settings, PLANT_COSTS
from lane_defense.constants import ROWS, COLS
from lane_defense.events import (
    FireEvent, ResourceSpawnedEvent, ResourceCollectedEvent, PlantPlacedEvent,
    EatingEvent, GameOverEvent, RoundStartedEvent
)

logger = logging.getLogger("lane_defense.driver")

# Events that an audio layer would turn into sound cues
AUDIO_CUES = {
    FireEvent: "shoot",
    ResourceSpawnedEvent: "resource",
    ResourceCollectedEvent: "resource",
    PlantPlacedEvent: "place",
    EatingEvent: "chomp",
    GameOverEvent: "over",
}


def next_build(game: Game):
    """Pick the next (row, col, type) the scripted player wants, or None."""
    snapshot = game.snapshot()
    for row in range(ROWS):
        if snapshot.plant_at(row, 0) is None:
            return (row, 0, PlantType.GENERATOR)
    for col in range(1, COLS):
        for row in range(ROWS):
            if snapshot.plant_at(row, col) is None:
                plant_type = PlantType.DOUBLE_SHOOTER if col % 2 == 0 else PlantType.SINGLE_SHOOTER
                return (row, col, plant_type)
    return None


def run(seconds: float, dt: float, settings: Settings) -> Game:
    game = Game(settings=settings)
    cues: Counter = Counter()
    elapsed = 0.0

    while elapsed < seconds and not game.game_over:
        for event in game.update(dt):
            cue = AUDIO_CUES.get(type(event))
            if cue is not None and not game.state.muted:
                cues[cue] += 1
            if isinstance(event, RoundStartedEvent):
                logger.info(f"[{elapsed:7.2f}s] Round {event.round_number}: {event.spawn_count} attackers")

        for resource in game.snapshot().resources:
            game.collect_resource(resource.id)

        build = next_build(game)
        if build is not None and game.balance >= PLANT_COSTS[build[2]]:
            game.place_plant(*build)

        elapsed += dt

    snapshot = game.snapshot()
    logger.info(
        f"Finished after {snapshot.elapsed:.1f}s: round {snapshot.round_number}, "
        f"balance {snapshot.balance}, {len(snapshot.plants)} plants, "
        f"{len(snapshot.attackers)} attackers, game over: {snapshot.game_over}"
    )
    logger.info(f"Audio cues: {dict(cues)}")
    return game


def main():
    parser = argparse.ArgumentParser(description="Lane Defense headless simulation")
    parser.add_argument("--seconds", "-s", type=float, default=120.0, help="Simulated seconds to run")
    parser.add_argument("--dt", type=float, default=1 / 60, help="Frame delta in seconds")
    parser.add_argument("--seed", type=int, default=None, help="Seed for spawn randomness")
    parser.add_argument("--log-level", default=None, help="Overrides LANE_DEFENSE_LOG_LEVEL")
    args = parser.parse_args()

    settings = Settings()
    if args.seed is not None:
        settings = settings.model_copy(update={"seed": args.seed})

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    run(args.seconds, args.dt, settings)


if __name__ == "__main__":
    main()

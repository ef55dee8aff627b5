"""
Tests for the wallet, placement, and resources.
"""
import pytest
from lane_defense.economy import (
    Wallet, try_place_plant, collect_resource, generator_phase, resource_decay_phase
)
from lane_defense.entities import Plant, PlantType, Resource, PLANT_COSTS
from lane_defense.constants import (
    GENERATOR_INTERVAL, RESOURCE_AMOUNT, RESOURCE_TTL, PLANT_HP, PLANT_INITIAL_COOLDOWN
)
from lane_defense.errors import InvariantViolation
from lane_defense.events import ResourceSpawnedEvent, ResourceExpiredEvent
from lane_defense.waves import WavePhase


class TestWallet:
    """Tests for the Wallet class."""

    def test_debit_and_credit(self):
        wallet = Wallet(100)
        wallet.debit(50)
        wallet.credit(25)
        assert wallet.balance == 75

    def test_can_afford(self):
        wallet = Wallet(100)
        assert wallet.can_afford(100)
        assert not wallet.can_afford(101)

    def test_overdraw_raises(self):
        """Debiting past zero means a caller skipped can_afford()."""
        wallet = Wallet(40)
        with pytest.raises(InvariantViolation):
            wallet.debit(50)
        assert wallet.balance == 40

    def test_negative_start_raises(self):
        with pytest.raises(InvariantViolation):
            Wallet(-1)


class TestPlacement:
    """Tests for cost-gated placement."""

    def test_place_generator(self, state):
        """Balance 100, generator at (2,3) costs 50 and occupies the tile."""
        event = try_place_plant(state, 2, 3, PlantType.GENERATOR)

        assert event is not None
        assert event.cost == PLANT_COSTS[PlantType.GENERATOR] == 50
        assert state.wallet.balance == 50
        plant = state.plants.at(2, 3)
        assert plant.type == PlantType.GENERATOR
        assert plant.hp == PLANT_HP
        assert plant.cooldown == PLANT_INITIAL_COOLDOWN

    def test_insufficient_funds(self, state):
        """Too expensive: no plant, balance unchanged."""
        assert try_place_plant(state, 0, 0, PlantType.DOUBLE_SHOOTER) is None
        assert state.wallet.balance == 100
        assert len(state.plants) == 0

    def test_exact_funds(self, state):
        assert try_place_plant(state, 0, 0, PlantType.SINGLE_SHOOTER) is not None
        assert state.wallet.balance == 0

    def test_occupied_tile(self, state):
        """Second plant on a tile: nothing changes, not even the balance."""
        try_place_plant(state, 1, 1, PlantType.GENERATOR)

        assert try_place_plant(state, 1, 1, PlantType.GENERATOR) is None
        assert state.wallet.balance == 50
        assert len(state.plants) == 1

    @pytest.mark.parametrize("row,col", [
        (-1, 0), (0, -1), (5, 0), (0, 9),
        (2.5, 3), (2, 3.0), (True, 0), (0, False),
    ])
    def test_out_of_range(self, state, row, col):
        assert try_place_plant(state, row, col, PlantType.GENERATOR) is None
        assert state.wallet.balance == 100
        assert len(state.plants) == 0

    @pytest.mark.parametrize("plant_type", ["generator", None, 50])
    def test_unknown_plant_type(self, state, plant_type):
        """Anything that is not a PlantType is rejected without charge."""
        assert try_place_plant(state, 2, 3, plant_type) is None
        assert state.wallet.balance == 100
        assert not state.plants.is_occupied(2, 3)

    def test_rejected_while_paused(self, state):
        state.paused = True
        assert try_place_plant(state, 0, 0, PlantType.GENERATOR) is None
        assert state.wallet.balance == 100

    def test_rejected_after_game_over(self, state):
        state.phase = WavePhase.GAME_OVER
        assert try_place_plant(state, 0, 0, PlantType.GENERATOR) is None
        assert state.wallet.balance == 100


class TestGenerators:
    """Tests for resource emission."""

    def test_emits_at_tile_center(self, state):
        state.plants.add(Plant(id="g", type=PlantType.GENERATOR, row=2, col=3, cooldown=0.3))

        events = generator_phase(state, 0.3)

        assert len(events) == 1
        assert isinstance(events[0], ResourceSpawnedEvent)
        resource = state.resources.get(events[0].resource_id)
        assert (resource.x, resource.y) == pytest.approx(state.geometry.tile_center(2, 3))
        assert resource.ttl == RESOURCE_TTL
        assert state.plants.get("g").cooldown == GENERATOR_INTERVAL

    def test_waits_for_cooldown(self, state):
        state.plants.add(Plant(id="g", type=PlantType.GENERATOR, row=0, col=0, cooldown=1.0))

        assert generator_phase(state, 0.5) == []
        assert len(state.resources) == 0
        assert state.plants.get("g").cooldown == pytest.approx(0.5)

    def test_emits_every_interval(self, state):
        state.plants.add(Plant(id="g", type=PlantType.GENERATOR, row=0, col=0, cooldown=0.0))

        emitted = 0
        for _ in range(3):
            emitted += len(generator_phase(state, GENERATOR_INTERVAL))
        assert emitted == 3

    def test_shooters_do_not_emit(self, state):
        state.plants.add(Plant(id="s", type=PlantType.SINGLE_SHOOTER, row=0, col=0, cooldown=0.0))
        assert generator_phase(state, 1.0) == []
        assert len(state.resources) == 0


class TestResources:
    """Tests for decay and collection."""

    def test_decay(self, state):
        state.resources.add(Resource(id="r", x=0, y=0, ttl=1.0))
        resource_decay_phase(state, 0.25)
        assert state.resources.get("r").ttl == pytest.approx(0.75)

    def test_expires(self, state):
        """An uncollected resource disappears once its ttl runs out."""
        state.resources.add(Resource(id="r", x=0, y=0, ttl=RESOURCE_TTL))

        resource_decay_phase(state, 6.0)
        assert "r" in state.resources

        events = resource_decay_phase(state, 0.5)
        assert events == [ResourceExpiredEvent("r")]
        assert "r" not in state.resources
        assert state.wallet.balance == 100

    def test_collect(self, state):
        state.resources.add(Resource(id="r", x=0, y=0, ttl=3.0))

        event = collect_resource(state, "r")

        assert event.amount == RESOURCE_AMOUNT
        assert event.new_balance == 100 + RESOURCE_AMOUNT
        assert state.wallet.balance == 125
        assert "r" not in state.resources

    def test_collect_twice_is_noop(self, state):
        state.resources.add(Resource(id="r", x=0, y=0, ttl=3.0))
        collect_resource(state, "r")

        assert collect_resource(state, "r") is None
        assert state.wallet.balance == 125

    def test_collect_unknown_id(self, state):
        assert collect_resource(state, "nope") is None
        assert state.wallet.balance == 100

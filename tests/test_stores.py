"""
Tests for entity stores.
"""
import pytest
from lane_defense.stores import EntityStore, PlantStore
from lane_defense.entities import Plant, PlantType, Resource
from lane_defense.errors import InvariantViolation


def make_plant(plant_id: str, row: int, col: int) -> Plant:
    return Plant(id=plant_id, type=PlantType.GENERATOR, row=row, col=col)


class TestEntityStore:
    """Tests for the generic store."""

    def test_add_and_get(self):
        store = EntityStore("resource")
        resource = Resource(id="r1", x=1.0, y=2.0, ttl=3.0)

        assert store.add(resource)
        assert store.get("r1") is resource
        assert "r1" in store
        assert len(store) == 1

    def test_duplicate_id_raises(self):
        """Two entities with one id is a programming error."""
        store = EntityStore("resource")
        store.add(Resource(id="r1", x=0, y=0, ttl=1))

        with pytest.raises(InvariantViolation):
            store.add(Resource(id="r1", x=5, y=5, ttl=1))
        assert len(store) == 1

    def test_remove(self):
        store = EntityStore("resource")
        store.add(Resource(id="r1", x=0, y=0, ttl=1))

        assert store.remove("r1").id == "r1"
        assert store.remove("r1") is None
        assert len(store) == 0

    def test_remove_where(self):
        store = EntityStore("resource")
        for i, ttl in enumerate([1.0, -1.0, 0.0, 2.0]):
            store.add(Resource(id=f"r{i}", x=0, y=0, ttl=ttl))

        removed = store.remove_where(lambda r: r.ttl <= 0)

        assert sorted(r.id for r in removed) == ["r1", "r2"]
        assert sorted(r.id for r in store) == ["r0", "r3"]

    def test_remove_while_iterating(self):
        """Iteration walks a copy, so removal mid-loop is safe."""
        store = EntityStore("resource")
        for i in range(3):
            store.add(Resource(id=f"r{i}", x=0, y=0, ttl=1))

        for resource in store:
            store.remove(resource.id)

        assert len(store) == 0

    def test_clear(self):
        store = EntityStore("resource")
        store.add(Resource(id="r1", x=0, y=0, ttl=1))
        store.clear()
        assert len(store) == 0


class TestPlantStore:
    """Tests for the tile occupancy invariant."""

    def test_add_indexes_tile(self):
        store = PlantStore()
        plant = make_plant("p1", 2, 3)

        assert store.add(plant)
        assert store.is_occupied(2, 3)
        assert store.at(2, 3) is plant
        assert store.at(2, 4) is None

    def test_occupied_tile_rejected(self):
        """A second plant on a tile is rejected without mutation."""
        store = PlantStore()
        store.add(make_plant("p1", 2, 3))

        assert not store.add(make_plant("p2", 2, 3))
        assert len(store) == 1
        assert store.get("p2") is None
        assert store.at(2, 3).id == "p1"

    def test_remove_frees_tile(self):
        store = PlantStore()
        store.add(make_plant("p1", 2, 3))

        store.remove("p1")

        assert not store.is_occupied(2, 3)
        assert store.add(make_plant("p2", 2, 3))

    def test_remove_where_frees_tiles(self):
        store = PlantStore()
        store.add(make_plant("p1", 0, 0))
        store.add(make_plant("p2", 1, 1))
        store.get("p1").hp = 0

        store.remove_where(lambda p: not p.is_alive)

        assert not store.is_occupied(0, 0)
        assert store.is_occupied(1, 1)

    def test_clear_frees_tiles(self):
        store = PlantStore()
        store.add(make_plant("p1", 0, 0))
        store.clear()
        assert not store.is_occupied(0, 0)

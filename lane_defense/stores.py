"""
Entity stores - the authoritative collections of live entities.
NO UI DEPENDENCIES.
"""
from typing import Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from .entities import Plant, Projectile, Attacker, Resource
from .errors import InvariantViolation

T = TypeVar('T', Plant, Projectile, Attacker, Resource)


class EntityStore(Generic[T]):
    """
    Entities keyed by identifier, kept in insertion order.

    Iteration walks a copy of the current entities, so removing entities
    while iterating is safe.
    """

    def __init__(self, name: str):
        self.name = name
        self._entities: Dict[str, T] = {}

    def add(self, entity: T) -> bool:
        """
        Add an entity.
        Returns True if added. A duplicate identifier is a programming error.
        """
        if entity.id in self._entities:
            raise InvariantViolation(f"Duplicate id {entity.id!r} in {self.name} store")
        self._entities[entity.id] = entity
        return True

    def get(self, entity_id: str) -> Optional[T]:
        """Get entity by id, or None if absent."""
        return self._entities.get(entity_id)

    def remove(self, entity_id: str) -> Optional[T]:
        """Remove and return an entity, or None if absent."""
        return self._entities.pop(entity_id, None)

    def remove_where(self, predicate: Callable[[T], bool]) -> List[T]:
        """Remove every entity matching the predicate. Returns the removed ones."""
        removed = [e for e in self._entities.values() if predicate(e)]
        for entity in removed:
            del self._entities[entity.id]
        return removed

    def clear(self) -> None:
        self._entities.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._entities.values()))

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __repr__(self) -> str:
        return f"EntityStore({self.name}, {len(self)} entities)"


class PlantStore(EntityStore[Plant]):
    """
    Plant store with a tile occupancy index.
    At most one plant per (row, col).
    """

    def __init__(self):
        super().__init__("plant")
        self._by_tile: Dict[Tuple[int, int], str] = {}

    def add(self, entity: Plant) -> bool:
        """
        Add a plant.
        Returns False without mutating anything if the tile is occupied.
        """
        if self.is_occupied(entity.row, entity.col):
            return False
        super().add(entity)
        self._by_tile[(entity.row, entity.col)] = entity.id
        return True

    def at(self, row: int, col: int) -> Optional[Plant]:
        """Get the plant on a tile, or None if empty."""
        plant_id = self._by_tile.get((row, col))
        if plant_id is None:
            return None
        return self._entities[plant_id]

    def is_occupied(self, row: int, col: int) -> bool:
        return (row, col) in self._by_tile

    def remove(self, entity_id: str) -> Optional[Plant]:
        plant = super().remove(entity_id)
        if plant is not None:
            del self._by_tile[(plant.row, plant.col)]
        return plant

    def remove_where(self, predicate: Callable[[Plant], bool]) -> List[Plant]:
        removed = super().remove_where(predicate)
        for plant in removed:
            del self._by_tile[(plant.row, plant.col)]
        return removed

    def clear(self) -> None:
        super().clear()
        self._by_tile.clear()

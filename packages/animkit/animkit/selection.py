"""Selection - the set of objects a command operates on."""

from __future__ import annotations

from typing import Iterable, TypeVar

from animkit.assets import AssetObject

T = TypeVar("T", bound=AssetObject)


class Selection:
    """Ordered selection of asset objects.

    Destroyed objects drop out of every view, the same way the editor
    forgets an object once it is gone. An object is held at most once.
    """

    def __init__(self, objects: Iterable[AssetObject] = ()) -> None:
        self._objects: list[AssetObject] = _unique(objects)

    @property
    def objects(self) -> list[AssetObject]:
        return [obj for obj in self._objects if obj]

    @property
    def active_object(self) -> AssetObject | None:
        live = self.objects
        return live[0] if live else None

    def filtered(self, kind: type[T]) -> list[T]:
        """Selected objects that are instances of *kind*."""
        return [obj for obj in self.objects if isinstance(obj, kind)]

    def set(self, objects: Iterable[AssetObject]) -> None:
        self._objects = [obj for obj in _unique(objects) if obj]

    def clear(self) -> None:
        self._objects.clear()

    def __len__(self) -> int:
        return len(self.objects)


def _unique(objects: Iterable[AssetObject]) -> list[AssetObject]:
    """Drop repeated objects (by identity), keeping first-seen order."""
    seen: set[int] = set()
    result: list[AssetObject] = []
    for obj in objects:
        if id(obj) in seen:
            continue
        seen.add(id(obj))
        result.append(obj)
    return result

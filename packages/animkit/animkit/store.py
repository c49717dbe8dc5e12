"""AssetStore - in-memory asset database of files, main assets and sub-assets."""

from __future__ import annotations

import copy
import logging
import posixpath
from collections import Counter
from typing import TypeVar, cast

from animkit.assets import AssetObject
from animkit.types import (
    AssetExistsError,
    AssetNotFoundError,
    AssetPath,
    AssetStoreError,
    DestroyedAssetError,
)

T = TypeVar("T", bound=AssetObject)

logger = logging.getLogger(__name__)


class AssetStore:
    """Maps asset paths to the objects stored in each file.

    The first object of a file is its main asset; every object added after
    it is a sub-asset whose lifetime is tied to the file. Mutations take
    effect immediately; ``import_asset`` is the explicit commit point and is
    counted per path so callers can check how often a file was rebuilt.
    """

    def __init__(self) -> None:
        self._files: dict[AssetPath, list[AssetObject]] = {}
        self._paths: dict[AssetObject, AssetPath] = {}
        self._imports: Counter[AssetPath] = Counter()
        self._refresh_count: int = 0

    # -- Creation --

    def create_asset(self, obj: AssetObject, path: AssetPath) -> None:
        """Store *obj* as the main asset of a new file at *path*.

        The object is renamed after the file stem.
        """
        if obj.destroyed:
            raise DestroyedAssetError(f"Cannot store destroyed object {obj.name!r}")
        if obj in self._paths:
            raise AssetStoreError(
                f"{obj.name!r} is already stored at {self._paths[obj]!r}"
            )
        if path in self._files:
            raise AssetExistsError(path)
        obj.name = posixpath.splitext(posixpath.basename(path))[0]
        self._files[path] = [obj]
        self._paths[obj] = path

    def add_object_to_asset(self, obj: AssetObject, main: AssetObject) -> None:
        """Embed *obj* as a sub-asset of the file holding *main*."""
        if obj.destroyed:
            raise DestroyedAssetError(f"Cannot store destroyed object {obj.name!r}")
        if obj in self._paths:
            raise AssetStoreError(
                f"{obj.name!r} is already stored at {self._paths[obj]!r}"
            )
        if main is None:
            raise AssetNotFoundError(main, "Cannot add to asset: main asset is None")
        path = self._paths.get(main)
        if path is None:
            raise AssetNotFoundError(main, f"{main.name!r} is not a stored asset")
        self._files[path].append(obj)
        self._paths[obj] = path

    def instantiate(self, obj: T) -> T:
        """Return an unstored duplicate of *obj* with a new identity."""
        if obj.destroyed:
            raise DestroyedAssetError(f"Cannot instantiate destroyed object {obj.name!r}")
        duplicate = copy.deepcopy(obj)
        duplicate.name = f"{obj.name}(Clone)"
        return duplicate

    # -- Destruction --

    def destroy(self, obj: AssetObject) -> None:
        """Destroy *obj* immediately. Destroying a main asset removes its file."""
        if obj.destroyed:
            raise DestroyedAssetError(f"{obj.name!r} has already been destroyed")
        path = self._paths.get(obj)
        if path is not None and self._files[path][0] is obj:
            self.delete_asset(path)
            return
        if path is not None:
            del self._paths[obj]
            self._files[path].remove(obj)
        obj.destroyed = True

    def delete_asset(self, path: AssetPath) -> bool:
        """Delete the file at *path*, destroying every object in it.

        Returns False if there was nothing to delete.
        """
        objs = self._files.pop(path, None)
        if objs is None:
            return False
        for obj in objs:
            del self._paths[obj]
            obj.destroyed = True
        logger.debug("Deleted %s (%d objects)", path, len(objs))
        return True

    # -- Commit --

    def import_asset(self, path: AssetPath) -> None:
        if path not in self._files:
            raise AssetNotFoundError(path, f"No asset at {path!r}")
        self._imports[path] += 1

    def refresh(self) -> None:
        self._refresh_count += 1

    def import_count(self, path: AssetPath) -> int:
        return self._imports[path]

    @property
    def refresh_count(self) -> int:
        return self._refresh_count

    # -- Queries --

    def asset_path(self, obj: AssetObject) -> AssetPath | None:
        return self._paths.get(obj)

    def is_main_asset(self, obj: AssetObject) -> bool:
        path = self._paths.get(obj)
        return path is not None and self._files[path][0] is obj

    def is_sub_asset(self, obj: AssetObject) -> bool:
        path = self._paths.get(obj)
        return path is not None and self._files[path][0] is not obj

    def exists(self, path: AssetPath) -> bool:
        return path in self._files

    def load_main_asset_at_path(self, path: AssetPath) -> AssetObject | None:
        objs = self._files.get(path)
        return objs[0] if objs else None

    def load_asset_at_path(
        self, path: AssetPath, kind: type[T] | None = None
    ) -> T | AssetObject | None:
        """First object at *path* that is a *kind*, main asset first."""
        for obj in self._files.get(path, ()):
            if kind is None or isinstance(obj, kind):
                return obj
        return None

    def load_all_assets_at_path(self, path: AssetPath) -> list[AssetObject]:
        return list(self._files.get(path, ()))

    def objects(self, kind: type[T] | None = None) -> list[T]:
        """Every stored object, optionally filtered by type."""
        found: list[AssetObject] = []
        for objs in self._files.values():
            for obj in objs:
                if kind is None or isinstance(obj, kind):
                    found.append(obj)
        return cast("list[T]", found)

    def paths(self) -> list[AssetPath]:
        return list(self._files)

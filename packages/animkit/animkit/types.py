"""Shared type aliases, errors and hashing for animkit."""

from __future__ import annotations

import zlib

AssetPath = str


class AssetStoreError(Exception):
    """Base class for asset store failures."""


class AssetNotFoundError(AssetStoreError, KeyError):
    """Raised when an object or path is not known to the store."""

    def __init__(self, key: object, message: str) -> None:
        self.key = key
        super().__init__(message)


class AssetExistsError(AssetStoreError):
    """Raised when creating an asset at a path that is already taken."""

    def __init__(self, path: AssetPath) -> None:
        self.path = path
        super().__init__(f"Asset already exists at {path!r}")


class DestroyedAssetError(AssetStoreError):
    """Raised when operating on an object that has already been destroyed."""


def string_to_hash(name: str) -> int:
    """Return the 32-bit signed hash used to key parameters by name."""
    value = zlib.crc32(name.encode("utf-8"))
    if value >= 1 << 31:
        value -= 1 << 32
    return value

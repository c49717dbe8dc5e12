"""animkit - Animator asset model and in-memory asset store."""

from animkit.assets import (
    AnimationClip,
    AssetObject,
    Behaviour,
    Controller,
    Layer,
    Motion,
    Parameter,
    ParameterType,
    State,
    StateGraph,
)
from animkit.selection import Selection
from animkit.store import AssetStore
from animkit.types import (
    AssetExistsError,
    AssetNotFoundError,
    AssetPath,
    AssetStoreError,
    DestroyedAssetError,
    string_to_hash,
)

__all__ = [
    "AssetStore",
    "Selection",
    "AssetObject",
    "AnimationClip",
    "Motion",
    "Behaviour",
    "State",
    "StateGraph",
    "Layer",
    "Parameter",
    "ParameterType",
    "Controller",
    "AssetPath",
    "AssetStoreError",
    "AssetNotFoundError",
    "AssetExistsError",
    "DestroyedAssetError",
    "string_to_hash",
]

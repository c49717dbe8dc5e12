"""Pending dialog requests and the functions that settle them.

A command that needs user input returns a request instead of blocking.
The caller shows whatever dialog it likes, then settles the request with
``apply_rename`` / ``apply_attach`` or ``cancel()``. A settled request
cannot be applied again.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from animkit import (
    AnimationClip,
    AssetNotFoundError,
    AssetStore,
    Controller,
    DestroyedAssetError,
)
from animkit_query import states_with_motion

from animkit_embed.types import RequestClosedError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _Request:
    title: str
    closed: bool = field(default=False, init=False)

    def _ensure_open(self) -> None:
        if self.closed:
            raise RequestClosedError(f"{type(self).__name__} is already settled")

    def cancel(self) -> None:
        """Close the request, discarding any pending change."""
        self._ensure_open()
        self.closed = True


@dataclass(eq=False)
class RenameRequest(_Request):
    """Rename dialog bound to *clip*, pre-filled with *name*."""

    clip: AnimationClip | None = None
    name: str = ""


@dataclass(eq=False)
class AttachRequest(_Request):
    """Target picker for embedding *clips* into a controller."""

    clips: list[AnimationClip] = field(default_factory=list)


def apply_rename(store: AssetStore, request: RenameRequest, name: str) -> None:
    """Rename the clip in place and re-import its file.

    The clip keeps its identity, so states referencing it are untouched.
    """
    request._ensure_open()
    if not name:
        raise ValueError("Animation name must be non-empty")
    clip = request.clip
    if clip is None or not clip:
        raise DestroyedAssetError("Clip was destroyed before the rename was applied")
    path = store.asset_path(clip)
    if path is None:
        raise AssetNotFoundError(clip, f"{clip.name!r} is not a stored asset")
    old_name = clip.name
    clip.name = name
    request.name = name
    store.import_asset(path)
    request.closed = True
    logger.info("Renamed %r to %r in %s", old_name, name, path)


def apply_attach(
    store: AssetStore, request: AttachRequest, target: Controller | None
) -> list[AnimationClip]:
    """Embed every requested standalone clip into *target*.

    Each clip is duplicated under its own name, its file is deleted, the
    duplicate is added to *target*'s file and every state of *target* that
    played the original now plays the duplicate. *target*'s file is
    imported once at the end. Without a target nothing happens and the
    request stays open. Returns the embedded duplicates.
    """
    request._ensure_open()
    if target is None or not target:
        logger.debug("Attach applied without a target controller, ignored")
        return []
    if not isinstance(target, Controller):
        raise TypeError(f"Attach target must be a Controller, got {type(target).__name__}")
    target_path = store.asset_path(target)
    if target_path is None:
        raise AssetNotFoundError(target, f"{target.name!r} is not a stored asset")

    embedded: list[AnimationClip] = []
    for clip in request.clips:
        clip_path = store.asset_path(clip)
        if clip_path is None or not store.is_main_asset(clip):
            logger.warning("%r is no longer a standalone asset, skipped", clip.name)
            continue
        states = states_with_motion(target, clip)

        duplicate = store.instantiate(clip)
        duplicate.name = clip.name
        store.delete_asset(clip_path)
        store.add_object_to_asset(duplicate, target)

        for state in states:
            state.motion = duplicate
            logger.debug("State %r now plays embedded %r", state.name, duplicate.name)
        embedded.append(duplicate)

    store.import_asset(target_path)
    request.closed = True
    logger.info("Attached %d animation(s) to %s", len(embedded), target_path)
    return embedded

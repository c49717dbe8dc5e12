"""Embedded animation commands.

Each command takes the asset store and the selection explicitly and
assumes its validator already accepted the selection. Batches are best
effort: a clip that cannot be processed is skipped and earlier clips stay
processed.
"""
from __future__ import annotations

import logging
import posixpath

from animkit import AnimationClip, AssetStore, Controller, Selection
from animkit_query import states_with_motion

from animkit_embed.requests import AttachRequest, RenameRequest
from animkit_embed.settings import DEFAULT_SETTINGS, EmbedSettings
from animkit_embed.types import Confirm, InvalidSelectionError

logger = logging.getLogger(__name__)


def create_clip(
    store: AssetStore,
    selection: Selection,
    settings: EmbedSettings = DEFAULT_SETTINGS,
) -> RenameRequest:
    """Embed a new clip in the selected controller and request its name.

    Raises ``InvalidSelectionError`` if the active object is not a controller.
    """
    controller = selection.active_object
    if not isinstance(controller, Controller):
        raise InvalidSelectionError(settings.menu_path("New Animation"))
    clip = AnimationClip(name=settings.default_clip_name)
    store.add_object_to_asset(clip, controller)
    path = store.asset_path(clip)
    store.import_asset(path)
    logger.info("Created %r in %s", clip.name, path)

    request = RenameRequest(title=settings.rename_title, clip=clip, name=clip.name)
    store.refresh()
    return request


def rename_clip(
    store: AssetStore,
    selection: Selection,
    settings: EmbedSettings = DEFAULT_SETTINGS,
) -> RenameRequest:
    clip = selection.filtered(AnimationClip)[0]
    request = RenameRequest(title=settings.rename_title, clip=clip, name=clip.name)
    store.refresh()
    return request


def delete_clips(store: AssetStore, selection: Selection, confirm: Confirm) -> int:
    """Destroy the selected embedded clips after confirmation.

    States that played a deleted clip keep a cleared reference. Returns the
    number of clips destroyed.
    """
    if not confirm(
        "Delete Animations",
        "Are you sure you want to delete these animations?",
        "Delete",
        "Do Not Delete",
    ):
        return 0

    clips = selection.filtered(AnimationClip)
    path = store.asset_path(clips[0])
    for clip in clips:
        store.destroy(clip)
    store.import_asset(path)
    store.refresh()
    logger.info("Deleted %d animation(s) from %s", len(clips), path)
    return len(clips)


def attach_clips(
    store: AssetStore,
    selection: Selection,
    settings: EmbedSettings = DEFAULT_SETTINGS,
) -> AttachRequest:
    """Request a target controller for the selected standalone clips."""
    request = AttachRequest(
        title=settings.attach_title, clips=selection.filtered(AnimationClip)
    )
    store.refresh()
    return request


def detach_clips(
    store: AssetStore,
    selection: Selection,
    confirm: Confirm,
    settings: EmbedSettings = DEFAULT_SETTINGS,
) -> list[AnimationClip]:
    """Move the selected embedded clips out to standalone files.

    Each clip is written next to its parent file as ``<name><extension>``.
    A clip whose destination already exists is skipped with a warning. The
    parent controller comes from the first clip's file; a clip stored in a
    different file is skipped with a warning. States of the parent that
    played an original now play its standalone copy, and the selection is
    replaced by the copies. Returns the copies.
    """
    if not confirm(
        "Detach Animations",
        "Are you sure you want to detach these animations?",
        "Detach",
        "Do Not Detach",
    ):
        return []

    clips = selection.filtered(AnimationClip)
    main_path = store.asset_path(clips[0])
    detached: list[AnimationClip] = []
    for clip in clips:
        clip_path = store.asset_path(clip)
        if clip_path != main_path:
            logger.warning(
                "%r belongs to %s, not %s; detach skipped", clip.name, clip_path, main_path
            )
            continue

        dest_path = posixpath.join(
            posixpath.dirname(clip_path), clip.name + settings.clip_extension
        )
        if store.exists(dest_path):
            logger.warning("Asset file %s already exists, detach of %r skipped", dest_path, clip.name)
            continue

        controller = store.load_main_asset_at_path(main_path)
        states = (
            states_with_motion(controller, clip)
            if isinstance(controller, Controller)
            else []
        )

        duplicate = store.instantiate(clip)
        store.destroy(clip)
        store.create_asset(duplicate, dest_path)

        for state in states:
            state.motion = duplicate
            logger.debug("State %r now plays %s", state.name, dest_path)
        detached.append(duplicate)

    selection.set(detached)
    store.import_asset(main_path)
    store.refresh()
    logger.info("Detached %d of %d animation(s) from %s", len(detached), len(clips), main_path)
    return detached

"""Selection validators deciding whether each menu command is enabled."""
from __future__ import annotations

from animkit import AnimationClip, AssetStore, Controller, Selection


def validate_new(store: AssetStore, selection: Selection) -> bool:
    """Exactly one object selected, and it is a stored controller."""
    objects = selection.objects
    if len(objects) != 1:
        return False
    obj = objects[0]
    return isinstance(obj, Controller) and store.asset_path(obj) is not None


def validate_rename(store: AssetStore, selection: Selection) -> bool:
    """Exactly one object selected, and it is an embedded clip."""
    clips = selection.filtered(AnimationClip)
    if len(selection.objects) != 1 or len(clips) != 1:
        return False
    return store.is_sub_asset(clips[0])


def validate_embedded_clips(store: AssetStore, selection: Selection) -> bool:
    """One or more clips, nothing else, all of them sub-assets."""
    clips = selection.filtered(AnimationClip)
    if not clips:
        return False
    if len(clips) != len(selection.objects):
        return False
    return all(store.is_sub_asset(clip) for clip in clips)


def validate_standalone_clips(store: AssetStore, selection: Selection) -> bool:
    """One or more clips, nothing else, all of them main assets."""
    clips = selection.filtered(AnimationClip)
    if not clips:
        return False
    if len(clips) != len(selection.objects):
        return False
    return all(store.is_main_asset(clip) for clip in clips)

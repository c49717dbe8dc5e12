"""State predicates for filtering ``all_states``."""
from __future__ import annotations

from typing import Callable

from animkit import AnimationClip, Behaviour, State

StatePredicate = Callable[[State], bool]


def by_motion(clip: AnimationClip) -> StatePredicate:
    """Match states whose motion is *clip* itself (identity, not name)."""

    def predicate(state: State) -> bool:
        return bool(state.motion) and state.motion is clip

    return predicate


def by_name(name: str) -> StatePredicate:
    def predicate(state: State) -> bool:
        return state.name == name

    return predicate


def by_behaviour(kind: str | type[Behaviour]) -> StatePredicate:
    """Match states carrying at least one behaviour of variant *kind*.

    *kind* is a tag string or a ``Behaviour`` subclass whose tag is used.
    """
    if isinstance(kind, str):
        tag = kind
    elif isinstance(kind, type) and issubclass(kind, Behaviour):
        tag = kind.tag
    else:
        raise TypeError(f"Expected a behaviour tag or Behaviour subclass, got {kind!r}")

    def predicate(state: State) -> bool:
        return bool(state.behaviours) and any(
            behaviour.tag == tag for behaviour in state.behaviours
        )

    return predicate

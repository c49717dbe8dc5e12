"""Animator asset objects: clips, states, state graphs, layers, controllers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar

from animkit.types import string_to_hash


@dataclass(eq=False)
class AssetObject:
    """Anything the asset store can own.

    Identity is object identity. Once destroyed the object is falsy, so a
    reference held elsewhere reads as cleared (``if state.motion: ...``).
    """

    name: str
    destroyed: bool = field(default=False, init=False, repr=False)

    def __bool__(self) -> bool:
        return not self.destroyed


@dataclass(eq=False)
class AnimationClip(AssetObject):
    """Playable animation data. The only motion kind states reference."""

    frame_rate: float = 60.0
    length: float = 0.0
    curves: dict[str, Any] = field(default_factory=dict)


Motion = AnimationClip


class Behaviour:
    """Handler attached to a state, identified by its variant ``tag``.

    Subclasses get their module-qualified class name as tag unless they declare
    their own, so two distinct behaviour classes never share a tag by
    accident. A subclass of a tagged behaviour is a different variant.
    """

    tag: ClassVar[str] = "Behaviour"

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "tag" not in cls.__dict__:
            cls.tag = f"{cls.__module__}.{cls.__qualname__}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self.tag!r})"


@dataclass(eq=False)
class State:
    name: str
    motion: AnimationClip | None = None
    behaviours: list[Behaviour] = field(default_factory=list)
    speed: float = 1.0


@dataclass(eq=False)
class StateGraph:
    """Node of the state tree: owns states and nested graphs."""

    name: str
    states: list[State] = field(default_factory=list)
    state_graphs: list[StateGraph] = field(default_factory=list)

    def add_state(self, name: str, motion: AnimationClip | None = None) -> State:
        state = State(name=name, motion=motion)
        self.states.append(state)
        return state

    def add_state_graph(self, name: str) -> StateGraph:
        graph = StateGraph(name=name)
        self.state_graphs.append(graph)
        return graph


@dataclass(eq=False)
class Layer:
    name: str
    state_graph: StateGraph
    weight: float = 1.0


class ParameterType(enum.Enum):
    FLOAT = "float"
    INT = "int"
    BOOL = "bool"
    TRIGGER = "trigger"


@dataclass
class Parameter:
    """Named, typed value slot on a controller.

    Attributes:
        name: Display name; lookups key on ``name_hash``.
        type: Value kind.
        default_float: Initial value for FLOAT parameters.
        default_int: Initial value for INT parameters.
        default_bool: Initial value for BOOL parameters.
    """

    name: str
    type: ParameterType
    default_float: float = 0.0
    default_int: int = 0
    default_bool: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Parameter name must be non-empty")

    @property
    def name_hash(self) -> int:
        return string_to_hash(self.name)


@dataclass(eq=False)
class Controller(AssetObject):
    """Animator controller: layers of state graphs plus parameters."""

    layers: list[Layer] = field(default_factory=list)
    parameters: list[Parameter] = field(default_factory=list)

    def add_layer(self, name: str) -> Layer:
        """Append a layer with an empty root state graph named after it."""
        layer = Layer(name=name, state_graph=StateGraph(name=name))
        self.layers.append(layer)
        return layer

    def add_parameter(self, parameter: Parameter) -> None:
        self.parameters.append(parameter)

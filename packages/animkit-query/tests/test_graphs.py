"""Tests for state graph traversal and state filters."""
from __future__ import annotations

import pytest
from animkit import AnimationClip, Behaviour, Controller, State
from animkit_query import (
    all_state_graphs,
    all_states,
    by_behaviour,
    by_motion,
    by_name,
    graph_states,
    states_with_behaviour,
    states_with_motion,
    states_with_name,
)


class Footsteps(Behaviour):
    pass


class LoudFootsteps(Footsteps):
    pass


class Tagged(Behaviour):
    tag = "sfx"


@pytest.fixture
def walk() -> AnimationClip:
    return AnimationClip(name="walk")


@pytest.fixture
def controller(walk: AnimationClip) -> Controller:
    """Two layers; the base layer has a child graph and a grandchild graph."""
    ctrl = Controller(name="Hero")
    base = ctrl.add_layer("Base").state_graph
    base.add_state("Idle")
    base.add_state("Walk", walk)
    locomotion = base.add_state_graph("Locomotion")
    locomotion.add_state("WalkFast", walk)
    deep = locomotion.add_state_graph("Deep")
    deep.add_state("Hidden", walk)

    upper = ctrl.add_layer("Upper").state_graph
    upper.add_state("Wave")
    return ctrl


class TestTraversal:
    def test_all_state_graphs_one_level(self, controller: Controller) -> None:
        names = [g.name for g in all_state_graphs(controller)]
        assert names == ["Base", "Locomotion", "Upper"]

    def test_graph_states_not_recursive(self, controller: Controller) -> None:
        base = controller.layers[0].state_graph
        assert [s.name for s in graph_states(base)] == ["Idle", "Walk"]

    def test_all_states_without_predicate(self, controller: Controller) -> None:
        names = [s.name for s in all_states(controller)]
        assert names == ["Idle", "Walk", "WalkFast", "Wave"]

    def test_all_states_empty_controller(self) -> None:
        assert all_states(Controller(name="Empty")) == []

    def test_all_states_no_duplicates(self) -> None:
        ctrl = Controller(name="Hero")
        base = ctrl.add_layer("Base").state_graph
        shared = base.add_state("Shared")
        ctrl.add_layer("Other").state_graph.states.append(shared)
        assert all_states(ctrl) == [shared]

    def test_predicate_filters(self, controller: Controller) -> None:
        result = all_states(controller, lambda s: s.name.startswith("W"))
        assert [s.name for s in result] == ["Walk", "WalkFast", "Wave"]


class TestByMotion:
    def test_finds_every_referencing_state(self, controller: Controller, walk: AnimationClip) -> None:
        names = [s.name for s in states_with_motion(controller, walk)]
        assert names == ["Walk", "WalkFast"]

    def test_identity_not_name(self, controller: Controller) -> None:
        impostor = AnimationClip(name="walk")
        assert states_with_motion(controller, impostor) == []

    def test_unrelated_controller(self, walk: AnimationClip) -> None:
        other = Controller(name="Other")
        other.add_layer("Base").state_graph.add_state("Idle")
        assert states_with_motion(other, walk) == []

    def test_none_motion_never_matches(self) -> None:
        assert by_motion(AnimationClip(name="x"))(State(name="Empty")) is False

    def test_destroyed_motion_never_matches(self, walk: AnimationClip) -> None:
        state = State(name="Walk", motion=walk)
        walk.destroyed = True
        assert by_motion(walk)(state) is False


class TestByName:
    def test_exact_match(self, controller: Controller) -> None:
        result = states_with_name(controller, "Walk")
        assert [s.name for s in result] == ["Walk"]

    def test_case_sensitive(self, controller: Controller) -> None:
        assert states_with_name(controller, "walk") == []

    def test_predicate(self) -> None:
        assert by_name("Idle")(State(name="Idle")) is True
        assert by_name("Idle")(State(name="Idle2")) is False


class TestByBehaviour:
    def test_by_class(self, controller: Controller) -> None:
        idle = states_with_name(controller, "Idle")[0]
        idle.behaviours.append(Footsteps())
        assert states_with_behaviour(controller, Footsteps) == [idle]

    def test_subclass_is_a_different_variant(self, controller: Controller) -> None:
        idle = states_with_name(controller, "Idle")[0]
        idle.behaviours.append(LoudFootsteps())
        assert states_with_behaviour(controller, Footsteps) == []
        assert states_with_behaviour(controller, LoudFootsteps) == [idle]

    def test_by_tag_string(self, controller: Controller) -> None:
        wave = states_with_name(controller, "Wave")[0]
        wave.behaviours.extend([Footsteps(), Tagged()])
        assert states_with_behaviour(controller, "sfx") == [wave]
        assert states_with_behaviour(controller, Tagged) == [wave]

    def test_same_class_name_in_other_module_does_not_match(self, controller: Controller) -> None:
        audio_footsteps = type("Footsteps", (Behaviour,), {"__module__": "audio.behaviours"})
        game_footsteps = type("Footsteps", (Behaviour,), {"__module__": "game.behaviours"})
        idle = states_with_name(controller, "Idle")[0]
        idle.behaviours.append(audio_footsteps())

        assert audio_footsteps.tag != game_footsteps.tag
        assert states_with_behaviour(controller, game_footsteps) == []
        assert states_with_behaviour(controller, audio_footsteps) == [idle]

    def test_empty_behaviours(self) -> None:
        assert by_behaviour(Footsteps)(State(name="Idle")) is False

    def test_invalid_kind_raises(self) -> None:
        with pytest.raises(TypeError):
            by_behaviour(int)  # type: ignore[arg-type]

"""State graph traversal over a controller."""
from __future__ import annotations

from animkit import AnimationClip, Behaviour, Controller, State, StateGraph

from animkit_query.predicates import StatePredicate, by_behaviour, by_motion, by_name


def all_state_graphs(controller: Controller) -> list[StateGraph]:
    """Root graph of every layer followed by its direct child graphs.

    Grandchild graphs are not visited.
    """
    graphs: list[StateGraph] = []
    for layer in controller.layers:
        graphs.append(layer.state_graph)
        graphs.extend(layer.state_graph.state_graphs)
    return graphs


def graph_states(graph: StateGraph) -> list[State]:
    """Direct states of *graph*, not recursive."""
    return list(graph.states)


def all_states(
    controller: Controller, predicate: StatePredicate | None = None
) -> list[State]:
    """States across ``all_state_graphs`` matching *predicate* (all if None).

    Order follows layers, then graphs, then states. A state reachable
    twice is reported once.
    """
    seen: set[int] = set()
    result: list[State] = []
    for graph in all_state_graphs(controller):
        for state in graph_states(graph):
            if id(state) in seen:
                continue
            seen.add(id(state))
            if predicate is None or predicate(state):
                result.append(state)
    return result


def states_with_motion(controller: Controller, clip: AnimationClip) -> list[State]:
    return all_states(controller, by_motion(clip))


def states_with_name(controller: Controller, name: str) -> list[State]:
    return all_states(controller, by_name(name))


def states_with_behaviour(
    controller: Controller, kind: str | type[Behaviour]
) -> list[State]:
    return all_states(controller, by_behaviour(kind))

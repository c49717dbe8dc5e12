"""animkit-query - State graph and parameter queries over animator controllers."""
from __future__ import annotations

from animkit_query.graphs import (
    all_state_graphs,
    all_states,
    graph_states,
    states_with_behaviour,
    states_with_motion,
    states_with_name,
)
from animkit_query.parameters import (
    bool_parameter,
    float_parameter,
    get_parameter_of_type,
    has_parameter,
    has_parameter_of_type,
    int_parameter,
    trigger_parameter,
)
from animkit_query.predicates import StatePredicate, by_behaviour, by_motion, by_name

__all__ = [
    "all_state_graphs",
    "all_states",
    "graph_states",
    "states_with_motion",
    "states_with_name",
    "states_with_behaviour",
    "StatePredicate",
    "by_motion",
    "by_name",
    "by_behaviour",
    "get_parameter_of_type",
    "has_parameter_of_type",
    "has_parameter",
    "float_parameter",
    "int_parameter",
    "bool_parameter",
    "trigger_parameter",
]

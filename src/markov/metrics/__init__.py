from .complexity import n_states, n_transitions
from .branching import branching_entropy, mean_branching_entropy
from .graph import DotStyle, to_dot, to_edge_list, to_frame, save_dot

__all__ = [
    "n_states",
    "n_transitions",
    "branching_entropy",
    "mean_branching_entropy",
    "DotStyle",
    "to_edge_list",
    "to_frame",
    "to_dot",
    "save_dot",
]

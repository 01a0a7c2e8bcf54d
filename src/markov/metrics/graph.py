from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

from markov.chain.engine import Chain
from markov.types import SENTINEL, State

Edge = Tuple[State, State, int, float]  # (state, successor, count, probability)


@dataclass(frozen=True)
class DotStyle:
    rankdir: str = "LR"
    splines: str = "true"
    overlap: str = "false"
    nodesep: float = 0.6
    ranksep: float = 0.9
    pad: float = 0.25

    fontname: str = "Helvetica"
    fontcolor: str = "#222222"
    graph_fontsize: int = 18
    node_fontsize: int = 13
    edge_fontsize: int = 11

    node_shape: str = "ellipse"
    node_penwidth: float = 1.4
    node_color: str = "#222222"

    # The sentinel marks both the start and the end of every fed sequence.
    sentinel_label: str = "START/END"
    sentinel_shape: str = "doublecircle"
    sentinel_fillcolor: str = "#eeeeee"

    arrowsize: float = 0.9
    edge_penwidth: float = 1.2
    edge_color: str = "#222222"

    prob_precision: int = 3
    strip_trailing_zeros: bool = False
    show_counts: bool = False


def to_edge_list(chain: Chain) -> List[Edge]:
    """Every recorded transition with its count and conditional probability, in sampling order."""
    edges: List[Edge] = []
    snapshot = chain.snapshot()
    for state, successors in snapshot.items():
        total = sum(successors.values())
        for succ, count in successors.items():
            edges.append((state, succ, count, count / total))
    return edges


def to_frame(chain: Chain) -> pd.DataFrame:
    """Edge list as a DataFrame; the sentinel shows up as None."""
    return pd.DataFrame(
        to_edge_list(chain),
        columns=["state", "successor", "count", "probability"],
    )


def _escape_dot(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def _format_prob(p: float, precision: int, strip_trailing_zeros: bool) -> str:
    text = f"{p:.{precision}f}"
    if strip_trailing_zeros:
        text = text.rstrip("0").rstrip(".")
    return text


def to_dot(
    chain: Chain,
    graph_name: str = "markov_chain",
    label: Optional[str] = None,
    style: Optional[DotStyle] = None,
) -> str:
    st = style or DotStyle()
    edges = to_edge_list(chain)
    gname = _escape_dot(graph_name)

    if not edges:
        return f'digraph "{gname}" {{}}'

    node_ids: Dict[State, str] = {}
    for s, sp, _, _ in edges:
        for state in (s, sp):
            if state not in node_ids:
                node_ids[state] = "start_end" if state is SENTINEL else f"n{len(node_ids)}"

    lines: List[str] = []
    lines.append(f'digraph "{gname}" {{')
    lines.append(f"  rankdir={st.rankdir};")
    lines.append(f"  splines={st.splines};")
    lines.append(f"  overlap={st.overlap};")
    lines.append(f"  nodesep={st.nodesep};")
    lines.append(f"  ranksep={st.ranksep};")
    lines.append(f"  pad={st.pad};")
    lines.append(
        f'  graph [fontname="{st.fontname}", fontsize={st.graph_fontsize}, fontcolor="{st.fontcolor}"];'
    )
    lines.append(
        f'  node [shape={st.node_shape}, fontname="{st.fontname}", fontsize={st.node_fontsize}, '
        f'penwidth={st.node_penwidth}, color="{st.node_color}", fontcolor="{st.fontcolor}"];'
    )
    lines.append(
        f'  edge [fontname="{st.fontname}", fontsize={st.edge_fontsize}, arrowsize={st.arrowsize}, '
        f'penwidth={st.edge_penwidth}, color="{st.edge_color}", fontcolor="{st.fontcolor}"];'
    )

    if label is not None:
        lines.append(f'  label="{_escape_dot(label)}";')
        lines.append("  labelloc=t;")
        lines.append("  labeljust=l;")

    for state, node in node_ids.items():
        if state is SENTINEL:
            lines.append(
                f'  {node} [label="{_escape_dot(st.sentinel_label)}", shape={st.sentinel_shape}, '
                f'style=filled, fillcolor="{st.sentinel_fillcolor}"];'
            )
        else:
            lines.append(f'  {node} [label="{_escape_dot(str(state))}"];')

    for s, sp, count, p in edges:
        text = _format_prob(p, st.prob_precision, st.strip_trailing_zeros)
        if st.show_counts:
            text = f"{text} ({count})"
        lines.append(f'  {node_ids[s]} -> {node_ids[sp]} [label="{text}"];')

    lines.append("}")
    return "\n".join(lines)


def save_dot(path: Path, dot: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dot, encoding="utf-8")

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from nfa.nfa import EPSILON, NFA


@dataclass(frozen=True)
class GraphNode:
    state_id: int
    label: str
    is_initial: bool
    is_accepting: bool


@dataclass(frozen=True)
class GraphEdge:
    edge_id: str
    source: int
    target: int
    symbol: str
    # 绘图时 ε 边与字符边样式不同
    is_epsilon: bool


@dataclass(frozen=True)
class NFAGraph:
    nodes: List[GraphNode]
    edges: List[GraphEdge]

    def __str__(self) -> str:
        lines: List[str] = ["结点:"]
        for node in self.nodes:
            flags = []
            if node.is_initial:
                flags.append("[START]")
            if node.is_accepting:
                flags.append("[ACCEPT]")
            lines.append(f"  {node.label}{''.join(flags)}")
        lines.append("边:")
        for edge in self.edges:
            lines.append(f"  {edge.edge_id}")
        return "\n".join(lines)


def to_graph(nfa: NFA) -> NFAGraph:
    """把 NFA 转成图结构（每个状态一个结点，每个 (起点, 符号, 终点) 一条边），不含布局。"""
    nodes = [
        GraphNode(
            state_id=state,
            label=f"q{state}",
            is_initial=nfa.is_initial(state),
            is_accepting=nfa.is_accepting(state),
        )
        for state in nfa.states
    ]
    edges = [
        GraphEdge(
            edge_id=f"e{src}-{symbol}-{dst}",
            source=src,
            target=dst,
            symbol=symbol,
            is_epsilon=symbol == EPSILON,
        )
        for src, symbol, dst in nfa.edges()
    ]
    return NFAGraph(nodes=nodes, edges=edges)

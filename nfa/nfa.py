from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Tuple

# ε 转移的标签，与任何输入字符都不同
EPSILON = "ε"

TransitionTable = Dict[int, Dict[str, List[int]]]


def copy_table(transitions: TransitionTable) -> TransitionTable:
    """结构化深拷贝：每一层 dict/list 都是新对象，状态编号照旧共享。"""
    return {state: {symbol: list(targets) for symbol, targets in row.items()} for state, row in transitions.items()}


@dataclass(frozen=True)
class NFA:
    """ε-NFA 五元组（状态、字母表、转移表、初态、终态集）。

    构造完成后不再修改；组合运算只拷贝转移表，不改动操作数。
    """

    states: Tuple[int, ...]
    alphabet: FrozenSet[str]
    transitions: TransitionTable
    initial_state: int
    accepting_states: Tuple[int, ...]

    def is_initial(self, state: int) -> bool:
        return state == self.initial_state

    def is_accepting(self, state: int) -> bool:
        return state in self.accepting_states

    def copy_transitions(self) -> TransitionTable:
        return copy_table(self.transitions)

    def edges(self) -> Iterator[Tuple[int, str, int]]:
        # 按转移表插入顺序给出 (起点, 符号, 终点)
        for state, row in self.transitions.items():
            for symbol, targets in row.items():
                for target in targets:
                    yield state, symbol, target

    def epsilon_edges(self) -> List[Tuple[int, int]]:
        return [(src, dst) for src, symbol, dst in self.edges() if symbol == EPSILON]

    def targets(self, state: int, symbol: str) -> List[int]:
        return list(self.transitions.get(state, {}).get(symbol, []))

    def __str__(self) -> str:
        lines: List[str] = []
        lines.append("NFA:")
        lines.append(f"状态: {' '.join(str(s) for s in self.states)}")
        lines.append(f"起始状态: {self.initial_state}")
        lines.append("接受状态: " + " ".join(str(s) for s in self.accepting_states))
        lines.append(f"字母表: {sorted(self.alphabet)}")
        lines.append("转移表:")
        for src, symbol, dst in self.edges():
            lines.append(f"  {src} --{symbol}--> {dst}")
        return "\n".join(lines)

    def visualize(self) -> None:
        """打印 NFA 的所有状态和转移关系"""
        print(str(self))

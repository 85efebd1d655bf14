from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from nfa.nfa import EPSILON, NFA, TransitionTable, copy_table
from nfa.state_allocator import StateAllocator


def _add_transition(table: TransitionTable, src: int, symbol: str, dst: int) -> None:
    targets = table.setdefault(src, {}).setdefault(symbol, [])
    if dst not in targets:
        targets.append(dst)


def _merge_tables(*tables: TransitionTable) -> TransitionTable:
    # 按 状态 -> 符号 合并；plus 的两个操作数共用状态编号，目标列表需去重合并
    merged: TransitionTable = {}
    for table in tables:
        for src, row in table.items():
            for symbol, targets in row.items():
                for dst in targets:
                    _add_transition(merged, src, symbol, dst)
    return merged


def _ordered_states(*groups: Iterable[int]) -> Tuple[int, ...]:
    # 保持插入顺序并去重
    ordered: Dict[int, None] = {}
    for group in groups:
        for state in group:
            ordered.setdefault(state)
    return tuple(ordered)


@dataclass
class NFABuilder:
    """Thompson 构造的组合运算。

    - 每个运算都返回新的 NFA，操作数不被修改（转移表先深拷贝再改）
    - 每个结果恰有一个初态、一个终态：多个终态总是经 ε 汇入新的终态
    - 状态编号来自 allocator，同一次构建内不会重复
    """

    allocator: StateAllocator = field(default_factory=StateAllocator)

    def _new_state(self) -> int:
        return self.allocator.allocate()

    def basic(self, symbol: str) -> NFA:
        if len(symbol) != 1:
            raise ValueError("symbol must be a single character")
        if symbol == EPSILON:
            raise ValueError("symbol must not be the epsilon marker")
        start = self._new_state()
        accept = self._new_state()
        transitions: TransitionTable = {}
        _add_transition(transitions, start, symbol, accept)
        return NFA(
            states=(start, accept),
            alphabet=frozenset({symbol}),
            transitions=transitions,
            initial_state=start,
            accepting_states=(accept,),
        )

    def empty(self) -> NFA:
        # 只接受空串：同一个状态既是初态也是终态
        state = self._new_state()
        return NFA(
            states=(state,),
            alphabet=frozenset(),
            transitions={},
            initial_state=state,
            accepting_states=(state,),
        )

    def union(self, a: NFA, b: NFA) -> NFA:
        start = self._new_state()
        accept = self._new_state()
        transitions = _merge_tables(a.transitions, b.transitions)
        _add_transition(transitions, start, EPSILON, a.initial_state)
        _add_transition(transitions, start, EPSILON, b.initial_state)
        for state in a.accepting_states + b.accepting_states:
            _add_transition(transitions, state, EPSILON, accept)
        return NFA(
            states=_ordered_states(a.states, b.states, (start, accept)),
            alphabet=a.alphabet | b.alphabet,
            transitions=transitions,
            initial_state=start,
            accepting_states=(accept,),
        )

    def concat(self, a: NFA, b: NFA) -> NFA:
        # 不分配新状态：a 的终态经 ε 连到 b 的初态
        transitions = _merge_tables(a.transitions, b.transitions)
        for state in a.accepting_states:
            _add_transition(transitions, state, EPSILON, b.initial_state)
        return NFA(
            states=_ordered_states(a.states, b.states),
            alphabet=a.alphabet | b.alphabet,
            transitions=transitions,
            initial_state=a.initial_state,
            accepting_states=b.accepting_states,
        )

    def kleene_star(self, a: NFA) -> NFA:
        start = self._new_state()
        accept = self._new_state()
        transitions = copy_table(a.transitions)
        _add_transition(transitions, start, EPSILON, a.initial_state)
        _add_transition(transitions, start, EPSILON, accept)
        for state in a.accepting_states:
            # 回到 a 的初态形成循环，同时可以离开
            _add_transition(transitions, state, EPSILON, a.initial_state)
            _add_transition(transitions, state, EPSILON, accept)
        return NFA(
            states=_ordered_states(a.states, (start, accept)),
            alphabet=a.alphabet,
            transitions=transitions,
            initial_state=start,
            accepting_states=(accept,),
        )

    def plus(self, a: NFA) -> NFA:
        # a+ = a · a*；a 被使用两次，先复制一份转移表（状态编号不变）
        first = NFA(
            states=a.states,
            alphabet=a.alphabet,
            transitions=a.copy_transitions(),
            initial_state=a.initial_state,
            accepting_states=a.accepting_states,
        )
        return self.concat(first, self.kleene_star(a))

    def optional(self, a: NFA) -> NFA:
        return self.union(a, self.empty())

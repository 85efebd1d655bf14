from __future__ import annotations

from typing import List, Mapping, Set

from nfa.nfa import EPSILON


def collect_alphabet(transitions: Mapping[int, Mapping[str, List[int]]]) -> Set[str]:
    # 扫描整张转移表，ε 不属于字母表
    symbols: Set[str] = set()
    for row in transitions.values():
        for symbol in row:
            if symbol != EPSILON:
                symbols.add(symbol)
    return symbols

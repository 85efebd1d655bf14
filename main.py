from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

_THIS_DIR = Path(__file__).resolve().parent
if str(_THIS_DIR) not in sys.path:
    sys.path.insert(0, str(_THIS_DIR))

from nfa.graph_export import to_graph
from nfa.nfa import NFA
from regex_parser.errors import RegexSyntaxError
from regex_parser.rd_parser import build_nfa


def prompt_for_regex() -> str:
    return input("请输入正则表达式（支持 |, *, +, ?, () 与隐式连接）:\n> ")


def format_regex_for_display(regex: str) -> str:
    if not regex:
        return "[空串]"
    if len(regex) > 50:
        return regex[:47] + "..."
    return regex


def build_report(regex: str, nfa: NFA, trace: Optional[List[str]] = None) -> str:
    graph = to_graph(nfa)
    epsilon_count = sum(1 for e in graph.edges if e.is_epsilon)
    parts: List[str] = [
        "========================================\n"
        "        Thompson NFA 构造结果\n"
        "========================================\n"
        f"正则表达式: {format_regex_for_display(regex)}\n"
        "========================================\n\n",
        str(nfa),
        "\n\n",
        str(graph),
        "\n\n========================================\n"
        f"状态数:        {len(nfa.states):8d}\n"
        f"转移数:        {len(graph.edges):8d}\n"
        f"ε 转移数:      {epsilon_count:8d}\n"
        "========================================\n",
    ]
    if trace is not None:
        parts.append("\n递归下降解析日志:\n")
        parts.append("\n".join(trace))
        parts.append("\n")
    return "".join(parts)


def main(argv: List[str]) -> int:
    # 用法: main.py [--trace] [正则]；--trace 只能写在正则之前
    args = argv[1:]
    show_trace = bool(args) and args[0] == "--trace"
    if show_trace:
        args = args[1:]

    if len(args) > 1:
        print(f"错误: 多余的参数 {args[1:]}（正则中含空格时请加引号）")
        return 1

    if args:
        regex = args[0]
    else:
        try:
            regex = prompt_for_regex()
        except EOFError:
            print("未提供正则表达式，程序退出。")
            return 1

    trace: Optional[List[str]] = [] if show_trace else None
    try:
        nfa = build_nfa(regex, trace=trace)
    except RegexSyntaxError as e:
        print(f"错误: {e}")
        if trace:
            print("\n".join(trace))
        return 1

    print(build_report(regex, nfa, trace), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))

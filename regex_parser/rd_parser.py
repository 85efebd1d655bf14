from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from nfa.alphabet import collect_alphabet
from nfa.nfa import EPSILON, NFA
from nfa.nfa_builder import NFABuilder
from nfa.state_allocator import StateAllocator
from regex_parser.errors import (
    GroupTooDeep,
    ReservedSymbol,
    UnexpectedEndOfInput,
    UnexpectedOperator,
    UnexpectedTrailingInput,
    UnterminatedGroup,
)
from regex_parser.stream import CharStream


# 不能出现在项开头的运算符
_OPERATORS = {"|", ")", "*", "+", "?"}
_POSTFIX_OPS = {"*", "+", "?"}
# 每层括号占 4 个递归帧，限制层数以免超出解释器递归深度
MAX_GROUP_DEPTH = 100


class RegexParser:
    """递归下降解析正则，边解析边用 Thompson 构造生成 NFA。

    文法（优先级由高到低：项 > 重复 > 连接 > 或）：
        Alternation   -> Concatenation ('|' Concatenation)*
        Concatenation -> Repetition+
        Repetition    -> Term ('*' | '+' | '?')*
        Term          -> Symbol | '(' Alternation ')'
    """

    def __init__(self, stream: CharStream, builder: Optional[NFABuilder] = None):
        self.s = stream
        self.builder = builder if builder is not None else NFABuilder()
        self.parse_trace: List[str] = []
        self._indent = 0
        self._depth = 0
        self._done = False

    def parse(self) -> NFA:
        # 读指针不会回退，一个实例只能解析一次
        if self._done:
            raise RuntimeError("RegexParser.parse() can only be called once per instance")
        self._done = True
        self.builder.allocator.reset()
        self._enter("Regex")
        try:
            # 空串：只接受空串的 NFA，不进入文法
            if self.s.at_end():
                self._log("空输入 -> empty")
                return self.builder.empty()

            nfa = self._alternation()
            if not self.s.at_end():
                ch = self.s.peek()
                raise UnexpectedTrailingInput(
                    message=f"表达式结束后还有多余输入: {self.s.remaining()!r}",
                    position=self.s.index(),
                    got=ch,
                )
            return nfa
        finally:
            # 出错时内层规则没有退出，缩进回到顶层
            self._indent = 1
            self._leave("Regex")

    # ---------------- trace helpers ----------------
    def _log(self, msg: str) -> None:
        self.parse_trace.append("  " * self._indent + msg)

    def _enter(self, name: str) -> None:
        self._log(f"进入 <{name}>")
        self._indent += 1

    def _leave(self, name: str) -> None:
        self._indent = max(0, self._indent - 1)
        self._log(f"退出 <{name}>")

    def _built(self, op: str, nfa: NFA) -> NFA:
        self._log(f"构造 {op}: 初态 {nfa.initial_state}, 终态 {list(nfa.accepting_states)}")
        return nfa

    # ---------------- char helpers ----------------
    def _peek(self) -> Optional[str]:
        return self.s.peek(0)

    def _match(self, ch: str) -> bool:
        if self._peek() == ch:
            self.s.advance()
            self._log(f"match {ch}")
            return True
        return False

    # ---------------- grammar rules ----------------
    def _alternation(self) -> NFA:
        self._enter("Alternation")
        nfa = self._concatenation()
        while self._match("|"):
            right = self._concatenation()
            nfa = self._built("union", self.builder.union(nfa, right))
        self._leave("Alternation")
        return nfa

    def _concatenation(self) -> NFA:
        self._enter("Concatenation")
        nfa = self._repetition()
        while not self.s.at_end() and self._peek() not in (")", "|"):
            right = self._repetition()
            nfa = self._built("concat", self.builder.concat(nfa, right))
        self._leave("Concatenation")
        return nfa

    def _repetition(self) -> NFA:
        self._enter("Repetition")
        nfa = self._term()
        # 后缀运算符可以叠加，按出现顺序从左到右依次作用
        while self._peek() in _POSTFIX_OPS:
            op = self.s.advance()
            self._log(f"match {op}")
            if op == "*":
                nfa = self._built("kleene_star", self.builder.kleene_star(nfa))
            elif op == "+":
                nfa = self._built("plus", self.builder.plus(nfa))
            else:
                nfa = self._built("optional", self.builder.optional(nfa))
        self._leave("Repetition")
        return nfa

    def _term(self) -> NFA:
        self._enter("Term")
        pos = self.s.index()
        ch = self._peek()

        if ch is None:
            raise UnexpectedEndOfInput(
                message="正则表达式意外结束",
                position=pos,
                got="EOF",
                expected=["(", "字符"],
            )

        if ch == "(":
            if self._depth >= MAX_GROUP_DEPTH:
                raise GroupTooDeep(
                    message=f"括号嵌套超过 {MAX_GROUP_DEPTH} 层",
                    position=pos,
                    got=ch,
                )
            self._match("(")
            self._depth += 1
            nfa = self._alternation()
            self._depth -= 1
            if not self._match(")"):
                # _alternation 只会停在 ')' 或输入末尾，这里一定是末尾
                raise UnterminatedGroup(
                    message=f"位置 {pos} 的 '(' 缺少配对的 ')'",
                    position=self.s.index(),
                    got="EOF",
                    expected=[")"],
                )
            self._leave("Term")
            return nfa

        if ch in _OPERATORS:
            raise UnexpectedOperator(
                message=f"运算符 {ch!r} 不能出现在此处",
                position=pos,
                got=ch,
            )

        if ch == EPSILON:
            raise ReservedSymbol(
                message=f"{EPSILON!r} 保留为空转移标签，不能作为输入字符",
                position=pos,
                got=ch,
            )

        self.s.advance()
        self._log(f"match {ch}")
        nfa = self._built("basic", self.builder.basic(ch))
        self._leave("Term")
        return nfa


def build_nfa(regex: str, trace: Optional[List[str]] = None) -> NFA:
    """把正则串构建为 ε-NFA。

    每次调用使用独立的状态分配器，相同输入得到相同的状态编号。
    出错时抛出 RegexSyntaxError 的子类，不返回部分结果。
    """
    parser = RegexParser(CharStream(regex), NFABuilder(StateAllocator()))
    try:
        nfa = parser.parse()
    finally:
        if trace is not None:
            trace.extend(parser.parse_trace)

    # 字母表在整个 NFA 组装完后统一重新收集
    return replace(nfa, alphabet=frozenset(collect_alphabet(nfa.transitions)))

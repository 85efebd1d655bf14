from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass
class RegexSyntaxError(Exception):
    message: str
    # 出错位置（从 0 开始的字符下标）
    position: int
    # 实际得到的字符，输入结束时为 "EOF"
    got: str
    # 期望得到的字符列表
    expected: Optional[Iterable[str]] = None

    def __str__(self) -> str:
        exp = ""
        if self.expected:
            exp = f"，期望: {', '.join(sorted(set(self.expected)))}"
        return f"正则语法错误 @ 位置{self.position}: {self.message}（得到: {self.got}{exp}）"


# 运算符出现在需要项（字符或括号）的位置
class UnexpectedOperator(RegexSyntaxError):
    pass


# '(' 直到输入结束都没有配对的 ')'
class UnterminatedGroup(RegexSyntaxError):
    pass


# 顶层表达式解析完后仍有剩余字符，例如多余的 ')'
class UnexpectedTrailingInput(RegexSyntaxError):
    pass


# 还需要一个项时输入已经结束
class UnexpectedEndOfInput(RegexSyntaxError):
    pass


# 输入里出现 ε，与空转移标签冲突
class ReservedSymbol(RegexSyntaxError):
    pass


# 括号嵌套层数超过 MAX_GROUP_DEPTH
class GroupTooDeep(RegexSyntaxError):
    pass

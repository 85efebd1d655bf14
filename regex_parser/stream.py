from __future__ import annotations

from typing import Optional


class CharStream:
    """正则输入串 + 读指针。一次构建一个实例，不可重入。"""

    def __init__(self, text: str):
        self._text = text
        # 当前读到哪一个字符的索引
        self._i = 0

    # 看 k 个字符之后的字符，k=0 表示当前字符，不移动读取位置；越界返回 None
    def peek(self, k: int = 0) -> Optional[str]:
        idx = self._i + k
        if idx < 0 or idx >= len(self._text):
            return None
        return self._text[idx]

    # 返回当前字符，移动到下一个字符
    def advance(self) -> Optional[str]:
        ch = self.peek(0)
        if ch is not None:
            self._i += 1
        return ch

    def at_end(self) -> bool:
        return self._i >= len(self._text)

    def index(self) -> int:
        return self._i

    def remaining(self) -> str:
        return self._text[self._i:]

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StateAllocator:
    """状态编号分配器：单调递增，从 0 开始。

    每次构建前调用 reset()，相同输入得到相同编号。非线程安全，一次构建一个实例。
    """

    # 下一个可分配的编号
    next_id: int = 0

    def allocate(self) -> int:
        state_id = self.next_id
        self.next_id += 1
        return state_id

    def reset(self) -> None:
        self.next_id = 0

from nfa.state_allocator import StateAllocator


def test_allocate_counts_up_from_zero():
    allocator = StateAllocator()
    assert [allocator.allocate() for _ in range(4)] == [0, 1, 2, 3]


def test_reset_restarts_numbering():
    allocator = StateAllocator()
    allocator.allocate()
    allocator.allocate()
    allocator.reset()
    assert allocator.allocate() == 0


def test_separate_allocators_do_not_interfere():
    first = StateAllocator()
    second = StateAllocator()
    first.allocate()
    first.allocate()
    assert second.allocate() == 0
    assert first.allocate() == 2

import pytest

from linkedstructs.structures import LinkedList, Node, Queue, Stack


def make_list(values):
    lst = LinkedList()
    for v in values:
        lst.insert(v)
    return lst


# ---- Node ----

def test_node_defaults_to_no_next():
    node = Node("a")
    assert node.data == "a"
    assert node.next is None


def test_node_links():
    tail = Node("b")
    head = Node("a", tail)
    assert head.next is tail
    assert head.next.data == "b"


# ---- LinkedList ----

def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert not lst.contains("x")


def test_insert_keeps_order():
    values = ["a", "b", "c", "d"]
    lst = make_list(values)
    assert list(lst) == values
    assert len(lst) == len(values)


def test_contains_and_in_operator():
    lst = make_list("abc")
    assert lst.contains("b")
    assert "c" in lst
    assert "z" not in lst
    assert not lst.contains("z")


def test_remove_missing_returns_false():
    lst = make_list("abc")
    assert lst.remove("z") is False
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_remove_from_empty_returns_false():
    lst = LinkedList()
    assert lst.remove("a") is False
    assert len(lst) == 0


@pytest.mark.parametrize("target", ["a", "b", "c"])
def test_remove_each_position(target):
    values = ["a", "b", "c"]
    lst = make_list(values)
    assert lst.remove(target) is True
    expected = [v for v in values if v != target]
    assert list(lst) == expected
    assert len(lst) == len(expected)


def test_remove_only_first_occurrence():
    lst = make_list("abab")
    assert lst.remove("a")
    assert list(lst) == ["b", "a", "b"]


def test_remove_tail_then_insert_appends_correctly():
    lst = make_list("abc")
    lst.remove("c")
    lst.insert("d")
    assert list(lst) == ["a", "b", "d"]


def test_remove_single_then_insert():
    lst = make_list("a")
    assert lst.remove("a")
    assert list(lst) == []
    lst.insert("b")
    assert list(lst) == ["b"]
    assert len(lst) == 1


def test_clear_list():
    lst = make_list("abc")
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []
    lst.insert("x")
    assert list(lst) == ["x"]


# ---- Stack ----

def test_stack_lifo_order():
    stack = Stack()
    for c in "abc":
        stack.push(c)
    assert len(stack) == 3
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
    assert len(stack) == 0


def test_stack_iterates_from_top():
    stack = Stack()
    for c in "xyz":
        stack.push(c)
    assert list(stack) == ["z", "y", "x"]
    assert len(stack) == 3


def test_stack_bool():
    stack = Stack()
    assert not stack
    stack.push("a")
    assert stack
    stack.pop()
    assert not stack


def test_stack_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_stack_clear():
    stack = Stack()
    for c in "abc":
        stack.push(c)
    stack.clear()
    assert len(stack) == 0
    assert list(stack) == []
    with pytest.raises(IndexError):
        stack.pop()


# ---- Queue ----

def test_queue_fifo_order():
    queue = Queue()
    for c in "abc":
        queue.enqueue(c)
    assert len(queue) == 3
    assert [queue.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert len(queue) == 0


def test_queue_iterates_front_to_rear():
    queue = Queue()
    for c in "pqr":
        queue.enqueue(c)
    assert list(queue) == ["p", "q", "r"]


def test_queue_dequeue_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_queue_reuse_after_draining():
    queue = Queue()
    queue.enqueue("a")
    assert queue.dequeue() == "a"
    assert not queue
    queue.enqueue("b")
    queue.enqueue("c")
    assert list(queue) == ["b", "c"]
    assert queue


def test_queue_rotation_preserves_contents():
    queue = Queue()
    values = ["a", "b", "c", "d"]
    for v in values:
        queue.enqueue(v)
    for _ in range(len(queue)):
        queue.enqueue(queue.dequeue())
    assert list(queue) == values


def test_queue_clear():
    queue = Queue()
    for c in "abc":
        queue.enqueue(c)
    queue.clear()
    assert len(queue) == 0
    assert list(queue) == []
    queue.enqueue("z")
    assert list(queue) == ["z"]
import pytest

from ftkit.linkedlist import LinkedList, Node


def test_init_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert lst.head is None
    assert list(lst) == []


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node
    assert node.content == 1


def test_push_back_appends_and_sets_prev():
    lst = LinkedList([1])
    first = lst.head
    node = lst.push_back(2)
    assert node.prev is first
    assert first.next is node
    assert lst.last() is node
    assert list(lst) == [1, 2]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.last() is node
    assert lst.head is node


def test_len_counts_nodes():
    lst = LinkedList(range(5))
    lst.push_front(-1)
    lst.push_back(5)
    assert len(lst) == 7
    assert len(lst) == len(list(lst))


def test_last_returns_final_node():
    lst = LinkedList(["p", "q", "r"])
    assert lst.last().content == "r"


def test_links_are_consistent_both_ways():
    lst = LinkedList(range(4))
    lst.push_front(-1)
    nodes = list(lst.nodes())
    for left, right in zip(nodes, nodes[1:]):
        assert left.next is right
        assert right.prev is left
    assert nodes[0].prev is None
    assert nodes[-1].next is None


def test_clear_calls_delete_in_order():
    items = [10, 20, 30]
    lst = LinkedList(items)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None


def test_clear_without_delete_empties():
    lst = LinkedList("abc")
    lst.clear()
    assert list(lst) == []


def test_list_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(3)
    assert list(lst) == [3]
    assert len(lst) == 1


def test_for_each_visits_all():
    seen = []
    lst = LinkedList(["x", "y"])
    lst.for_each(seen.append)
    assert seen == ["x", "y"]


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(lambda v: v * 10, lambda v: None)
    assert list(mapped) == [10, 20, 30]
    assert list(source) == [1, 2, 3]
    assert mapped is not source
    assert len(mapped) == len(source)


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str)) == []


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [101, 102]


def test_node_defaults():
    node = Node("content")
    assert node.next is None
    assert node.prev is None
    assert node.content == "content"
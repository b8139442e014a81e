import pytest

from treasure.linkedlist import LinkedList, Node


def test_append_keeps_order():
    items = LinkedList()
    for word in ["a", "b", "c"]:
        items.append(word)
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_push_front_reverses_order():
    items = LinkedList()
    for word in ["a", "b", "c"]:
        items.push_front(word)
    assert list(items) == ["c", "b", "a"]


def test_constructor_from_iterable():
    items = LinkedList(range(5))
    assert list(items) == list(range(5))
    assert len(items) == 5


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None


def test_last_returns_final_node():
    items = LinkedList(["x", "y"])
    last = items.last()
    assert isinstance(last, Node)
    assert last.content == "y"
    assert last.next is None


def test_last_after_push_front_on_empty():
    items = LinkedList()
    items.push_front("only")
    assert items.last().content == "only"
    items.append("tail")
    assert items.last().content == "tail"
    assert list(items) == ["only", "tail"]


def test_head_links_through_nodes():
    items = LinkedList([1, 2])
    assert items.head.content == 1
    assert items.head.next.content == 2
    assert items.head.next.next is None


def test_clear_calls_delete_for_each_content():
    deleted = []
    items = LinkedList(["a", "b", "c"])
    items.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(items) == 0
    assert items.last() is None


def test_clear_without_delete_empties():
    items = LinkedList([1, 2, 3])
    items.clear()
    assert list(items) == []


def test_for_each_visits_in_order():
    seen = []
    LinkedList([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    items = LinkedList(["ab", "cde"])
    lengths = items.map(len)
    assert list(lengths) == [2, 3]
    assert list(items) == ["ab", "cde"]


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_deletes_partial_result():
    deleted = []

    def convert(value):
        if value == "bad":
            raise ValueError(value)
        return value.upper()

    items = LinkedList(["a", "b", "bad", "c"])
    with pytest.raises(ValueError):
        items.map(convert, deleted.append)
    assert deleted == ["A", "B"]
    assert list(items) == ["a", "b", "bad", "c"]
import pytest

from structkit.doubly_linked_list import DoublyLinkedList

ITEMS = [3, 1, 4, 1, 5, 9]


def test_empty_list_state():
    lst = DoublyLinkedList()
    assert lst.is_empty()
    assert len(lst) == 0
    assert list(lst) == []
    assert list(reversed(lst)) == []
    assert str(lst) == "The list is empty"


@pytest.mark.parametrize("method", ["remove_front", "remove_back"])
def test_remove_from_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(DoublyLinkedList(), method)()


def test_insert_back_and_reverse_iteration():
    lst = DoublyLinkedList()
    for item in ITEMS:
        lst.insert_back(item)
    assert list(lst) == ITEMS
    assert list(reversed(lst)) == list(reversed(ITEMS))
    assert len(lst) == len(ITEMS)


def test_insert_front_reverses_order():
    lst = DoublyLinkedList()
    for item in ITEMS:
        lst.insert_front(item)
    assert list(lst) == list(reversed(ITEMS))
    assert list(reversed(lst)) == ITEMS


def test_remove_front_drains_in_order():
    lst = DoublyLinkedList(ITEMS)
    assert [lst.remove_front() for _ in ITEMS] == ITEMS
    assert lst.is_empty()
    assert list(reversed(lst)) == []


def test_remove_back_drains_in_reverse():
    lst = DoublyLinkedList(ITEMS)
    assert [lst.remove_back() for _ in ITEMS] == list(reversed(ITEMS))
    assert lst.is_empty()
    assert list(lst) == []


def test_mixed_end_operations_keep_links_consistent():
    lst = DoublyLinkedList(ITEMS)
    first = lst.remove_front()
    last = lst.remove_back()
    lst.insert_front(last)
    lst.insert_back(first)
    expected = [last] + ITEMS[1:-1] + [first]
    assert list(lst) == expected
    assert list(reversed(lst)) == list(reversed(expected))


def test_reuse_after_draining():
    lst = DoublyLinkedList(ITEMS)
    while not lst.is_empty():
        lst.remove_front()
    lst.insert_back("a")
    lst.insert_front("b")
    assert list(lst) == ["b", "a"]
    assert list(reversed(lst)) == ["a", "b"]


def test_find_positions_and_missing():
    lst = DoublyLinkedList(ITEMS)
    for item in ITEMS:
        assert lst.find(item) == ITEMS.index(item)
    assert lst.find(42) == -1
    assert DoublyLinkedList().find(0) == -1


@pytest.mark.parametrize("value", sorted(set(ITEMS)))
def test_remove_value(value):
    lst = DoublyLinkedList(ITEMS)
    expected = list(ITEMS)
    expected.remove(value)
    assert lst.remove(value) == value
    assert list(lst) == expected
    assert list(reversed(lst)) == list(reversed(expected))
    assert len(lst) == len(expected)


def test_remove_only_element():
    lst = DoublyLinkedList(["solo"])
    assert lst.remove("solo") == "solo"
    assert lst.is_empty()
    lst.insert_back("next")
    assert list(lst) == ["next"]


def test_remove_missing_raises():
    lst = DoublyLinkedList(ITEMS)
    with pytest.raises(ValueError):
        lst.remove(100)
    assert list(lst) == ITEMS
    with pytest.raises(ValueError):
        DoublyLinkedList().remove(1)


def test_str_labels_front_and_rear():
    assert str(DoublyLinkedList([8])) == "{FRONT}: [ 8 ]"
    parts = str(DoublyLinkedList(ITEMS)).split(" ==> ")
    assert len(parts) == len(ITEMS)
    assert parts[0] == f"{{FRONT}}: [ {ITEMS[0]} ]"
    assert parts[-1] == f"{{REAR}}: [ {ITEMS[-1]} ]"
    assert parts[1:-1] == [f"[ {item} ]" for item in ITEMS[1:-1]]
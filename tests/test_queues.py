import pytest

from litekit.queues import Entry, LinkedList, SimpleQueue, SList, TailQueue


# --- SList -----------------------------------------------------------------

def test_slist_init_preserves_order():
    lst = SList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_slist_empty():
    lst = SList()
    assert lst.is_empty()
    assert lst.first() is None
    assert len(lst) == 0


def test_slist_insert_head_is_lifo():
    lst = SList()
    for value in "abc":
        lst.insert_head(value)
    assert list(lst) == ["c", "b", "a"]
    assert lst.first().value == "c"


def test_slist_insert_after():
    lst = SList(["a", "c"])
    entry = lst.first()
    new = lst.insert_after(entry, "b")
    assert isinstance(new, Entry)
    assert new.value == "b"
    assert list(lst) == ["a", "b", "c"]


def test_slist_remove_head_and_after():
    lst = SList([1, 2, 3, 4])
    assert lst.remove_head() == 1
    first = lst.first()
    assert lst.remove_after(first) == 3
    assert list(lst) == [2, 4]
    assert len(lst) == 2


def test_slist_remove_head_empty_raises():
    with pytest.raises(IndexError):
        SList().remove_head()


def test_slist_remove_after_last_raises():
    lst = SList([1])
    with pytest.raises(IndexError):
        lst.remove_after(lst.first())


def test_slist_remove_arbitrary():
    lst = SList()
    e3 = lst.insert_head(3)
    e2 = lst.insert_head(2)
    lst.insert_head(1)
    assert lst.remove(e2) == 2
    assert list(lst) == [1, 3]
    assert lst.remove(e3) == 3
    assert list(lst) == [1]


def test_slist_foreign_entry_rejected():
    a = SList([1])
    b = SList([2])
    with pytest.raises(ValueError):
        a.insert_after(b.first(), 5)


def test_slist_removed_entry_rejected():
    lst = SList([1, 2])
    entry = lst.first()
    lst.remove(entry)
    with pytest.raises(ValueError):
        lst.remove(entry)


def test_slist_safe_iteration_removal():
    lst = SList()
    entries = [lst.insert_head(v) for v in range(5)]
    for value in lst:
        if value % 2 == 0:
            lst.remove(entries[value])
    assert list(lst) == [3, 1]


# --- LinkedList ------------------------------------------------------------

def test_list_insert_before_and_after():
    lst = LinkedList(["b"])
    b = lst.first()
    lst.insert_before(b, "a")
    lst.insert_after(b, "c")
    assert list(lst) == ["a", "b", "c"]
    assert lst.first().value == "a"


def test_list_prev_links_consistent():
    lst = LinkedList(range(4))
    node = lst.first()
    assert node.prev is None
    while node.next is not None:
        assert node.next.prev is node
        node = node.next


def test_list_remove_head_middle_tail():
    lst = LinkedList()
    e1 = lst.insert_head(1)
    e0 = lst.insert_head(0)
    e2 = lst.insert_after(e1, 2)
    assert lst.remove(e1) == 1
    assert list(lst) == [0, 2]
    assert lst.remove(e0) == 0
    assert lst.remove(e2) == 2
    assert lst.is_empty()
    assert len(lst) == 0


def test_list_replace():
    lst = LinkedList(["x", "y", "z"])
    y = lst.first().next
    new = lst.replace(y, "Y")
    assert list(lst) == ["x", "Y", "z"]
    assert new.prev is lst.first()
    assert new.next.prev is new
    with pytest.raises(ValueError):
        lst.remove(y)


def test_list_replace_head():
    lst = LinkedList([1, 2])
    new = lst.replace(lst.first(), 10)
    assert lst.first() is new
    assert list(lst) == [10, 2]
    assert len(lst) == 2


# --- SimpleQueue -----------------------------------------------------------

def test_simpleq_fifo():
    q = SimpleQueue()
    for value in range(3):
        q.insert_tail(value)
    assert [q.remove_head() for _ in range(3)] == [0, 1, 2]
    assert q.is_empty()


def test_simpleq_tail_after_emptying():
    q = SimpleQueue([1])
    q.remove_head()
    q.insert_tail(2)
    q.insert_tail(3)
    assert list(q) == [2, 3]


def test_simpleq_insert_head_on_empty_sets_tail():
    q = SimpleQueue()
    q.insert_head("a")
    q.insert_tail("b")
    assert list(q) == ["a", "b"]


def test_simpleq_insert_after_last_updates_tail():
    q = SimpleQueue([1, 2])
    last = q.first().next
    q.insert_after(last, 3)
    q.insert_tail(4)
    assert list(q) == [1, 2, 3, 4]


def test_simpleq_remove_after_tail_updates():
    q = SimpleQueue([1, 2])
    assert q.remove_after(q.first()) == 2
    q.insert_tail(5)
    assert list(q) == [1, 5]


def test_simpleq_remove_head_empty_raises():
    with pytest.raises(IndexError):
        SimpleQueue().remove_head()


def test_simpleq_concat():
    a = SimpleQueue([1, 2])
    b = SimpleQueue([3, 4])
    moved = b.first()
    a.concat(b)
    assert list(a) == [1, 2, 3, 4]
    assert len(a) == 4
    assert b.is_empty()
    assert len(b) == 0
    a.insert_after(moved, 35)
    assert list(a) == [1, 2, 3, 35, 4]


def test_simpleq_concat_into_empty_and_from_empty():
    a = SimpleQueue()
    a.concat(SimpleQueue([7]))
    a.concat(SimpleQueue())
    a.insert_tail(8)
    assert list(a) == [7, 8]


def test_simpleq_concat_self_raises():
    q = SimpleQueue([1])
    with pytest.raises(ValueError):
        q.concat(q)


# --- TailQueue -------------------------------------------------------------

def test_tailq_forward_and_reverse():
    q = TailQueue(["a", "b", "c"])
    assert list(q) == ["a", "b", "c"]
    assert list(reversed(q)) == ["c", "b", "a"]
    assert q.first().value == "a"
    assert q.last().value == "c"


def test_tailq_empty():
    q = TailQueue()
    assert q.is_empty()
    assert q.first() is None
    assert q.last() is None
    assert list(reversed(q)) == []


def test_tailq_insert_variants():
    q = TailQueue()
    mid = q.insert_tail(2)
    q.insert_head(0)
    q.insert_before(mid, 1)
    q.insert_after(mid, 3)
    q.insert_tail(4)
    assert list(q) == [0, 1, 2, 3, 4]
    assert list(reversed(q)) == [4, 3, 2, 1, 0]
    assert q.last().value == 4


def test_tailq_remove_last_updates_tail():
    q = TailQueue([1, 2, 3])
    assert q.remove(q.last()) == 3
    assert q.last().value == 2
    q.insert_tail(9)
    assert list(q) == [1, 2, 9]


def test_tailq_replace_tail():
    q = TailQueue([1, 2])
    new = q.replace(q.last(), 20)
    assert q.last() is new
    assert list(reversed(q)) == [20, 1]


def test_tailq_concat():
    a = TailQueue([1])
    b = TailQueue([2, 3])
    a.concat(b)
    assert list(a) == [1, 2, 3]
    assert list(reversed(a)) == [3, 2, 1]
    assert b.is_empty()
    assert a.remove(a.last()) == 3
    assert len(a) == 2


def test_tailq_concat_wrong_type():
    with pytest.raises(TypeError):
        TailQueue().concat(SimpleQueue([1]))


def test_tailq_safe_reverse_removal():
    q = TailQueue(range(4))
    for value in reversed(q):
        if value == 2:
            q.remove(q.first().next.next)
    assert list(q) == [0, 1, 3]
    assert len(q) == 3
"""Linked lists and queues: singly-linked lists, lists, simple and tail queues.

Every container stores its values in :class:`Entry` nodes.  Insert methods
return the new entry, which can later be handed back to position further
inserts or to remove the value again.  Iterating a container yields its
values and tolerates removal of the current entry while iterating.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class Entry:
    """A node of a list or queue, holding one value.

    The ``next`` and ``prev`` links are maintained by the owning container
    and are ``None`` at the ends; ``prev`` is always ``None`` for singly
    linked containers.
    """

    __slots__ = ("value", "next", "prev", "_owner")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: Entry | None = None
        self.prev: Entry | None = None
        self._owner: _Chain | None = None

    def __repr__(self) -> str:
        return f"Entry({self.value!r})"


class _Chain:
    """Behaviour shared by every container: head pointer, size, iteration."""

    def __init__(self) -> None:
        self._first: Entry | None = None
        self._size = 0

    def _new(self, value: Any) -> Entry:
        entry = Entry(value)
        entry._owner = self
        self._size += 1
        return entry

    def _check(self, entry: Entry) -> None:
        if not isinstance(entry, Entry) or entry._owner is not self:
            raise ValueError("entry does not belong to this container")

    def _detach(self, entry: Entry) -> Any:
        entry._owner = None
        entry.next = None
        entry.prev = None
        self._size -= 1
        return entry.value

    def _entries(self) -> Iterator[Entry]:
        node = self._first
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        for entry in self._entries():
            yield entry.value

    def __len__(self) -> int:
        return self._size

    def first(self) -> Entry | None:
        """Return the first entry, or ``None`` if empty."""
        return self._first

    def is_empty(self) -> bool:
        """Return True if the container holds no entries."""
        return self._first is None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class SList(_Chain):
    """A singly-linked list, traversable forwards only."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__()
        tail: Entry | None = None
        for value in items:
            entry = self._new(value)
            if tail is None:
                self._first = entry
            else:
                tail.next = entry
            tail = entry

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()

    def first(self) -> Entry | None:
        """Return the first entry, or ``None`` if empty."""
        return self._first

    def is_empty(self) -> bool:
        """Return True if the list holds no entries."""
        return self._first is None

    def insert_head(self, value: Any) -> Entry:
        """Insert *value* at the head and return its entry."""
        entry = self._new(value)
        entry.next = self._first
        self._first = entry
        return entry

    def insert_after(self, entry: Entry, value: Any) -> Entry:
        """Insert *value* after *entry* and return the new entry."""
        self._check(entry)
        new = self._new(value)
        new.next = entry.next
        entry.next = new
        return new

    def remove_head(self) -> Any:
        """Remove the first entry and return its value."""
        head = self._first
        if head is None:
            raise IndexError("remove_head() from an empty list")
        self._first = head.next
        return self._detach(head)

    def remove_after(self, entry: Entry) -> Any:
        """Remove the entry following *entry* and return its value."""
        self._check(entry)
        victim = entry.next
        if victim is None:
            raise IndexError("no entry after the given one")
        entry.next = victim.next
        return self._detach(victim)

    def remove(self, entry: Entry) -> Any:
        """Remove *entry*, walking the list to find its predecessor."""
        self._check(entry)
        if self._first is entry:
            return self.remove_head()
        current = self._first
        while current.next is not entry:
            current = current.next
        current.next = entry.next
        return self._detach(entry)


class SimpleQueue(_Chain):
    """A singly-linked queue with head and tail pointers."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__()
        self._last: Entry | None = None
        for value in items:
            self.insert_tail(value)

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()

    def first(self) -> Entry | None:
        """Return the first entry, or ``None`` if empty."""
        return self._first

    def is_empty(self) -> bool:
        """Return True if the queue holds no entries."""
        return self._first is None

    def insert_head(self, value: Any) -> Entry:
        """Insert *value* at the head and return its entry."""
        entry = self._new(value)
        entry.next = self._first
        if self._first is None:
            self._last = entry
        self._first = entry
        return entry

    def insert_tail(self, value: Any) -> Entry:
        """Append *value* at the tail and return its entry."""
        entry = self._new(value)
        if self._last is None:
            self._first = entry
        else:
            self._last.next = entry
        self._last = entry
        return entry

    def insert_after(self, entry: Entry, value: Any) -> Entry:
        """Insert *value* after *entry* and return the new entry."""
        self._check(entry)
        new = self._new(value)
        new.next = entry.next
        if new.next is None:
            self._last = new
        entry.next = new
        return new

    def remove_head(self) -> Any:
        """Remove the first entry and return its value."""
        head = self._first
        if head is None:
            raise IndexError("remove_head() from an empty queue")
        self._first = head.next
        if self._first is None:
            self._last = None
        return self._detach(head)

    def remove_after(self, entry: Entry) -> Any:
        """Remove the entry following *entry* and return its value."""
        self._check(entry)
        victim = entry.next
        if victim is None:
            raise IndexError("no entry after the given one")
        entry.next = victim.next
        if entry.next is None:
            self._last = entry
        return self._detach(victim)

    def concat(self, other: SimpleQueue) -> None:
        """Move every entry of *other* to the tail of this queue."""
        if not isinstance(other, SimpleQueue):
            raise TypeError("concat() needs another SimpleQueue")
        if other is self:
            raise ValueError("cannot concatenate a queue with itself")
        if other._first is None:
            return
        for entry in other._entries():
            entry._owner = self
        if self._last is None:
            self._first = other._first
        else:
            self._last.next = other._first
        self._last = other._last
        self._size += other._size
        other._first = other._last = None
        other._size = 0


class _Doubly(_Chain):
    """Doubly-linked chain that also keeps track of its last entry."""

    def __init__(self) -> None:
        super().__init__()
        self._last: Entry | None = None

    def _append(self, value: Any) -> Entry:
        entry = self._new(value)
        entry.prev = self._last
        if self._last is None:
            self._first = entry
        else:
            self._last.next = entry
        self._last = entry
        return entry

    def _link_around(self, new: Entry, prev: Entry | None, nxt: Entry | None) -> None:
        new.prev = prev
        new.next = nxt
        if prev is None:
            self._first = new
        else:
            prev.next = new
        if nxt is None:
            self._last = new
        else:
            nxt.prev = new

    def insert_head(self, value: Any) -> Entry:
        """Insert *value* at the head and return its entry."""
        entry = self._new(value)
        self._link_around(entry, None, self._first)
        return entry

    def insert_after(self, entry: Entry, value: Any) -> Entry:
        """Insert *value* after *entry* and return the new entry."""
        self._check(entry)
        new = self._new(value)
        self._link_around(new, entry, entry.next)
        return new

    def insert_before(self, entry: Entry, value: Any) -> Entry:
        """Insert *value* before *entry* and return the new entry."""
        self._check(entry)
        new = self._new(value)
        self._link_around(new, entry.prev, entry)
        return new

    def remove(self, entry: Entry) -> Any:
        """Remove *entry* and return its value."""
        self._check(entry)
        if entry.prev is None:
            self._first = entry.next
        else:
            entry.prev.next = entry.next
        if entry.next is None:
            self._last = entry.prev
        else:
            entry.next.prev = entry.prev
        return self._detach(entry)

    def replace(self, entry: Entry, value: Any) -> Entry:
        """Put a new entry holding *value* in the place of *entry*."""
        self._check(entry)
        new = self._new(value)
        self._link_around(new, entry.prev, entry.next)
        self._detach(entry)
        return new


class LinkedList(_Doubly):
    """A doubly-linked list with a head pointer, traversed forwards."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__()
        for value in items:
            self._append(value)

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()

    def first(self) -> Entry | None:
        """Return the first entry, or ``None`` if empty."""
        return self._first

    def is_empty(self) -> bool:
        """Return True if the list holds no entries."""
        return self._first is None

    def insert_head(self, value: Any) -> Entry:
        """Insert *value* at the head and return its entry."""
        return super().insert_head(value)

    def insert_after(self, entry: Entry, value: Any) -> Entry:
        """Insert *value* after *entry* and return the new entry."""
        return super().insert_after(entry, value)

    def insert_before(self, entry: Entry, value: Any) -> Entry:
        """Insert *value* before *entry* and return the new entry."""
        return super().insert_before(entry, value)

    def remove(self, entry: Entry) -> Any:
        """Remove *entry* and return its value."""
        return super().remove(entry)

    def replace(self, entry: Entry, value: Any) -> Entry:
        """Put a new entry holding *value* in the place of *entry*."""
        return super().replace(entry, value)


class TailQueue(_Doubly):
    """A doubly-linked queue with head and tail, traversable both ways."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__()
        for value in items:
            self._append(value)

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def __reversed__(self) -> Iterator[Any]:
        node = self._last
        while node is not None:
            preceding = node.prev
            yield node.value
            node = preceding

    def __len__(self) -> int:
        return super().__len__()

    def first(self) -> Entry | None:
        """Return the first entry, or ``None`` if empty."""
        return self._first

    def last(self) -> Entry | None:
        """Return the last entry, or ``None`` if empty."""
        return self._last

    def is_empty(self) -> bool:
        """Return True if the queue holds no entries."""
        return self._first is None

    def insert_head(self, value: Any) -> Entry:
        """Insert *value* at the head and return its entry."""
        return super().insert_head(value)

    def insert_tail(self, value: Any) -> Entry:
        """Append *value* at the tail and return its entry."""
        return self._append(value)

    def insert_after(self, entry: Entry, value: Any) -> Entry:
        """Insert *value* after *entry* and return the new entry."""
        return super().insert_after(entry, value)

    def insert_before(self, entry: Entry, value: Any) -> Entry:
        """Insert *value* before *entry* and return the new entry."""
        return super().insert_before(entry, value)

    def remove(self, entry: Entry) -> Any:
        """Remove *entry* and return its value."""
        return super().remove(entry)

    def replace(self, entry: Entry, value: Any) -> Entry:
        """Put a new entry holding *value* in the place of *entry*."""
        return super().replace(entry, value)

    def concat(self, other: TailQueue) -> None:
        """Move every entry of *other* to the tail of this queue."""
        if not isinstance(other, TailQueue):
            raise TypeError("concat() needs another TailQueue")
        if other is self:
            raise ValueError("cannot concatenate a queue with itself")
        if other._first is None:
            return
        for entry in other._entries():
            entry._owner = self
        other._first.prev = self._last
        if self._last is None:
            self._first = other._first
        else:
            self._last.next = other._first
        self._last = other._last
        self._size += other._size
        other._first = other._last = None
        other._size = 0
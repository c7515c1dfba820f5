"""A red-black tree: a balanced binary search tree with O(log n) operations.

Every path from the root to a leaf holds the same number of black nodes,
and no red node has a red parent, which bounds the height of the tree to
2 log2(n + 1).
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

BLACK = 0
RED = 1


class _Node:
    __slots__ = ("item", "key", "left", "right", "parent", "color")

    def __init__(self, item: Any, key: Any, parent: _Node | None) -> None:
        self.item = item
        self.key = key
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent = parent
        self.color = RED


def _cmp(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def _is_black(node: _Node | None) -> bool:
    return node is None or node.color == BLACK


def _successor(node: _Node) -> _Node | None:
    if node.right is not None:
        node = node.right
        while node.left is not None:
            node = node.left
        return node
    while node.parent is not None and node is node.parent.right:
        node = node.parent
    return node.parent


def _predecessor(node: _Node) -> _Node | None:
    if node.left is not None:
        node = node.left
        while node.right is not None:
            node = node.right
        return node
    while node.parent is not None and node is node.parent.left:
        node = node.parent
    return node.parent


class RBTree:
    """An ordered set of items kept in a red-black tree.

    Items are ordered by ``key(item)``, or by the items themselves when
    *key* is ``None``.  Two items with equal keys count as the same item.
    Iteration tolerates removal of the current item.
    """

    def __init__(self, key: Callable[[Any], Any] | None = None) -> None:
        self._key = key if key is not None else (lambda item: item)
        self._root: _Node | None = None
        self._size = 0

    # -- rotations and rebalancing ---------------------------------------

    def _replace_child(self, old: _Node, new: _Node | None, parent: _Node | None) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, elm: _Node) -> None:
        tmp = elm.right
        elm.right = tmp.left
        if tmp.left is not None:
            tmp.left.parent = elm
        tmp.parent = elm.parent
        self._replace_child(elm, tmp, elm.parent)
        tmp.left = elm
        elm.parent = tmp

    def _rotate_right(self, elm: _Node) -> None:
        tmp = elm.left
        elm.left = tmp.right
        if tmp.right is not None:
            tmp.right.parent = elm
        tmp.parent = elm.parent
        self._replace_child(elm, tmp, elm.parent)
        tmp.right = elm
        elm.parent = tmp

    def _insert_color(self, elm: _Node) -> None:
        while (parent := elm.parent) is not None and parent.color == RED:
            gparent = parent.parent
            if parent is gparent.left:
                uncle = gparent.right
                if uncle is not None and uncle.color == RED:
                    uncle.color = BLACK
                    parent.color, gparent.color = BLACK, RED
                    elm = gparent
                    continue
                if parent.right is elm:
                    self._rotate_left(parent)
                    parent, elm = elm, parent
                parent.color, gparent.color = BLACK, RED
                self._rotate_right(gparent)
            else:
                uncle = gparent.left
                if uncle is not None and uncle.color == RED:
                    uncle.color = BLACK
                    parent.color, gparent.color = BLACK, RED
                    elm = gparent
                    continue
                if parent.left is elm:
                    self._rotate_right(parent)
                    parent, elm = elm, parent
                parent.color, gparent.color = BLACK, RED
                self._rotate_left(gparent)
        self._root.color = BLACK

    def _remove_color(self, parent: _Node | None, elm: _Node | None) -> None:
        while _is_black(elm) and elm is not self._root:
            if parent.left is elm:
                tmp = parent.right
                if tmp.color == RED:
                    tmp.color, parent.color = BLACK, RED
                    self._rotate_left(parent)
                    tmp = parent.right
                if _is_black(tmp.left) and _is_black(tmp.right):
                    tmp.color = RED
                    elm = parent
                    parent = elm.parent
                else:
                    if _is_black(tmp.right):
                        if tmp.left is not None:
                            tmp.left.color = BLACK
                        tmp.color = RED
                        self._rotate_right(tmp)
                        tmp = parent.right
                    tmp.color = parent.color
                    parent.color = BLACK
                    if tmp.right is not None:
                        tmp.right.color = BLACK
                    self._rotate_left(parent)
                    elm = self._root
                    break
            else:
                tmp = parent.left
                if tmp.color == RED:
                    tmp.color, parent.color = BLACK, RED
                    self._rotate_right(parent)
                    tmp = parent.left
                if _is_black(tmp.left) and _is_black(tmp.right):
                    tmp.color = RED
                    elm = parent
                    parent = elm.parent
                else:
                    if _is_black(tmp.left):
                        if tmp.right is not None:
                            tmp.right.color = BLACK
                        tmp.color = RED
                        self._rotate_left(tmp)
                        tmp = parent.left
                    tmp.color = parent.color
                    parent.color = BLACK
                    if tmp.left is not None:
                        tmp.left.color = BLACK
                    self._rotate_right(parent)
                    elm = self._root
                    break
        if elm is not None:
            elm.color = BLACK

    def _unlink(self, old: _Node) -> None:
        if old.left is None or old.right is None:
            child = old.right if old.left is None else old.left
            parent = old.parent
            color = old.color
            if child is not None:
                child.parent = parent
            self._replace_child(old, child, parent)
        else:
            elm = old.right
            while elm.left is not None:
                elm = elm.left
            child = elm.right
            parent = elm.parent
            color = elm.color
            if child is not None:
                child.parent = parent
            self._replace_child(elm, child, parent)
            if elm.parent is old:
                parent = elm
            elm.left, elm.right = old.left, old.right
            elm.parent, elm.color = old.parent, old.color
            self._replace_child(old, elm, old.parent)
            old.left.parent = elm
            if old.right is not None:
                old.right.parent = elm
        if color == BLACK:
            self._remove_color(parent, child)
        old.left = old.right = old.parent = None

    # -- lookups ---------------------------------------------------------

    def _find_node(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            comp = _cmp(key, node.key)
            if comp < 0:
                node = node.left
            elif comp > 0:
                node = node.right
            else:
                return node
        return None

    def _minmax(self, direction: int) -> _Node | None:
        node, parent = self._root, None
        while node is not None:
            parent = node
            node = node.left if direction < 0 else node.right
        return parent

    # -- public interface ------------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        node = self._minmax(-1)
        while node is not None:
            following = _successor(node)
            yield node.item
            node = following

    def __reversed__(self) -> Iterator[Any]:
        node = self._minmax(1)
        while node is not None:
            preceding = _predecessor(node)
            yield node.item
            node = preceding

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def insert(self, item: Any) -> Any:
        """Insert *item*; return ``None``, or the stored item with an equal key."""
        key = self._key(item)
        parent: _Node | None = None
        comp = 0
        node = self._root
        while node is not None:
            parent = node
            comp = _cmp(key, node.key)
            if comp < 0:
                node = node.left
            elif comp > 0:
                node = node.right
            else:
                return node.item
        new = _Node(item, key, parent)
        if parent is None:
            self._root = new
        elif comp < 0:
            parent.left = new
        else:
            parent.right = new
        self._insert_color(new)
        self._size += 1
        return None

    def remove(self, item: Any) -> Any:
        """Remove the item whose key equals that of *item* and return it.

        Returns ``None`` if there is no such item.
        """
        node = self._find_node(self._key(item))
        if node is None:
            return None
        self._unlink(node)
        self._size -= 1
        return node.item

    def find(self, item: Any) -> Any:
        """Return the stored item whose key equals that of *item*, or ``None``."""
        node = self._find_node(self._key(item))
        return None if node is None else node.item

    def nfind(self, item: Any) -> Any:
        """Return the first item whose key is greater than or equal to *item*'s."""
        key = self._key(item)
        node = self._root
        result: _Node | None = None
        while node is not None:
            comp = _cmp(key, node.key)
            if comp < 0:
                result = node
                node = node.left
            elif comp > 0:
                node = node.right
            else:
                return node.item
        return None if result is None else result.item

    def next(self, item: Any) -> Any:
        """Return the item following *item*, or ``None`` at the end.

        Raises KeyError if *item* is not in the tree.
        """
        node = self._find_node(self._key(item))
        if node is None:
            raise KeyError(item)
        following = _successor(node)
        return None if following is None else following.item

    def prev(self, item: Any) -> Any:
        """Return the item preceding *item*, or ``None`` at the start.

        Raises KeyError if *item* is not in the tree.
        """
        node = self._find_node(self._key(item))
        if node is None:
            raise KeyError(item)
        preceding = _predecessor(node)
        return None if preceding is None else preceding.item

    def min(self) -> Any:
        """Return the smallest item, or ``None`` if the tree is empty."""
        node = self._minmax(-1)
        return None if node is None else node.item

    def max(self) -> Any:
        """Return the largest item, or ``None`` if the tree is empty."""
        node = self._minmax(1)
        return None if node is None else node.item

    def __repr__(self) -> str:
        return f"RBTree({list(self)!r})"
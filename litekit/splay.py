"""A self-organizing splay tree.

Every lookup moves the requested item, or the one closest to it, to the
root of the tree, so repeated access to the same items gets cheaper.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator


class _Node:
    __slots__ = ("item", "key", "left", "right")

    def __init__(self, item: Any, key: Any) -> None:
        self.item = item
        self.key = key
        self.left: _Node | None = None
        self.right: _Node | None = None


def _cmp(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class SplayTree:
    """An ordered set of items kept in a splay tree.

    Items are ordered by ``key(item)``, or by the items themselves when
    *key* is ``None``.  Two items with equal keys count as the same item.
    """

    def __init__(self, key: Callable[[Any], Any] | None = None) -> None:
        self._key = key if key is not None else (lambda item: item)
        self._root: _Node | None = None
        self._size = 0

    def _splay(self, key: Any) -> None:
        """Move the node whose key is closest to *key* to the root."""
        root = self._root
        if root is None:
            return
        header = _Node(None, None)
        left = right = header

        while True:
            comp = _cmp(key, root.key)
            if comp < 0:
                tmp = root.left
                if tmp is None:
                    break
                if _cmp(key, tmp.key) < 0:
                    root.left = tmp.right
                    tmp.right = root
                    root = tmp
                    if root.left is None:
                        break
                right.left = root
                right = root
                root = root.left
            elif comp > 0:
                tmp = root.right
                if tmp is None:
                    break
                if _cmp(key, tmp.key) > 0:
                    root.right = tmp.left
                    tmp.left = root
                    root = tmp
                    if root.right is None:
                        break
                left.right = root
                left = root
                root = root.right
            else:
                break

        left.right = root.left
        right.left = root.right
        root.left = header.right
        root.right = header.left
        self._root = root

    def _splay_minmax(self, direction: int) -> None:
        """Move the smallest (*direction* < 0) or largest node to the root."""
        root = self._root
        if root is None:
            return
        header = _Node(None, None)
        left = right = header

        while True:
            if direction < 0:
                tmp = root.left
                if tmp is None:
                    break
                root.left = tmp.right
                tmp.right = root
                root = tmp
                if root.left is None:
                    break
                right.left = root
                right = root
                root = root.left
            else:
                tmp = root.right
                if tmp is None:
                    break
                root.right = tmp.left
                tmp.left = root
                root = tmp
                if root.right is None:
                    break
                left.right = root
                left = root
                root = root.right

        left.right = root.left
        right.left = root.right
        root.left = header.right
        root.right = header.left
        self._root = root

    def __iter__(self) -> Iterator[Any]:
        items: list[Any] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            items.append(node.item)
            node = node.right
        return iter(items)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def insert(self, item: Any) -> Any:
        """Insert *item*; return ``None``, or the stored item with an equal key."""
        key = self._key(item)
        node = _Node(item, key)
        if self._root is not None:
            self._splay(key)
            root = self._root
            comp = _cmp(key, root.key)
            if comp < 0:
                node.left = root.left
                node.right = root
                root.left = None
            elif comp > 0:
                node.right = root.right
                node.left = root
                root.right = None
            else:
                return root.item
        self._root = node
        self._size += 1
        return None

    def remove(self, item: Any) -> Any:
        """Remove the item whose key equals that of *item* and return it.

        Returns ``None`` if there is no such item.
        """
        if self._root is None:
            return None
        key = self._key(item)
        self._splay(key)
        root = self._root
        if _cmp(key, root.key) != 0:
            return None
        if root.left is None:
            self._root = root.right
        else:
            tmp = root.right
            self._root = root.left
            self._splay(key)
            self._root.right = tmp
        self._size -= 1
        return root.item

    def find(self, item: Any) -> Any:
        """Return the stored item whose key equals that of *item*, or ``None``."""
        if self._root is None:
            return None
        key = self._key(item)
        self._splay(key)
        if _cmp(key, self._root.key) == 0:
            return self._root.item
        return None

    def next(self, item: Any) -> Any:
        """Return the item following *item* in order, or ``None`` at the end.

        Raises KeyError if *item* is not in the tree.
        """
        key = self._key(item)
        if self._root is not None:
            self._splay(key)
        if self._root is None or _cmp(key, self._root.key) != 0:
            raise KeyError(item)
        node = self._root.right
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.item

    def min(self) -> Any:
        """Return the smallest item, or ``None`` if the tree is empty."""
        if self._root is None:
            return None
        self._splay_minmax(-1)
        return self._root.item

    def max(self) -> Any:
        """Return the largest item, or ``None`` if the tree is empty."""
        if self._root is None:
            return None
        self._splay_minmax(1)
        return self._root.item
from typing import TypeVar, Generic, List, Iterator, Optional, Tuple

T = TypeVar('T')


class Node(Generic[T]):
    def __init__(self, element: T) -> None:
        self.element: T = element
        self.left: Optional['Node[T]'] = None
        self.right: Optional['Node[T]'] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"Node({self.element!r})"


class InOrderIterator(Generic[T]):
    """Lazy in-order walk over an OrderedTree.

    The stack holds borrowed nodes of the live tree, so the iterator is
    invalidated by any structural change made after it was created.
    """

    def __init__(self, tree: 'OrderedTree[T]') -> None:
        self._tree = tree
        self._version = tree._version
        self._stack: List[Node[T]] = []
        self._push_left(tree._root)

    def _push_left(self, node: Optional[Node[T]]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def has_next(self) -> bool:
        return len(self._stack) > 0

    def next(self) -> T:
        if self._version != self._tree._version:
            raise RuntimeError("tree changed during iteration")
        if not self._stack:
            raise StopIteration("iterator exhausted")
        node = self._stack.pop()
        self._push_left(node.right)
        return node.element

    def __iter__(self) -> 'InOrderIterator[T]':
        return self

    def __next__(self) -> T:
        return self.next()


class OrderedTree(Generic[T]):
    """Unbalanced binary search tree used as an ordered dictionary.

    size() reports how many times insert() was called. Duplicate inserts
    still count and remove() never decrements it, so it is an operation
    counter rather than the number of distinct elements; use len(list(tree))
    for the latter.
    """

    def __init__(self) -> None:
        self._root: Optional[Node[T]] = None
        self._size: int = 0
        self._version: int = 0

    @property
    def root(self) -> Optional[Node[T]]:
        return self._root

    def insert(self, value: T) -> None:
        self._size += 1
        if self._root is None:
            self._root = Node(value)
            self._version += 1
            return

        node = self._root
        while True:
            if value < node.element:
                if node.left is None:
                    node.left = Node(value)
                    self._version += 1
                    return
                node = node.left
            elif value > node.element:
                if node.right is None:
                    node.right = Node(value)
                    self._version += 1
                    return
                node = node.right
            else:
                return

    def remove(self, value: T) -> None:
        parent, node = self._find_with_parent(self._root, None, value)
        if node is None:
            return

        # the physically deleted node always has at most one child
        if node.left is not None and node.right is not None:
            successor = self.min_value(node.right)
            node.element = successor
            parent, node = self._find_with_parent(node.right, node, successor)
            assert node is not None

        replacement = node.left if node.left is not None else node.right
        self._replace_child(parent, node, replacement)
        self._version += 1

    def search(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if value < node.element:
                node = node.left
            elif value > node.element:
                node = node.right
            else:
                return True
        return False

    def contains(self, value: T) -> bool:
        return self.search(value)

    def min_value(self, node: Optional[Node[T]]) -> T:
        assert node is not None, "min_value requires a non-empty subtree"
        while node.left is not None:
            node = node.left
        return node.element

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0
        self._version += 1

    def height(self) -> int:
        if self._root is None:
            return 0
        levels = 0
        frontier: List[Node[T]] = [self._root]
        while frontier:
            levels += 1
            next_level: List[Node[T]] = []
            for node in frontier:
                if node.left is not None:
                    next_level.append(node.left)
                if node.right is not None:
                    next_level.append(node.right)
            frontier = next_level
        return levels

    def iterator(self) -> InOrderIterator[T]:
        return InOrderIterator(self)

    def _find_with_parent(self, node: Optional[Node[T]], parent: Optional[Node[T]],
                          value: T) -> Tuple[Optional[Node[T]], Optional[Node[T]]]:
        while node is not None:
            if value < node.element:
                parent, node = node, node.left
            elif value > node.element:
                parent, node = node, node.right
            else:
                return parent, node
        return parent, None

    def _replace_child(self, parent: Optional[Node[T]], child: Node[T],
                       replacement: Optional[Node[T]]) -> None:
        if parent is None:
            self._root = replacement
        elif parent.left is child:
            parent.left = replacement
        else:
            parent.right = replacement

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.search(value)

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)})"

    def __str__(self) -> str:
        return f"OrderedTree(size={self._size})"

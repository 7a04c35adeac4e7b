from typing import TypeVar, List, Optional

from ordered_tree import Node, OrderedTree

T = TypeVar('T')


class BalancedNode(Node[T]):
    def __init__(self, element: T) -> None:
        super().__init__(element)
        self.height: int = 1


def _height(node: Optional[Node[T]]) -> int:
    return 0 if node is None else node.height


def _skew(node: Node[T]) -> int:
    return _height(node.left) - _height(node.right)


class BalancedTree(OrderedTree[T]):
    """AVL variant of OrderedTree used as the balanced side of the benchmark.

    Search, iteration and clearing are inherited. Insert and remove record
    the path they walk and retrace it bottom-up, rotating any node whose
    children differ in height by more than one. Unlike OrderedTree, size()
    counts distinct elements.
    """

    def insert(self, value: T) -> None:
        path: List[BalancedNode[T]] = []
        node = self._root
        while node is not None:
            path.append(node)
            if value < node.element:
                node = node.left
            elif value > node.element:
                node = node.right
            else:
                return

        leaf = BalancedNode(value)
        if not path:
            self._root = leaf
        elif value < path[-1].element:
            path[-1].left = leaf
        else:
            path[-1].right = leaf
        self._size += 1
        self._version += 1
        self._retrace(path)

    def remove(self, value: T) -> None:
        path: List[BalancedNode[T]] = []
        node = self._root
        while node is not None and node.element != value:
            path.append(node)
            node = node.left if value < node.element else node.right
        if node is None:
            return

        if node.left is not None and node.right is not None:
            # unlink the in-order successor instead, after copying it up
            path.append(node)
            successor = node.right
            while successor.left is not None:
                path.append(successor)
                successor = successor.left
            node.element = successor.element
            node = successor

        replacement = node.left if node.left is not None else node.right
        self._replace_child(path[-1] if path else None, node, replacement)
        self._size -= 1
        self._version += 1
        self._retrace(path)

    def height(self) -> int:
        return _height(self._root)

    def is_balanced(self) -> bool:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if abs(_skew(node)) > 1:
                return False
            if node.height != 1 + max(_height(node.left), _height(node.right)):
                return False
            stack.extend(child for child in (node.left, node.right) if child is not None)
        return True

    def _retrace(self, path: List[BalancedNode[T]]) -> None:
        for depth in range(len(path) - 1, -1, -1):
            node = path[depth]
            subtree = self._rebalance(node)
            if subtree is not node:
                self._replace_child(path[depth - 1] if depth > 0 else None, node, subtree)

    def _rebalance(self, node: BalancedNode[T]) -> BalancedNode[T]:
        self._refresh(node)
        skew = _skew(node)
        if skew > 1:
            if _skew(node.left) < 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        if skew < -1:
            if _skew(node.right) > 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)
        return node

    def _rotate_left(self, node: BalancedNode[T]) -> BalancedNode[T]:
        heavy = node.right
        node.right, heavy.left = heavy.left, node
        self._refresh(node)
        self._refresh(heavy)
        return heavy

    def _rotate_right(self, node: BalancedNode[T]) -> BalancedNode[T]:
        heavy = node.left
        node.left, heavy.right = heavy.right, node
        self._refresh(node)
        self._refresh(heavy)
        return heavy

    @staticmethod
    def _refresh(node: BalancedNode[T]) -> None:
        node.height = 1 + max(_height(node.left), _height(node.right))

    def __str__(self) -> str:
        return f"BalancedTree(size={self._size}, height={self.height()})"

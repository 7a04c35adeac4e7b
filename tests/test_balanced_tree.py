import sys
import os
import math
import random
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from balanced_tree import BalancedTree
from ordered_tree import OrderedTree, InOrderIterator


class TestBalancedTreeConstruction(unittest.TestCase):
    def test_new_tree_is_empty(self):
        tree: BalancedTree[int] = BalancedTree()
        self.assertEqual(tree.size(), 0)
        self.assertTrue(tree.is_empty())
        self.assertEqual(tree.height(), 0)
        self.assertEqual(list(tree), [])

    def test_search_and_remove_on_empty(self):
        tree: BalancedTree[int] = BalancedTree()
        self.assertFalse(tree.search(1))
        tree.remove(1)
        self.assertTrue(tree.is_empty())


class TestBalancedTreeRotations(unittest.TestCase):
    def _check(self, values):
        tree: BalancedTree[int] = BalancedTree()
        for v in values:
            tree.insert(v)
        self.assertTrue(tree.is_balanced())
        self.assertEqual(list(tree), [10, 20, 30])
        self.assertEqual(tree.height(), 2)

    def test_ll_imbalance_triggers_right_rotation(self):
        self._check([30, 20, 10])

    def test_rr_imbalance_triggers_left_rotation(self):
        self._check([10, 20, 30])

    def test_lr_imbalance_triggers_left_right_rotation(self):
        self._check([30, 10, 20])

    def test_rl_imbalance_triggers_right_left_rotation(self):
        self._check([10, 30, 20])


class TestBalancedTreeOperations(unittest.TestCase):
    def test_duplicate_insert_is_no_op(self):
        tree: BalancedTree[int] = BalancedTree()
        tree.insert(10)
        tree.insert(10)
        self.assertEqual(tree.size(), 1)

    def test_search_and_contains_agree(self):
        tree: BalancedTree[int] = BalancedTree()
        for v in [50, 30, 70]:
            tree.insert(v)
        for v in [30, 50, 70, 40]:
            self.assertEqual(tree.search(v), tree.contains(v))
            self.assertEqual(tree.search(v), v in tree)

    def test_remove_node_with_two_children(self):
        tree: BalancedTree[int] = BalancedTree()
        for v in [5, 3, 8, 1, 4, 7, 9]:
            tree.insert(v)
        tree.remove(5)
        self.assertEqual(list(tree), [1, 3, 4, 7, 8, 9])
        self.assertEqual(tree.size(), 6)
        self.assertTrue(tree.is_balanced())

    def test_remove_nonexistent_is_no_op(self):
        tree: BalancedTree[int] = BalancedTree()
        tree.insert(5)
        tree.remove(6)
        self.assertEqual(tree.size(), 1)

    def test_remove_triggers_rebalancing(self):
        tree: BalancedTree[int] = BalancedTree()
        for v in [50, 30, 70, 20, 40, 60, 80, 10]:
            tree.insert(v)
        tree.remove(60)
        tree.remove(70)
        tree.remove(80)
        self.assertTrue(tree.is_balanced())
        self.assertEqual(list(tree), [10, 20, 30, 40, 50])

    def test_clear(self):
        tree: BalancedTree[int] = BalancedTree()
        for v in range(10):
            tree.insert(v)
        tree.clear()
        self.assertTrue(tree.is_empty())
        self.assertEqual(tree.size(), 0)

    def test_sorted_insert_stays_logarithmic(self):
        tree: BalancedTree[int] = BalancedTree()
        n = 1000
        for i in range(n):
            tree.insert(i)
        self.assertTrue(tree.is_balanced())
        self.assertLessEqual(tree.height(), int(1.45 * math.log2(n + 2)))

    def test_iterator_invalidated_by_insert(self):
        tree: BalancedTree[int] = BalancedTree()
        tree.insert(1)
        it = iter(tree)
        tree.insert(2)
        with self.assertRaises(RuntimeError):
            next(it)


class TestBalancedTreeShape(unittest.TestCase):
    def test_is_an_ordered_tree(self):
        tree: BalancedTree[int] = BalancedTree()
        self.assertIsInstance(tree, OrderedTree)
        self.assertIsInstance(iter(tree), InOrderIterator)
        self.assertEqual(repr(tree), "BalancedTree([])")

    def test_root_follows_rotations(self):
        tree: BalancedTree[int] = BalancedTree()
        for v in [1, 2, 3, 4, 5]:
            tree.insert(v)
        self.assertEqual(tree.root.element, 2)
        self.assertEqual(tree.root.right.element, 4)
        self.assertEqual(tree.root.height, 3)
        self.assertEqual(str(tree), "BalancedTree(size=5, height=3)")

    def test_remove_deep_successor_keeps_heights(self):
        tree: BalancedTree[int] = BalancedTree()
        for v in [50, 30, 80, 20, 40, 60, 90, 70]:
            tree.insert(v)
        tree.remove(50)
        self.assertEqual(tree.root.element, 60)
        self.assertEqual(list(tree), [20, 30, 40, 60, 70, 80, 90])
        self.assertTrue(tree.is_balanced())

    def test_random_operations_stay_balanced(self):
        rng = random.Random(99)
        tree: BalancedTree[int] = BalancedTree()
        expected = set()
        for _ in range(2000):
            v = rng.randrange(300)
            if rng.random() < 0.6:
                tree.insert(v)
                expected.add(v)
            else:
                tree.remove(v)
                expected.discard(v)
            self.assertTrue(tree.is_balanced())
        self.assertEqual(list(tree), sorted(expected))
        self.assertEqual(tree.size(), len(expected))


class TestInterchangeability(unittest.TestCase):
    def test_same_contract_same_contents(self):
        values = [41, 7, 93, 12, 65, 3, 58, 27]
        trees = [OrderedTree(), BalancedTree()]
        for tree in trees:
            for v in values:
                tree.insert(v)
            tree.remove(12)
            tree.remove(1000)
        self.assertEqual(list(trees[0]), list(trees[1]))
        for v in range(100):
            self.assertEqual(trees[0].search(v), trees[1].search(v))

    def test_balanced_is_shorter_on_sorted_input(self):
        bst: OrderedTree[int] = OrderedTree()
        avl: BalancedTree[int] = BalancedTree()
        for i in range(64):
            bst.insert(i)
            avl.insert(i)
        self.assertEqual(bst.height(), 64)
        self.assertEqual(avl.height(), 7)


if __name__ == "__main__":
    unittest.main()

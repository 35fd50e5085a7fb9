"""Tests for structures/binary_tree.py"""

from structures import BinaryNode, TraversalOrder, level_order, traverse


def sample_tree() -> BinaryNode[str]:
    """
    Tree structure:
          A
         / \\
        B   C
       / \\   \\
      D   E   F
    """
    return BinaryNode(
        "A",
        BinaryNode("B", BinaryNode("D"), BinaryNode("E")),
        BinaryNode("C", None, BinaryNode("F")),
    )


class TestTraverse:
    def test_none_root(self):
        for order in TraversalOrder:
            assert traverse(None, order) == ()
        assert level_order(None) == ()

    def test_single_node(self):
        single = BinaryNode("A")
        for order in TraversalOrder:
            assert traverse(single, order) == ("A",)

    def test_preorder(self):
        assert traverse(sample_tree(), TraversalOrder.PREORDER) == tuple("ABDECF")

    def test_inorder(self):
        assert traverse(sample_tree(), TraversalOrder.INORDER) == tuple("DBEACF")

    def test_postorder(self):
        assert traverse(sample_tree(), TraversalOrder.POSTORDER) == tuple("DEBFCA")

    def test_inorder_of_search_tree_is_sorted(self):
        root = BinaryNode(
            5,
            BinaryNode(3, BinaryNode(1), BinaryNode(4)),
            BinaryNode(8, BinaryNode(7)),
        )
        assert traverse(root, TraversalOrder.INORDER) == (1, 3, 4, 5, 7, 8)

    def test_deep_left_spine(self):
        """Iterative traversals handle trees deeper than the recursion limit."""
        root = BinaryNode(0)
        for value in range(1, 5000):
            root = BinaryNode(value, root)
        assert traverse(root, TraversalOrder.INORDER) == tuple(range(5000))
        assert traverse(root, TraversalOrder.PREORDER) == tuple(range(4999, -1, -1))
        assert traverse(root, TraversalOrder.POSTORDER) == tuple(range(5000))


class TestLevelOrder:
    def test_levels(self):
        assert level_order(sample_tree()) == (("A",), ("B", "C"), ("D", "E", "F"))

"""
Binary tree traversals selected by an enumerated order.

Traversals:
    traverse(root, order)  - Depth-first values in PREORDER, INORDER or POSTORDER
    level_order(root)      - Values grouped level by level, root first

All traversals use explicit stacks or queues, so tree height is not
bounded by the interpreter recursion limit.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class TraversalOrder(Enum):
    """Position of a node's own value relative to its subtrees."""

    PREORDER = "preorder"
    INORDER = "inorder"
    POSTORDER = "postorder"


@dataclass(frozen=True)
class BinaryNode(Generic[T]):
    """Immutable binary tree node."""

    value: T
    left: "BinaryNode[T] | None" = None
    right: "BinaryNode[T] | None" = None

    def children(self) -> "tuple[BinaryNode[T], ...]":
        return tuple(child for child in (self.left, self.right) if child is not None)


def _preorder(root: BinaryNode[T]) -> list[T]:
    values: list[T] = []
    stack = [root]
    while stack:
        current = stack.pop()
        values.append(current.value)
        stack.extend(reversed(current.children()))
    return values


def _inorder(root: BinaryNode[T]) -> list[T]:
    values: list[T] = []
    stack: list[BinaryNode[T]] = []
    current: BinaryNode[T] | None = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        values.append(current.value)
        current = current.right
    return values


def _postorder(root: BinaryNode[T]) -> list[T]:
    values: list[T] = []
    stack: list[tuple[BinaryNode[T], bool]] = [(root, False)]
    while stack:
        current, visited = stack.pop()
        if visited:
            values.append(current.value)
        else:
            stack.append((current, True))
            for child in reversed(current.children()):
                stack.append((child, False))
    return values


def traverse(root: BinaryNode[T] | None, order: TraversalOrder) -> tuple[T, ...]:
    """Returns the tree's values in the requested depth-first order."""
    if root is None:
        return ()
    match order:
        case TraversalOrder.PREORDER:
            return tuple(_preorder(root))
        case TraversalOrder.INORDER:
            return tuple(_inorder(root))
        case TraversalOrder.POSTORDER:
            return tuple(_postorder(root))
        case _:
            raise TypeError(f"Unknown traversal order: {order!r}")


def level_order(root: BinaryNode[T] | None) -> tuple[tuple[T, ...], ...]:
    """Yields values level by level, root first."""
    if root is None:
        return ()
    levels: list[tuple[T, ...]] = []
    queue = deque([root])
    while queue:
        level = [queue.popleft() for _ in range(len(queue))]
        levels.append(tuple(node.value for node in level))
        for node in level:
            queue.extend(node.children())
    return tuple(levels)


__all__ = [
    "TraversalOrder",
    "BinaryNode",
    "traverse",
    "level_order",
]

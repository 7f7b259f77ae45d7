"""Small data-structure and geometry helpers plus a demo entry point."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, TypeVar

T = TypeVar("T")

PI_APPROX = 3.14


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _walk_inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in in-order (left, node, right)."""
    return list(_walk_inorder(root))


def swap(a: T, b: T) -> tuple[T, T]:
    """Return the two values in exchanged order."""
    return b, a


def reverse_list(values: Iterable[T]) -> list[T]:
    """Return a new list with the elements in reverse order."""
    return list(values)[::-1]


def sort_by_magnitude(values: Iterable[int]) -> list[int]:
    """Return the values sorted by absolute value."""
    return sorted(values, key=abs)


def sum_and_max(values: Sequence[int]) -> tuple[int, Optional[int]]:
    """Return the sum of the values and the largest one (None when empty)."""
    return sum(values), max(values, default=None)


@dataclass(frozen=True)
class Point:
    """A point (or vector) in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def distance(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g}"


class Shape(ABC):
    """A plane figure with an area."""

    @abstractmethod
    def area(self) -> float:
        """Return the area of the figure."""


@dataclass(frozen=True)
class Circle(Shape):
    """A circle given by its radius."""

    radius: float

    def area(self) -> float:
        return PI_APPROX * self.radius * self.radius


@dataclass(frozen=True)
class Rectangle(Shape):
    """An axis-aligned rectangle given by width and height."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def build_demo_tree() -> TreeNode:
    """Build the tree 1 -> right 2 -> left 3."""
    return TreeNode(1, right=TreeNode(2, left=TreeNode(3)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the in-order traversal of the demo tree."""
    values = inorder_traversal(build_demo_tree())
    print(" ".join(str(v) for v in values))
    return 0
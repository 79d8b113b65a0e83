"""Header tree nodes and the traversal protocol the matrix generator relies on."""

from __future__ import annotations

from typing import Callable, Protocol

from pydantic import BaseModel, Field

from headermatrix.schemas import HeaderNodeData


class HeaderTree(Protocol):
    """Anything that exposes node data and a pre-order walk over its subtree."""

    @property
    def data(self) -> HeaderNodeData: ...

    def walk_down(self, callback: Callable[[HeaderTree], bool | None]) -> None: ...


class TreeNode(BaseModel):
    """A hierarchical header node."""

    data: HeaderNodeData
    children: list["TreeNode"] = Field(default_factory=list)

    def add_child(self, node: TreeNode) -> TreeNode:
        self.children.append(node)
        return node

    def is_leaf(self) -> bool:
        return not self.children

    def walk_down(self, callback: Callable[[TreeNode], bool | None]) -> None:
        """Visit the subtree depth-first, parent before children.

        Siblings are visited in declaration order. Returning ``False`` from the
        callback stops the walk.
        """
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            if callback(node) is False:
                return
            stack.extend(reversed(node.children))

"""Compiler state kept while traversing a document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gnostic.compiler.nodes import Node


@dataclass
class Context:
    """The position of the compiler in a document, linked to its parent."""

    name: str
    node: Node | None = None
    parent: Context | None = None
    extension_handlers: list[Any] | None = None

    def description(self) -> str:
        """Return the dotted path of names from the root to this context."""
        if self.parent is not None:
            return f"{self.parent.description()}.{self.name}"
        return self.name


def new_context_with_extensions(name, node, parent, extension_handlers) -> Context:
    """Create a context that carries the given extension handlers."""
    return Context(name=name, node=node, parent=parent, extension_handlers=extension_handlers)


def new_context(name, node, parent) -> Context:
    """Create a context that inherits extension handlers from its parent.

    A root context (no parent) records no node and no handlers.
    """
    if parent is not None:
        return Context(
            name=name,
            node=node,
            parent=parent,
            extension_handlers=parent.extension_handlers,
        )
    return Context(name=name, parent=None, extension_handlers=None)
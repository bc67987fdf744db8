"""Visitor base class for walking message trees.

Subclasses define visit_<NodeClass> methods (PascalCase suffix, as in the
stdlib ast.NodeVisitor) for the node types they care about; everything
else falls through to generic_visit, which descends into child nodes in
source order. A message tree has three kinds of edges:

    Message.elements -> Text | PoundSign | placeholder
    PluralPlaceholder.cases / SelectPlaceholder.cases -> Case
    Case.message -> Message

ASTVisitor[T] is generic over the visit return type (default ASTNode).

Python 3.13+.
"""

from collections.abc import Callable, Iterator
from dataclasses import fields, is_dataclass
from typing import ClassVar

from icumsgparse.constants import MAX_TRAVERSAL_DEPTH
from icumsgparse.core.depth_guard import DepthGuard

from .ast import ASTNode

__all__ = ["ASTVisitor"]


class ASTVisitor[T = ASTNode]:
    """Dispatching tree walker with a depth limit.

    The name -> method table is built once per subclass; bound methods are
    cached per instance by node type on first dispatch.

    Example:
        >>> class CountPlaceholders(ASTVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_SimplePlaceholder(self, node):
        ...         self.count += 1
        ...         return node
        ...
        >>> counter = CountPlaceholders()
        >>> _ = counter.visit(parse("{a} and {b}"))
        >>> counter.count
        2
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    _class_visit_methods: ClassVar[dict[str, str]] = {}

    # Dataclass field names per node class, shared by all visitors.
    _field_names: ClassVar[dict[type, tuple[str, ...]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {
            name.removeprefix("visit_"): name
            for name in dir(cls)
            if name.startswith("visit_")
        }

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Set up depth tracking.

        Subclasses overriding __init__ must call super().__init__().

        Args:
            max_depth: Tree levels allowed (default: MAX_TRAVERSAL_DEPTH,
                       enough for any tree the default parser builds)
        """
        self._depth_guard = DepthGuard(
            max_depth=max_depth if max_depth is not None else MAX_TRAVERSAL_DEPTH
        )
        self._instance_dispatch_cache: dict[type, Callable[[ASTNode], T]] = {}

    @property
    def depth(self) -> int:
        """Tree levels currently entered."""
        return self._depth_guard.depth

    def visit(self, node: ASTNode) -> T:
        """Dispatch node to visit_<NodeClass> or generic_visit."""
        handler = self._instance_dispatch_cache.get(type(node))
        if handler is None:
            method_name = self._class_visit_methods.get(type(node).__name__)
            handler = getattr(self, method_name) if method_name else self.generic_visit
            self._instance_dispatch_cache[type(node)] = handler
        return handler(node)

    def generic_visit(self, node: ASTNode) -> T:
        """Visit every child of node, one tree level deeper.

        Returns:
            node itself

        Raises:
            DepthLimitExceededError: Tree deeper than max_depth
        """
        with self._depth_guard:
            for child in self._iter_children(node):
                self.visit(child)
        return node  # type: ignore[return-value]  # T defaults to ASTNode

    @staticmethod
    def _iter_children(node: ASTNode) -> Iterator[ASTNode]:
        names = ASTVisitor._field_names.get(type(node))
        if names is None:
            names = tuple(f.name for f in fields(node))
            ASTVisitor._field_names[type(node)] = names
        for name in names:
            value = getattr(node, name)
            # ids, types, styles, offsets and PluralKind are scalars
            if isinstance(value, tuple):
                yield from (item for item in value if is_dataclass(item))
            elif is_dataclass(value):
                yield value  # type: ignore[misc]

"""Type expression model.

Recursive, immutable representation of a parsed Swift type string.
These are pure data containers; parsing lives in ``type_parser``.

Four shapes exist:

- ``SimpleType``    ``String``, ``Edge.Set``, ``some View``
- ``GenericType``   ``Array<String>``, ``Dictionary<String, Int>``
- ``OptionalType``  ``CGFloat?``
- ``FunctionType``  ``@escaping (String) -> Bool``

Every derived accessor is a pure function of the tree, and ``raw_type``
renders text that parses back to an equal tree.
"""

from dataclasses import dataclass, field, replace
from typing import Iterator, Optional, Tuple


class TypeExpression:
    """Base for all type expression shapes.

    Accessors answer "not applicable" questions with neutral values
    (empty tuples, False, None) so callers never need isinstance checks.
    """

    @property
    def raw_type(self) -> str:
        """The type rendered back to Swift syntax."""
        raise NotImplementedError

    @property
    def base_name(self) -> str:
        """The type name without generic arguments or optionality."""
        raise NotImplementedError

    @property
    def generic_parameters(self) -> Tuple["TypeExpression", ...]:
        return ()

    @property
    def is_optional(self) -> bool:
        return False

    @property
    def is_closure(self) -> bool:
        return False

    @property
    def closure_parameters(self) -> Tuple["TypeExpression", ...]:
        return ()

    @property
    def closure_return_type(self) -> Optional["TypeExpression"]:
        return None

    @property
    def is_escaping(self) -> bool:
        return False

    def children(self) -> Tuple["TypeExpression", ...]:
        return ()

    @property
    def depth(self) -> int:
        """Height of the tree; a bare name has depth 1."""
        kids = self.children()
        return 1 + (max(child.depth for child in kids) if kids else 0)

    def walk(self) -> Iterator["TypeExpression"]:
        """Yield this node and every descendant, pre-order."""
        yield self
        for child in self.children():
            yield from child.walk()

    def __str__(self) -> str:
        return self.raw_type


@dataclass(frozen=True)
class SimpleType(TypeExpression):
    """A bare type name such as ``String`` or ``Edge.Set``."""

    name: str

    @property
    def raw_type(self) -> str:
        return self.name

    @property
    def base_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class GenericType(TypeExpression):
    """A nominal type applied to one or more type arguments."""

    name: str
    parameters: Tuple[TypeExpression, ...]

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))
        if not self.parameters:
            raise ValueError(f"Generic type {self.name!r} requires at least one parameter")

    @property
    def raw_type(self) -> str:
        params = ", ".join(p.raw_type for p in self.parameters)
        return f"{self.name}<{params}>"

    @property
    def base_name(self) -> str:
        return self.name

    @property
    def generic_parameters(self) -> Tuple[TypeExpression, ...]:
        return self.parameters

    def children(self) -> Tuple[TypeExpression, ...]:
        return self.parameters


@dataclass(frozen=True)
class OptionalType(TypeExpression):
    """Exactly one wrapped expression, marked optional."""

    wrapped: TypeExpression

    @property
    def raw_type(self) -> str:
        inner = self.wrapped.raw_type
        # (() -> Void)? and () -> Void? are different types
        if self.wrapped.is_closure:
            return f"({inner})?"
        return f"{inner}?"

    @property
    def base_name(self) -> str:
        return self.wrapped.base_name

    @property
    def generic_parameters(self) -> Tuple[TypeExpression, ...]:
        return self.wrapped.generic_parameters

    @property
    def is_optional(self) -> bool:
        return True

    def children(self) -> Tuple[TypeExpression, ...]:
        return (self.wrapped,)


@dataclass(frozen=True)
class FunctionType(TypeExpression):
    """A closure type.

    ``attributes`` keeps type attributes other than ``@escaping``
    (``@Sendable``, ``@MainActor``) and ``effects`` keeps the ``async`` /
    ``throws`` markers, both in source order.
    """

    parameters: Tuple[TypeExpression, ...]
    return_type: TypeExpression
    is_escaping_closure: bool = False
    attributes: Tuple[str, ...] = field(default=())
    effects: Tuple[str, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "attributes", tuple(self.attributes))
        object.__setattr__(self, "effects", tuple(self.effects))

    @property
    def raw_type(self) -> str:
        prefix = []
        if self.is_escaping_closure:
            prefix.append("@escaping")
        prefix.extend(self.attributes)
        params = ", ".join(p.raw_type for p in self.parameters)
        text = f"({params})"
        if self.effects:
            text += " " + " ".join(self.effects)
        text += f" -> {self.return_type.raw_type}"
        if prefix:
            text = " ".join(prefix) + " " + text
        return text

    @property
    def base_name(self) -> str:
        return "Closure"

    @property
    def is_closure(self) -> bool:
        return True

    @property
    def closure_parameters(self) -> Tuple[TypeExpression, ...]:
        return self.parameters

    @property
    def closure_return_type(self) -> Optional[TypeExpression]:
        return self.return_type

    @property
    def is_escaping(self) -> bool:
        return self.is_escaping_closure

    def children(self) -> Tuple[TypeExpression, ...]:
        return self.parameters + (self.return_type,)

    def without_escaping(self) -> "FunctionType":
        return replace(self, is_escaping_closure=False)

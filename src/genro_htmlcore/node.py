# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Capability-tagged node model.

Every renderable value satisfies the base ``HTML`` contract: a ``render()``
method producing markup. On top of that a node may carry capability
refinements telling the surrounding code where it may legally appear:

    - ``Capability.INLINE``: usable where running text is expected
    - ``Capability.HEAD``: usable inside document metadata
    - ``Capability.DOCUMENT``: represents a whole document
    - ``Capability.BLOCK``: the plain default, satisfied by every node

Capability membership is structural. A class opts in with the
``@capability`` decorator, and an instance may carry its own
``html_capabilities`` frozenset; no common base class is required.

Example:
    >>> @capability(Capability.INLINE)
    ... @dataclass(frozen=True)
    ... class Span(Element):
    ...     tag: str = 'span'
    ...
    >>> has_capability(Span(contents='hi'), Capability.INLINE)
    True
    >>> Element('p', contents='hello').render()
    '<p>hello</p>'
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import (
    Any,
    Callable,
    ClassVar,
    Iterable,
    Iterator,
    Mapping,
    Protocol,
    TypeVar,
    runtime_checkable,
)

from .exceptions import CapabilityError

_C = TypeVar('_C', bound=type)


class Capability(str, Enum):
    """Structural role of a node."""

    BLOCK = 'block'
    INLINE = 'inline'
    HEAD = 'head'
    DOCUMENT = 'document'

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class HTML(Protocol):
    """Base renderable contract."""

    def render(self) -> str:
        """Produce the node's markup. Deterministic and side-effect free."""
        ...


class InlineElement(HTML, Protocol):
    """Annotation for nodes carrying ``Capability.INLINE``.

    Protocols cannot see capability tags, so these refinements only document
    intent in signatures. Use ``has_capability`` for runtime checks.
    """


class HeadElement(HTML, Protocol):
    """Annotation for nodes carrying ``Capability.HEAD``."""


class DocumentElement(HTML, Protocol):
    """Annotation for nodes carrying ``Capability.DOCUMENT``."""


def capability(*capabilities: Capability | str) -> Callable[[_C], _C]:
    """Class decorator declaring the capabilities a node type satisfies.

    ``Capability.BLOCK`` is implied and dropped. Subclasses inherit the
    declaration unless they are decorated again.

    Args:
        *capabilities: Capabilities or their string values ('inline', ...).

    Raises:
        ValueError: If a value is not a known capability.
    """
    parsed = frozenset(Capability(c) for c in capabilities) - {Capability.BLOCK}

    def decorator(cls: _C) -> _C:
        cls.html_capabilities = parsed
        return cls

    return decorator


def describe_capabilities(capabilities: frozenset[Capability]) -> str:
    """Human-readable form of a capability set ('block' when empty)."""
    if not capabilities:
        return Capability.BLOCK.value
    return ', '.join(sorted(c.value for c in capabilities))


def _is_node(value: Any) -> bool:
    # Node classes have a render attribute too; only instances are nodes
    return isinstance(value, HTML) and not isinstance(value, type)


def _not_a_node(value: Any, message: str) -> CapabilityError:
    if isinstance(value, type):
        message = f"'{value.__name__}' is a node class, not a node; instantiate it"
    return CapabilityError(message, expected=Capability.BLOCK, actual=None)


def capabilities_of(node: Any) -> frozenset[Capability]:
    """Return the capability refinements carried by a node.

    An empty set means the node is a plain block node.

    Raises:
        CapabilityError: If node is not renderable, or is a node class.
    """
    if not _is_node(node):
        raise _not_a_node(node, f"'{type(node).__name__}' is not a renderable node")
    return frozenset(getattr(node, 'html_capabilities', frozenset()))


def has_capability(node: Any, required: Capability | str) -> bool:
    """True if node satisfies the required capability.

    Every renderable node satisfies ``Capability.BLOCK``. Non-renderable
    values and node classes satisfy nothing.
    """
    required = Capability(required)
    if not _is_node(node):
        return False
    if required is Capability.BLOCK:
        return True
    return required in capabilities_of(node)


def require_capability(
    node: Any, required: Capability | str, context: str | None = None
) -> Any:
    """Fail fast unless node satisfies the required capability.

    Args:
        node: The value being placed.
        required: The capability the placement requires.
        context: Optional description of the placement, used in the message.

    Returns:
        The node itself, for use inline in constructors.

    Raises:
        CapabilityError: With ``expected`` and ``actual`` set.
    """
    required = Capability(required)
    actual = capabilities_of(node)
    if required is Capability.BLOCK or required in actual:
        return node
    where = f"{context}: " if context else ''
    raise CapabilityError(
        f"{where}expected {required.value} content, got "
        f"'{type(node).__name__}' ({describe_capabilities(actual)})",
        expected=required,
        actual=actual,
    )


def as_html(value: Any) -> HTML:
    """Box any renderable output into a node.

    Nodes pass through unchanged, strings become escaped ``Text``, ``None``
    becomes an empty ``Group`` and lists or tuples become a ``Group``.

    Raises:
        CapabilityError: If value cannot be rendered.
    """
    if _is_node(value):
        return value
    if value is None:
        return Group()
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (list, tuple)):
        return Group(*value)
    raise _not_a_node(value, f"'{type(value).__name__}' is not renderable")


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """Render an attribute mapping as ' name="value"' pairs.

    ``True`` renders a bare attribute, ``False`` and ``None`` omit it.
    """
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return ''.join(parts)


@capability(Capability.INLINE)
@dataclass(frozen=True)
class Text:
    """Escaped character data."""

    text: str

    def render(self) -> str:
        return html.escape(self.text, quote=False)


@dataclass(frozen=True, init=False)
class Group:
    """An ordered sequence of nodes rendered back to back.

    A group satisfies a capability only when every item does, so a group of
    inline nodes can still be placed inline.

    Example:
        >>> Group('a', Text('b'), ['c']).render()
        'abc'
    """

    items: tuple[HTML, ...]

    def __init__(self, *items: Any) -> None:
        object.__setattr__(self, 'items', tuple(as_html(item) for item in items))

    @property
    def html_capabilities(self) -> frozenset[Capability]:
        if not self.items:
            return frozenset()
        return frozenset.intersection(*(capabilities_of(item) for item in self.items))

    def __iter__(self) -> Iterator[HTML]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def render(self) -> str:
        return ''.join(item.render() for item in self.items)


def _normalize_contents(contents: Any) -> tuple[HTML, ...]:
    """Turn the contents argument of an Element into a tuple of nodes."""
    if contents is None:
        return ()
    if isinstance(contents, (HTML, str)) or not isinstance(contents, Iterable):
        return (as_html(contents),)
    return tuple(as_html(item) for item in contents)


def _normalize_name(name: str) -> str:
    # class_ -> class, for_ -> for
    return name[:-1] if name.endswith('_') and len(name) > 1 else name


class Attributes(Mapping[str, Any]):
    """Read-only, hashable attribute mapping of an Element.

    Compares equal to any mapping with the same items. Attribute values must
    be hashable for the mapping to be hashed.

    Example:
        >>> attrs = Attributes({'class_': 'box'})
        >>> attrs == {'class': 'box'}
        True
    """

    __slots__ = ('_items',)

    def __init__(self, items: Mapping[str, Any] | None = None) -> None:
        self._items = {_normalize_name(k): v for k, v in dict(items or {}).items()}

    def __getitem__(self, name: str) -> Any:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(frozenset(self._items.items()))

    def __repr__(self) -> str:
        return f"Attributes({self._items!r})"


@dataclass(frozen=True)
class Element:
    """Generic tag payload: a tag name, attributes and child nodes.

    Elements are immutable; ``with_attributes`` and ``add_class`` return new
    elements. Subclasses declare their capabilities with ``@capability`` and
    may constrain their children:

    Attributes:
        content_capability: Capability every child must satisfy. Checked at
            construction, raising ``CapabilityError``.
        void: Render without contents and closing tag (br, meta, ...).

    Example:
        >>> el = Element('div', {'class_': 'box'}, contents=['Hello'])
        >>> el.render()
        '<div class="box">Hello</div>'
        >>> el.add_class('wide').render()
        '<div class="box wide">Hello</div>'
    """

    tag: str
    attributes: Mapping[str, Any] = field(default_factory=Attributes)
    contents: Any = ()

    html_capabilities: ClassVar[frozenset[Capability]] = frozenset()
    content_capability: ClassVar[Capability | None] = None
    void: ClassVar[bool] = False

    def __post_init__(self) -> None:
        attributes = Attributes(self.attributes)
        contents = _normalize_contents(self.contents)

        if self.void and contents:
            raise ValueError(f"Void element <{self.tag}> cannot have contents")

        if self.content_capability is not None:
            for child in contents:
                require_capability(child, self.content_capability, context=f"<{self.tag}>")

        object.__setattr__(self, 'attributes', attributes)
        object.__setattr__(self, 'contents', contents)

    def get_attr(self, name: str, default: Any = None) -> Any:
        """Get an attribute value by name ('class_' and 'class' are the same)."""
        return self.attributes.get(_normalize_name(name), default)

    def with_attributes(self, _attr: Mapping[str, Any] | None = None, **kwargs: Any) -> Element:
        """Return a copy with attributes merged in.

        Args:
            _attr: Dictionary of attributes to set.
            **kwargs: Additional attributes as keyword arguments.
        """
        merged = dict(self.attributes)
        for name, value in {**(_attr or {}), **kwargs}.items():
            merged[_normalize_name(name)] = value
        return replace(self, attributes=merged)

    def add_class(self, *names: str) -> Element:
        """Return a copy with CSS classes appended (duplicates skipped)."""
        classes = str(self.attributes.get('class') or '').split()
        for name in names:
            for cls in name.split():
                if cls not in classes:
                    classes.append(cls)
        return self.with_attributes({'class': ' '.join(classes)})

    def modifier(self, modifier: Any) -> HTML:
        """Apply a modifier, preserving this element's capabilities.

        See ``genro_htmlcore.modifiers.apply_modifier``.
        """
        # Import here to avoid circular dependency
        from .modifiers import apply_modifier

        return apply_modifier(self, modifier)

    def render(self) -> str:
        opening = f"<{self.tag}{render_attributes(self.attributes)}>"
        if self.void:
            return opening
        inner = ''.join(child.render() for child in self.contents)
        return f"{opening}{inner}</{self.tag}>"

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Modifier composition engine.

A modifier is any object with a ``body(content)`` method returning renderable
output. Applying it to a node never runs it: the result is a ``ModifiedHTML``
that pairs the node with the modifier and invokes ``body`` only when rendered.

There is one entry point per capability:

    - ``modifier(content, mod)``: result is a plain node
    - ``inline_modifier(content, mod)``: result keeps ``Capability.INLINE``
    - ``head_modifier(content, mod)``: result keeps ``Capability.HEAD``
    - ``document_modifier(content, mod)``: result keeps ``Capability.DOCUMENT``

The capability-specific entry points reject content lacking the capability.
They trust the modifier not to change the node's category: what ``body``
returns is not re-checked at render time.

``apply_modifier`` keeps every capability the content carries and is what
``Element.modifier()`` uses.

Example:
    >>> p = Element('p', contents='hello')
    >>> modifier(p, ClassModifier('x')).render()
    '<p class="x">hello</p>'

    >>> @html_modifier
    ... def emphasize(content):
    ...     return Element('em', contents=content)
    >>> p.modifier(emphasize).render()
    '<em><p>hello</p></em>'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol, runtime_checkable

from .exceptions import ModifierError
from .node import (
    HTML,
    Attributes,
    Capability,
    DocumentElement,
    HeadElement,
    InlineElement,
    as_html,
    capabilities_of,
    describe_capabilities,
    require_capability,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class HTMLModifier(Protocol):
    """A transformation from a content node to any renderable output."""

    def body(self, content: HTML) -> Any:
        """Return the modified form of content.

        May return a node of a different kind than content, a string, a list
        of nodes or None. Must not depend on or mutate outside state.
        """
        ...


@dataclass(frozen=True)
class ModifiedHTML:
    """A content node paired with a modifier.

    Rendering calls ``mod.body(content)`` and renders whatever comes
    back. Nothing is cached, so rendering twice runs the modifier twice.

    Attributes:
        content: The wrapped node.
        mod: The modifier to run at render time.
        html_capabilities: Capabilities claimed at the application site.
    """

    content: HTML
    mod: HTMLModifier
    html_capabilities: frozenset[Capability] = frozenset()

    def resolve(self) -> HTML:
        """Run the modifier and return its output as a node."""
        return as_html(self.mod.body(self.content))

    def render(self) -> str:
        return self.resolve().render()

    def modifier_chain(self) -> list[HTMLModifier]:
        """Modifiers from outermost to innermost."""
        chain = [self.mod]
        inner = self.content
        while isinstance(inner, ModifiedHTML):
            chain.append(inner.mod)
            inner = inner.content
        return chain

    def innermost(self) -> HTML:
        """The original content under every modifier of the chain."""
        inner = self.content
        while isinstance(inner, ModifiedHTML):
            inner = inner.content
        return inner

    def modifier(self, mod: HTMLModifier) -> ModifiedHTML:
        """Apply another modifier on top, keeping these capabilities."""
        return apply_modifier(self, mod)


def _wrap(
    content: HTML, mod: HTMLModifier, capabilities: frozenset[Capability]
) -> ModifiedHTML:
    """Pair content with mod after checking mod is a modifier."""
    if not callable(getattr(mod, 'body', None)):
        raise ModifierError(
            f"'{type(mod).__name__}' is not a modifier: it has no body() method"
        )
    wrapped = ModifiedHTML(content, mod, frozenset(capabilities))
    logger.debug(
        "Applied %s to %s as %s",
        type(mod).__name__,
        type(content).__name__,
        describe_capabilities(wrapped.html_capabilities),
    )
    return wrapped


def modifier(content: HTML, mod: HTMLModifier) -> HTML:
    """Apply mod to any node. The result is a plain node.

    Raises:
        CapabilityError: If content is not renderable.
        ModifierError: If mod has no body() method.
    """
    require_capability(content, Capability.BLOCK, context='modifier()')
    return _wrap(content, mod, frozenset())


def inline_modifier(content: InlineElement, mod: HTMLModifier) -> InlineElement:
    """Apply mod to an inline node. The result stays inline.

    Raises:
        CapabilityError: If content is not inline.
        ModifierError: If mod has no body() method.
    """
    require_capability(content, Capability.INLINE, context='inline_modifier()')
    return _wrap(content, mod, frozenset({Capability.INLINE}))


def head_modifier(content: HeadElement, mod: HTMLModifier) -> HeadElement:
    """Apply mod to a head node. The result stays usable in the head.

    Raises:
        CapabilityError: If content is not a head node.
        ModifierError: If mod has no body() method.
    """
    require_capability(content, Capability.HEAD, context='head_modifier()')
    return _wrap(content, mod, frozenset({Capability.HEAD}))


def document_modifier(content: DocumentElement, mod: HTMLModifier) -> DocumentElement:
    """Apply mod to a document node. The result is still a whole document.

    Raises:
        CapabilityError: If content is not a document node.
        ModifierError: If mod has no body() method.
    """
    require_capability(content, Capability.DOCUMENT, context='document_modifier()')
    return _wrap(content, mod, frozenset({Capability.DOCUMENT}))


def apply_modifier(content: HTML, mod: HTMLModifier) -> ModifiedHTML:
    """Apply mod keeping every capability content carries.

    Raises:
        CapabilityError: If content is not renderable.
        ModifierError: If mod has no body() method.
    """
    return _wrap(content, mod, capabilities_of(content))


@dataclass(frozen=True)
class FunctionModifier:
    """Modifier backed by a plain function of the content."""

    func: Callable[[HTML], Any]

    def body(self, content: HTML) -> Any:
        return self.func(content)


def html_modifier(func: Callable[[HTML], Any]) -> FunctionModifier:
    """Decorator turning ``func(content) -> output`` into a modifier.

    Example:
        >>> @html_modifier
        ... def boxed(content):
        ...     return Element('div', {'class': 'box'}, contents=content)
    """
    return FunctionModifier(func)


def _editable(content: HTML, method: str) -> Any:
    """Return content, or what its modifiers produce, exposing method.

    Wrapped content is resolved through its own modifiers first, so an outer
    attribute modifier acts on the inner modifier's output.
    """
    target = content
    while not callable(getattr(target, method, None)):
        if not isinstance(target, ModifiedHTML):
            raise ModifierError(
                f"'{type(target).__name__}' does not support {method}()"
            )
        target = target.resolve()
    return target


class AttributeModifier:
    """Modifier merging attributes into an element.

    Example:
        >>> link = Element('a', contents='home').modifier(AttributeModifier(href='/'))
        >>> link.render()
        '<a href="/">home</a>'
    """

    __slots__ = ('attributes',)

    def __init__(self, _attr: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        self.attributes = Attributes({**(_attr or {}), **kwargs})

    def __repr__(self) -> str:
        return f"AttributeModifier({dict(self.attributes)!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AttributeModifier) and other.attributes == self.attributes

    def __hash__(self) -> int:
        return hash(self.attributes)

    def body(self, content: HTML) -> Any:
        return _editable(content, 'with_attributes').with_attributes(self.attributes)


class ClassModifier:
    """Modifier appending CSS classes to an element."""

    __slots__ = ('names',)

    def __init__(self, *names: str) -> None:
        self.names = names

    def __repr__(self) -> str:
        return f"ClassModifier{self.names!r}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ClassModifier) and other.names == self.names

    def __hash__(self) -> int:
        return hash(self.names)

    def body(self, content: HTML) -> Any:
        return _editable(content, 'add_class').add_class(*self.names)

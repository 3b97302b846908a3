# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Layout resolution for page content.

Page content declares a ``body`` and may choose the layout it renders
inside. When it does not, the site's default layout is read from the
publishing context the first time ``layout`` is accessed:

    1. the layout set explicitly on the content
    2. otherwise ``default_layout`` of the injected context, or of the
       shared context when none was injected

Example:
    >>> class About(LayoutContent):
    ...     @property
    ...     def body(self):
    ...         return Element('p', contents='About us')
    ...
    >>> about = About(context=PublishingContext(default_layout=main))
    >>> about.layout is main
    True
    >>> about.layout = wide
    >>> about.layout is wide
    True
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Protocol

from .context import SiteContext, get_shared_context
from .node import HTML

logger = logging.getLogger(__name__)


class Layout(Protocol):
    """A page template wrapping the body of layout content.

    Layouts are rendered by the publishing pipeline; this package only
    references them.
    """

    def body(self, content: HTML) -> Any:
        """Return the full page built around content."""
        ...


def default_layout(context: SiteContext | None = None) -> Layout:
    """Return the default layout of context, or of the shared context.

    Raises:
        ContextError: If context is None and no shared context is installed.
    """
    if context is None:
        context = get_shared_context()
    layout = context.default_layout
    logger.debug("Falling back to default layout %r", layout)
    return layout


class LayoutContent(ABC):
    """Base class for page content that renders inside a layout.

    Subclasses define ``body``. The layout may be given at construction,
    assigned later, or left to the publishing context default.

    Attributes:
        explicit_layout: The layout chosen for this content, or None.
        context: The injected publishing context, or None to use the shared one.
    """

    _layout: Layout | None = None
    _context: SiteContext | None = None

    def __init__(
        self,
        layout: Layout | None = None,
        context: SiteContext | None = None,
    ) -> None:
        """Initialize layout content.

        Args:
            layout: Explicit layout. If None, the context default is used.
            context: Publishing context to read the default from. If None,
                the shared context is read when ``layout`` is accessed.
        """
        self._layout = layout
        self._context = context

    @property
    @abstractmethod
    def body(self) -> Any:
        """The renderable content of the page."""

    @property
    def explicit_layout(self) -> Layout | None:
        return self._layout

    @property
    def context(self) -> SiteContext | None:
        return self._context

    @property
    def layout(self) -> Layout:
        """The layout this content renders inside."""
        if self._layout is not None:
            return self._layout
        return default_layout(self._context)

    @layout.setter
    def layout(self, value: Layout | None) -> None:
        self._layout = value

    @layout.deleter
    def layout(self) -> None:
        self._layout = None


def resolve_layout(content: Any, context: SiteContext | None = None) -> Layout:
    """Resolve the layout for any layout-bearing content.

    Args:
        content: Object exposing ``explicit_layout`` (as LayoutContent does)
            or, failing that, ``layout``.
        context: Context used when content has no explicit layout. Defaults
            to the content's own context, then the shared one.

    Raises:
        ContextError: If a default is needed and no context is available.
    """
    if isinstance(content, LayoutContent):
        if content.explicit_layout is not None:
            return content.explicit_layout
        return default_layout(context if context is not None else content.context)

    layout = getattr(content, 'layout', None)
    if layout is not None:
        return layout
    return default_layout(context)

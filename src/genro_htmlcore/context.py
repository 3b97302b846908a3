# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Publishing context - the source of the site's default layout.

The publishing pipeline installs one context for the whole generation run
with ``set_shared_context``. Content that has no explicit layout reads the
default from it when its ``layout`` is accessed. Code that wants isolation
(tests, nested builds) can pass a context explicitly or install one
temporarily with ``shared_context``.

Example:
    >>> with shared_context(PublishingContext(default_layout=main_layout)):
    ...     page.layout is main_layout
    True
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Protocol, runtime_checkable

from .exceptions import ContextError

if TYPE_CHECKING:
    from .layout import Layout

logger = logging.getLogger(__name__)


@runtime_checkable
class SiteContext(Protocol):
    """Anything exposing the site's default layout."""

    @property
    def default_layout(self) -> Layout: ...


@dataclass(frozen=True)
class PublishingContext:
    """Read-only publishing context.

    Attributes:
        default_layout: Layout used by content that does not choose one.
    """

    default_layout: Layout


# Process-wide context, installed by the publishing pipeline
_shared_context: SiteContext | None = None


def set_shared_context(context: SiteContext | None) -> SiteContext | None:
    """Install the process-wide publishing context.

    Args:
        context: The context to install, or None to uninstall.

    Returns:
        The previously installed context.

    Raises:
        TypeError: If context does not expose ``default_layout``.
    """
    global _shared_context

    if context is not None and not isinstance(context, SiteContext):
        raise TypeError(
            f"'{type(context).__name__}' has no default_layout and cannot be "
            "used as a publishing context"
        )

    previous = _shared_context
    _shared_context = context
    logger.debug("Shared publishing context set to %r", context)
    return previous


def get_shared_context() -> SiteContext:
    """Return the process-wide publishing context.

    Raises:
        ContextError: If no context has been installed.
    """
    if _shared_context is None:
        raise ContextError(
            "No publishing context installed. "
            "Call set_shared_context() before resolving layouts."
        )
    return _shared_context


@contextmanager
def shared_context(context: SiteContext) -> Iterator[SiteContext]:
    """Install context for the duration of a with block.

    The previously installed context is restored on exit.
    """
    previous = set_shared_context(context)
    try:
        yield context
    finally:
        set_shared_context(previous)

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlCore exceptions."""

from __future__ import annotations

from typing import Any


class HtmlCoreError(Exception):
    """Base exception for HtmlCore errors."""

    pass


class CapabilityError(HtmlCoreError, TypeError):
    """Raised when a node lacks the capability its placement requires.

    Attributes:
        expected: The ``Capability`` the placement requires. Values that are
            not nodes at all fail the base contract, ``Capability.BLOCK``.
        actual: The frozenset of capabilities the node carries, or None when
            the value is not a node.
    """

    def __init__(self, message: str, expected: Any = None, actual: Any = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ModifierError(HtmlCoreError, TypeError):
    """Raised when a modifier is malformed or applied to unsupported content."""

    pass


class ContextError(HtmlCoreError, RuntimeError):
    """Raised when the shared publishing context is read before installation."""

    pass

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HtmlCore - Composition core for declarative HTML documents.

A lightweight, zero-dependency library providing capability-tagged
renderable nodes, capability-preserving modifiers and layout resolution
for the Genro ecosystem (Genro Kyō).
"""

__version__ = "0.1.0"

from .context import (
    PublishingContext,
    SiteContext,
    get_shared_context,
    set_shared_context,
    shared_context,
)
from .exceptions import (
    CapabilityError,
    ContextError,
    HtmlCoreError,
    ModifierError,
)
from .layout import Layout, LayoutContent, default_layout, resolve_layout
from .modifiers import (
    AttributeModifier,
    ClassModifier,
    FunctionModifier,
    HTMLModifier,
    ModifiedHTML,
    apply_modifier,
    document_modifier,
    head_modifier,
    html_modifier,
    inline_modifier,
    modifier,
)
from .node import (
    HTML,
    Attributes,
    Capability,
    DocumentElement,
    Element,
    Group,
    HeadElement,
    InlineElement,
    Text,
    as_html,
    capabilities_of,
    capability,
    has_capability,
    require_capability,
)

__all__ = [
    # Node model
    "HTML",
    "Capability",
    "InlineElement",
    "HeadElement",
    "DocumentElement",
    "Element",
    "Attributes",
    "Text",
    "Group",
    "capability",
    "capabilities_of",
    "has_capability",
    "require_capability",
    "as_html",
    # Modifiers
    "HTMLModifier",
    "ModifiedHTML",
    "modifier",
    "inline_modifier",
    "head_modifier",
    "document_modifier",
    "apply_modifier",
    "html_modifier",
    "FunctionModifier",
    "AttributeModifier",
    "ClassModifier",
    # Layout
    "Layout",
    "LayoutContent",
    "default_layout",
    "resolve_layout",
    "PublishingContext",
    "SiteContext",
    "get_shared_context",
    "set_shared_context",
    "shared_context",
    # Exceptions
    "HtmlCoreError",
    "CapabilityError",
    "ModifierError",
    "ContextError",
]

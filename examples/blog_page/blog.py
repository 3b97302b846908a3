# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Blog page - Example of capability-tagged elements and layouts.

A didactic example showing how a small element catalog declares
capabilities, how modifiers keep them, and how a page picks its layout.
"""

from __future__ import annotations

from dataclasses import dataclass

from genro_htmlcore import (
    Capability,
    ClassModifier,
    Element,
    LayoutContent,
    PublishingContext,
    as_html,
    capability,
    html_modifier,
    inline_modifier,
    shared_context,
)


# === Element catalog ===

@capability(Capability.INLINE)
@dataclass(frozen=True)
class Link(Element):
    """Anchor. Inline, accepts only inline content."""

    tag: str = 'a'
    content_capability = Capability.INLINE


@dataclass(frozen=True)
class Paragraph(Element):
    """Paragraph. Block, accepts only inline content."""

    tag: str = 'p'
    content_capability = Capability.INLINE


@capability(Capability.HEAD)
@dataclass(frozen=True)
class Title(Element):
    """Document title. Head content."""

    tag: str = 'title'


@capability(Capability.DOCUMENT)
@dataclass(frozen=True)
class Document(Element):
    """The html root."""

    tag: str = 'html'


# === Modifiers ===

@html_modifier
def external(content):
    """Open a link in a new tab."""
    return content.with_attributes(target='_blank', rel='noopener')


# === Layouts ===

class SiteLayout:
    """Wraps the body in a full document."""

    def __init__(self, title: str):
        self.title = title

    def body(self, content):
        head = Element('head', contents=[Title(contents=self.title)])
        return Document(contents=[head, Element('body', contents=content)])


class PostLayout(SiteLayout):
    """Site layout with an <article> around the body."""

    def body(self, content):
        return super().body(Element('article', contents=content))


# === Pages ===

class HomePage(LayoutContent):
    """Uses the site default layout."""

    @property
    def body(self):
        link = inline_modifier(Link(attributes={'href': 'https://genropy.org'}, contents='Genropy'), external)
        return Paragraph(contents=['Built with ', link.modifier(ClassModifier('brand'))])


class FirstPost(LayoutContent):
    """Chooses its own layout."""

    def __init__(self):
        super().__init__(layout=PostLayout('First post'))

    @property
    def body(self):
        return Paragraph(contents='Hello from the first post.')


def render_page(content: LayoutContent) -> str:
    """Render content inside its layout."""
    return as_html(content.layout.body(content.body)).render()


if __name__ == '__main__':
    with shared_context(PublishingContext(default_layout=SiteLayout('Home'))):
        for page in (HomePage(), FirstPost()):
            print(render_page(page))

"""
Block renderer: ordered content blocks -> HTML body fragment.

Blocks render in declaration order, one per type (first enabled occurrence).
All text is escaped; ``content.data.html`` is the one raw-HTML field.
"""
from typing import Any, Callable, Dict, List, Optional

from landing_factory.domain.content import ContentBlock, first_enabled_by_type, parse_blocks
from .html import escape_html
from .slots import resolve_slot_href

CONTACT_FIELDS = ("company", "phone", "email", "address", "hours")
GENERATOR_CREDIT = '<div class="container"><p class="small">Generated by Landing Factory (SSG v0.5)</p></div>'


def _card(inner: str) -> str:
    return f'<div class="container"><div class="card">{inner}</div></div>'


def _items(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    items = data.get("items")
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def _cta_link(cta: Any, css_class: str, slot_urls: Dict[str, str]) -> str:
    if not isinstance(cta, dict) or not isinstance(cta.get("href"), str):
        return ""
    href = resolve_slot_href(cta["href"], slot_urls)
    if not href:
        return ""
    return f'<a class="{css_class}" href="{escape_html(href)}">{escape_html(cta.get("label"))}</a>'


def render_hero(block: ContentBlock, slot_urls: Dict[str, str]) -> Optional[str]:
    data = block.data
    primary = _cta_link(data.get("primaryCta"), "btn primary", slot_urls)
    secondary = _cta_link(data.get("secondaryCta"), "btn", slot_urls)
    return _card(
        f"""
      <h1>{escape_html(data.get("h1", ""))}</h1>
      <p class="small">{escape_html(data.get("subheading", ""))}</p>
      <div>
        {primary}
        {secondary}
      </div>
    """
    )


def render_content(block: ContentBlock, slot_urls: Dict[str, str]) -> Optional[str]:
    raw_html = block.data.get("html")
    return _card(raw_html if isinstance(raw_html, str) else "")


def render_contacts(block: ContentBlock, slot_urls: Dict[str, str]) -> Optional[str]:
    data = block.data
    lines = []

    for key in CONTACT_FIELDS:
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            label = key.capitalize()
            lines.append(f"<div><b>{escape_html(label)}:</b> {escape_html(value)}</div>")

    details = "".join(lines) or '<p class="small">No details provided.</p>'
    title = data.get("title")
    if title is None:
        title = "Contacts"
    return _card(f"<h2>{escape_html(title)}</h2>{details}")


def render_faq(block: ContentBlock, slot_urls: Dict[str, str]) -> Optional[str]:
    items = _items(block.data)
    if not items:
        return None

    entries = "".join(
        '<details style="margin:10px 0">'
        f'<summary><b>{escape_html(item.get("q", ""))}</b></summary>'
        f'<div class="small" style="margin-top:6px">{escape_html(item.get("a", ""))}</div>'
        "</details>"
        for item in items
    )
    return _card(f"<h2>FAQ</h2>{entries}")


def render_footer_links(block: ContentBlock, slot_urls: Dict[str, str]) -> Optional[str]:
    items = _items(block.data)
    if not items:
        return None

    entries = []
    for item in items:
        href = item.get("href") if isinstance(item.get("href"), str) else "#"
        label = item.get("label") if item.get("label") is not None else href
        entries.append(
            f'<li><a href="{escape_html(resolve_slot_href(href, slot_urls))}">{escape_html(label)}</a></li>'
        )
    return _card(f"<h3>Resources</h3><ul>{''.join(entries)}</ul>")


BLOCK_RENDERERS: Dict[str, Callable[[ContentBlock, Dict[str, str]], Optional[str]]] = {
    "hero": render_hero,
    "content": render_content,
    "contacts": render_contacts,
    "faq": render_faq,
    "footer_links": render_footer_links,
}


def render_blocks(raw_blocks: Any, slot_urls: Optional[Dict[str, str]] = None) -> str:
    slot_urls = slot_urls or {}
    supported = (b for b in parse_blocks(raw_blocks) if b.type in BLOCK_RENDERERS)
    parts = []

    for block in first_enabled_by_type(supported):
        fragment = BLOCK_RENDERERS[block.type](block, slot_urls)
        if fragment:
            parts.append(fragment)

    parts.append(GENERATOR_CREDIT)
    return "\n".join(parts)

"""
Typed view over the JSON block documents stored in ``PageVersion.content_json``.

A block is a tagged variant: ``{"id", "type", "enabled", "data"}``. Only a
literal ``enabled: false`` disables a block; a missing flag means enabled.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

BLOCK_TYPES = ("hero", "content", "contacts", "faq", "footer_links")

DEFAULT_SLOT_PLACEHOLDERS = {"HERO_CTA": {"resolved": False}, "FOOTER": {"resolved": False}}


@dataclass(frozen=True)
class ContentBlock:
    type: str
    enabled: bool = True
    data: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None

    @classmethod
    def from_json(cls, raw: Any) -> Optional["ContentBlock"]:
        if not isinstance(raw, dict) or not isinstance(raw.get("type"), str):
            return None

        data = raw.get("data")
        return cls(
            type=raw["type"],
            enabled=raw.get("enabled") is not False,
            data=data if isinstance(data, dict) else {},
            id=raw.get("id") if isinstance(raw.get("id"), str) else None,
        )


def parse_blocks(raw_blocks: Any) -> List[ContentBlock]:
    """Parse a raw block list, dropping entries that are not blocks."""
    if not isinstance(raw_blocks, list):
        return []

    parsed = (ContentBlock.from_json(raw) for raw in raw_blocks)
    return [block for block in parsed if block is not None]


def first_enabled_by_type(blocks: Iterable[ContentBlock]) -> List[ContentBlock]:
    """
    First enabled occurrence of each block type, in declaration order.

    Later duplicates of a type are ignored even when the first one
    renders nothing.
    """
    seen = set()
    selected = []

    for block in blocks:
        if not block.enabled or block.type in seen:
            continue
        seen.add(block.type)
        selected.append(block)

    return selected


def make_block(block_type: str, data: Dict[str, Any], *, enabled: bool = True) -> Dict[str, Any]:
    return {"id": block_type, "type": block_type, "enabled": enabled, "data": data}


def page_content(*, route: str, page_type: str, lang: str, blocks: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "page": {"route": route, "pageType": page_type, "lang": lang},
        "blocks": blocks,
        "slots": {"links": dict(DEFAULT_SLOT_PLACEHOLDERS)},
    }

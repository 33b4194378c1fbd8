"""Catalog of known Divi shortcode tags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ModuleInfo:
    """Static facts about a Divi shortcode tag.

    Attributes:
        category: One of ``layout``, ``content``, ``media``, ``interactive``,
            ``design`` (or ``unknown`` for tags outside the catalog).
        has_children: Whether the tag may wrap nested ``et_pb_`` modules.
    """

    category: str
    has_children: bool


UNKNOWN_MODULE: Final[ModuleInfo] = ModuleInfo(category="unknown", has_children=False)

SECTION_TAG: Final[str] = "et_pb_section"
ROW_TAG: Final[str] = "et_pb_row"
COLUMN_TAG: Final[str] = "et_pb_column"
LAYOUT_TAGS: Final[frozenset[str]] = frozenset({SECTION_TAG, ROW_TAG, COLUMN_TAG})

MODULE_TYPES: Final[dict[str, ModuleInfo]] = {
    # Layout
    "et_pb_section": ModuleInfo("layout", True),
    "et_pb_row": ModuleInfo("layout", True),
    "et_pb_column": ModuleInfo("layout", True),
    # Content
    "et_pb_text": ModuleInfo("content", False),
    "et_pb_image": ModuleInfo("media", False),
    "et_pb_button": ModuleInfo("interactive", False),
    "et_pb_cta": ModuleInfo("interactive", False),
    "et_pb_video": ModuleInfo("media", False),
    "et_pb_audio": ModuleInfo("media", False),
    "et_pb_slider": ModuleInfo("interactive", True),
    "et_pb_gallery": ModuleInfo("media", True),
    "et_pb_portfolio": ModuleInfo("content", True),
    "et_pb_blog": ModuleInfo("content", True),
    "et_pb_testimonial": ModuleInfo("content", False),
    "et_pb_pricing_table": ModuleInfo("interactive", True),
    "et_pb_accordion": ModuleInfo("interactive", True),
    "et_pb_toggle": ModuleInfo("interactive", True),
    "et_pb_tabs": ModuleInfo("interactive", True),
    "et_pb_contact_form": ModuleInfo("interactive", True),
    "et_pb_map": ModuleInfo("media", True),
    "et_pb_divider": ModuleInfo("design", False),
    "et_pb_code": ModuleInfo("content", False),
    "et_pb_blurb": ModuleInfo("content", False),
    "et_pb_counter": ModuleInfo("content", False),
    "et_pb_number_counter": ModuleInfo("content", False),
    "et_pb_circle_counter": ModuleInfo("content", False),
    "et_pb_bar_counter": ModuleInfo("content", True),
    "et_pb_social_media_follow": ModuleInfo("interactive", True),
    "et_pb_fullwidth_header": ModuleInfo("layout", False),
    "et_pb_fullwidth_slider": ModuleInfo("interactive", True),
    "et_pb_fullwidth_portfolio": ModuleInfo("content", True),
    "et_pb_fullwidth_post_slider": ModuleInfo("content", True),
    "et_pb_fullwidth_code": ModuleInfo("content", False),
}


def get_module_info(tag: str) -> ModuleInfo:
    """Return catalog info for ``tag``, treating unknown tags as leaves."""
    return MODULE_TYPES.get(tag, UNKNOWN_MODULE)


def is_layout_tag(tag: str) -> bool:
    return tag in LAYOUT_TAGS

"""Test setup for divi2html."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import tiktoken

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


SIMPLE_LAYOUT = (
    "[et_pb_section][et_pb_row][et_pb_column]"
    "[et_pb_text]Hello[/et_pb_text]"
    "[/et_pb_column][/et_pb_row][/et_pb_section]"
)

NESTED_LAYOUT = (
    "[et_pb_section][et_pb_row][et_pb_column]"
    "[et_pb_accordion]"
    '[et_pb_toggle title="Q1"]Answer[/et_pb_toggle]'
    "[/et_pb_accordion]"
    "[/et_pb_column][/et_pb_row][/et_pb_section]"
)

MEDIA_LAYOUT = (
    '[et_pb_section background_image="https://x/bg.jpg"][et_pb_row][et_pb_column]'
    '[et_pb_image src="https://x/y.jpg" alt="Logo"][/et_pb_image]'
    '[et_pb_image src="https://x/y.jpg"][/et_pb_image]'
    '[et_pb_audio audio="https://x/a.mp3"][/et_pb_audio]'
    '[et_pb_text background_image="https://x/bg.jpg"]Caption[/et_pb_text]'
    '[et_pb_video src=""][/et_pb_video]'
    "[/et_pb_column][/et_pb_row][/et_pb_section]"
)


class _WhitespaceEncoding:
    """Stand-in tokenizer so tests never download encoding files."""

    def encode(self, text: str, disallowed_special: tuple = ()) -> list[str]:
        return text.split()


@pytest.fixture(autouse=True)
def offline_tokenizer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(tiktoken, "get_encoding", lambda name: _WhitespaceEncoding())


@pytest.fixture
def simple_layout() -> str:
    return SIMPLE_LAYOUT


@pytest.fixture
def nested_layout() -> str:
    return NESTED_LAYOUT


@pytest.fixture
def media_layout() -> str:
    return MEDIA_LAYOUT

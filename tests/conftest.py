"""Shared fixtures for the cmxedl test suite."""

from __future__ import annotations

import pytest

SAMPLE_LINE = "001  AX  V  C  01:00:00:00 01:00:05:00 01:00:10:00 01:00:15:00"

SAMPLE_EDL = """TITLE: Reel 1 Conform
FCM: NON-DROP FRAME

001  AX       V     C        01:00:00:00 01:00:05:00 01:00:10:00 01:00:15:00
* FROM CLIP NAME:  A001C003_210414.MOV
* SOURCE FILE: A001C003_210414
002  BX       A2    C        02:00:00:00 02:00:02:00 01:00:15:00 01:00:17:00
M2   BX       050.0                02:00:00:00
* CROWD WALLA
* NEEDS ADR
003  CX       V     D    025 03:00:00:00 03:00:04:00 01:00:17:00 01:00:21:00
"""


@pytest.fixture
def sample_line() -> str:
    return SAMPLE_LINE


@pytest.fixture
def sample_edl() -> str:
    return SAMPLE_EDL


@pytest.fixture
def edl_file(tmp_path, sample_edl):
    path = tmp_path / "conform.edl"
    path.write_text(sample_edl)
    return path

"""Pytest bootstrap for the flat module layout.

The ``pytest`` console script can run with a sys.path that excludes the
repository root. Ensure ``import scanner`` and friends resolve locally, and
keep SDL from needing a real display.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)


@pytest.fixture
def font_path() -> str:
    """A font file that ships inside the pygame distribution."""
    import pygame

    return os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())

"""Test configuration for colortokens."""

import pytest

from colortokens.ramps import ANCHORS


@pytest.fixture
def anchor_hues():
    """Base hues of every anchor in the built-in table."""
    return [anchor.base_hue for anchor in ANCHORS]


@pytest.fixture
def blue_anchor():
    """The built-in anchor at 210 degrees."""
    return next(anchor for anchor in ANCHORS if anchor.base_hue == 210.0)

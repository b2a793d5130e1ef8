"""Shared pytest fixtures for the cellwrap tests."""

import pytest

from cellwrap.errors import MeasurementError


class FixedPitchMetrics:
    """Every character is one point wide at size 10; the cap height is 700."""

    MISSING = "☃"

    def __init__(self):
        self.calls = []

    def measure(self, font, text, font_size):
        self.calls.append(text)
        if self.MISSING in text:
            raise MeasurementError(f"{font} has no glyph for {self.MISSING!r}")
        return len(text) * font_size / 10

    def cap_height(self, font):
        if font == "broken":
            raise MeasurementError("no cap height")
        return 700


@pytest.fixture
def metrics() -> FixedPitchMetrics:
    return FixedPitchMetrics()

"""Font metrics providers used by the line wrapper.

The wrapper only needs two things from a font: the width of a string at a
given size and the cap height. ``MetricsProvider`` describes that capability
so the algorithm does not depend on a particular rendering library;
``ReportLabMetrics`` implements it on top of ReportLab's registered fonts.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional, Protocol

from reportlab.pdfbase import pdfmetrics

from .constants import STANDARD_CAP_HEIGHTS
from .errors import MeasurementError


logger = logging.getLogger(__name__)

_FONT_ERRORS = (KeyError, UnicodeError, pdfmetrics.FontError, pdfmetrics.FontNotFoundError)


class MetricsProvider(Protocol):
    def measure(self, font: Any, text: str, font_size: float) -> float:
        """Width of ``text`` (no line breaks) in points."""
        ...

    def cap_height(self, font: Any) -> float:
        """Cap height of ``font`` in 1/1000 em."""
        ...


def _check_encodable(rl_font, text: str) -> None:
    """Raise when ``rl_font`` has no glyph for some character of ``text``.

    ReportLab silently measures such characters with a substitute width.
    """
    char_widths = getattr(rl_font.face, "charWidths", None)
    if char_widths is not None:
        missing = "".join(ch for ch in text if ord(ch) not in char_widths)
        if missing:
            raise MeasurementError(f"No glyphs for {missing!r} in font {rl_font.fontName!r}")
    else:
        # Type 1 fonts only draw what their single-byte encoding covers
        text.encode(rl_font.encName)


class ReportLabMetrics:
    """Metrics for fonts registered with ``reportlab.pdfbase.pdfmetrics``.

    Font references are ReportLab font names, e.g. ``"Helvetica"`` or the
    name a TTF was registered under.
    """

    def measure(self, font: str, text: str, font_size: float) -> float:
        try:
            rl_font = pdfmetrics.getFont(font)
            _check_encodable(rl_font, text)
            return rl_font.stringWidth(text, font_size)
        except _FONT_ERRORS as exc:
            raise MeasurementError(f"Could not measure {text!r} with font {font!r}") from exc

    def cap_height(self, font: str) -> float:
        try:
            face = pdfmetrics.getFont(font).face
        except _FONT_ERRORS as exc:
            raise MeasurementError(f"Unknown font {font!r}") from exc
        # TrueType and embedded Type 1 faces carry their own value
        cap = getattr(face, "capHeight", None)
        if cap is None:
            cap = STANDARD_CAP_HEIGHTS.get(face.name)
        if cap is None:
            raise MeasurementError(f"Font {font!r} defines no cap height")
        return float(cap)


class CachedMetrics:
    """Memoizing wrapper around another provider.

    Wrapping a long string against a narrow column measures many overlapping
    candidates, so repeated lookups are common.
    """

    def __init__(self, provider: MetricsProvider, maxsize: Optional[int] = 4096):
        self.provider = provider
        self._measure = lru_cache(maxsize=maxsize)(provider.measure)
        self._cap_height = lru_cache(maxsize=None)(provider.cap_height)
        logger.debug("Caching metrics of %s (maxsize=%s)", type(provider).__name__, maxsize)

    def measure(self, font: Any, text: str, font_size: float) -> float:
        return self._measure(font, text, font_size)

    def cap_height(self, font: Any) -> float:
        return self._cap_height(font)

    def cache_info(self):
        return self._measure.cache_info()

    def cache_clear(self) -> None:
        self._measure.cache_clear()
        self._cap_height.cache_clear()


default_metrics: MetricsProvider = CachedMetrics(ReportLabMetrics())

"""Text utilities relying on font width metrics."""
from __future__ import annotations

import logging
import re
from typing import Any, List, Optional

from .constants import HYPHEN, NEW_LINE_PATTERN
from .errors import MeasurementError, NoFitError
from .metrics import MetricsProvider, default_metrics


logger = logging.getLogger(__name__)

_NEW_LINE = re.compile(NEW_LINE_PATTERN)


def split_hard_lines(text: str) -> List[str]:
    """Split text on explicit line breaks, dropping trailing empty segments.

    Text made only of line breaks has no segments; empty text is one empty segment.
    """
    if not text:
        return [""]
    segments = _NEW_LINE.split(text)
    while segments and segments[-1] == "":
        segments.pop()
    return segments


def get_string_width(text: str, font: Any, font_size: float, metrics: Optional[MetricsProvider] = None) -> float:
    """Width of the longest hard segment of ``text``.

    "Longest" is by character count, not by rendered width, so for
    proportional fonts a shorter but wider segment is not considered.
    """
    if not text:
        raise MeasurementError("Cannot determine the width of an empty string")
    segments = split_hard_lines(text)
    if not segments:
        raise MeasurementError(f"No segments to measure in {text!r}")
    metrics = metrics or default_metrics
    longest = max(segments, key=len)
    return metrics.measure(font, longest, font_size)


def get_font_height(font: Any, font_size: float, metrics: Optional[MetricsProvider] = None) -> float:
    """Line height of ``font`` derived from its cap height."""
    metrics = metrics or default_metrics
    return metrics.cap_height(font) / 1000 * font_size


def wrap_text_to_width(
    text: str,
    font: Any,
    font_size: float,
    max_width: float,
    metrics: Optional[MetricsProvider] = None,
) -> List[str]:
    """Wrap text into lines that do not exceed max_width.

    Every hard line of ``text`` is wrapped on its own. Lines are broken at the
    rightmost space that leaves a fitting prefix; a word that is too wide on
    its own is broken at the rightmost fitting character and gets a hyphen.

    Raises:
        MeasurementError: the metrics provider failed.
        NoFitError: ``max_width`` is narrower than a single character.
    """
    metrics = metrics or default_metrics
    lines: List[str] = []
    for segment in split_hard_lines(text):
        if _fits(segment, font, font_size, max_width, metrics):
            lines.append(segment)
        else:
            lines.extend(_wrap_line(segment, font, font_size, max_width, metrics))
    return lines


def _fits(line: str, font, font_size, max_width, metrics: MetricsProvider) -> bool:
    if not line:
        return True
    return metrics.measure(font, line, font_size) <= max_width


def _wrap_line(line: str, font, font_size, max_width, metrics: MetricsProvider) -> List[str]:
    lines: List[str] = []
    remaining = line
    while not _fits(remaining, font, font_size, max_width, metrics):
        split = _split_by_words(remaining, font, font_size, max_width, metrics)
        if split is None:
            split = _split_by_size(remaining, font, font_size, max_width, metrics)
        head, rest = split
        lines.append(head)
        # no progress or nothing left after the split point
        if rest == remaining or not rest:
            return lines
        remaining = rest
    lines.append(remaining)
    return lines


def _split_by_words(line: str, font, font_size, max_width, metrics: MetricsProvider):
    """Longest fitting prefix of whole words, and the rest of the line."""
    words = line.split(" ")
    for i in range(len(words) - 1, 0, -1):
        head = " ".join(words[:i])
        if head and _fits(head, font, font_size, max_width, metrics):
            return head, " ".join(words[i:])
    return None


def _split_by_size(line: str, font, font_size, max_width, metrics: MetricsProvider):
    """Longest fitting hyphenated prefix, and the rest of the line."""
    for i in range(len(line) - 1, 0, -1):
        head = line[:i] + HYPHEN
        if _fits(head, font, font_size, max_width, metrics):
            logger.debug("Forced break of %r after %d characters", line, i)
            return head, line[i:]
    raise NoFitError(line, max_width)

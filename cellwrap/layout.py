"""Layout helpers for sizing wrapped cell text."""
from typing import Any, List, Optional, Sequence, Tuple

from .constants import (
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    LINE_GAP_RATIO,
    PADDING_RATIO,
)
from .metrics import MetricsProvider
from .text_utils import get_font_height, wrap_text_to_width


def inner_width(column_width: float, padding_ratio: float = PADDING_RATIO) -> float:
    """Return the width left for text after padding both sides of a column.

    Args:
        column_width: Width of the column in points
        padding_ratio: Ratio of the column width used as padding on each side
    Returns:
        The usable text width in points
    """
    return column_width - 2 * column_width * padding_ratio


def wrapped_height(
    lines: Sequence[str],
    font: Any,
    font_size: float,
    metrics: Optional[MetricsProvider] = None,
    line_gap_ratio: float = LINE_GAP_RATIO,
) -> float:
    """Height of a block of wrapped lines, with gaps proportional to the font size."""
    if not lines:
        return 0.0
    line_height = get_font_height(font, font_size, metrics)
    gap = font_size * line_gap_ratio
    return len(lines) * line_height + (len(lines) - 1) * gap


def wrap_cell(
    text: str,
    font: Any = DEFAULT_FONT_NAME,
    font_size: float = DEFAULT_FONT_SIZE,
    column_width: float = DEFAULT_COLUMN_WIDTH,
    metrics: Optional[MetricsProvider] = None,
    padding_ratio: float = PADDING_RATIO,
    line_gap_ratio: float = LINE_GAP_RATIO,
) -> Tuple[List[str], float]:
    """Wrap a cell value to its padded column and return (lines, height)."""
    lines = wrap_text_to_width(text, font, font_size, inner_width(column_width, padding_ratio), metrics)
    return lines, wrapped_height(lines, font, font_size, metrics, line_gap_ratio)

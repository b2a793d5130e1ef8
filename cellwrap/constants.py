"""Shared typography and layout constants for cell text wrapping."""
from typing import Dict

# Hard line breaks inside a cell value
NEW_LINE_PATTERN: str = r"\r?\n"

# Appended to a line that ends in a forced mid-word break
HYPHEN: str = "-"

# Table defaults
DEFAULT_FONT_NAME: str = "Helvetica"
DEFAULT_FONT_SIZE: int = 8
DEFAULT_COLUMN_WIDTH: float = 70.0

# 5% padding on each side inside each cell
PADDING_RATIO: float = 0.05

# Gap between wrapped lines relative to the font size
LINE_GAP_RATIO: float = 0.25

# Cap heights (1/1000 em) from the Adobe AFM files of the standard 14 fonts.
# ReportLab does not load these for its built-in faces. Symbol and
# ZapfDingbats define none.
STANDARD_CAP_HEIGHTS: Dict[str, float] = {
    "Courier": 562,
    "Courier-Bold": 562,
    "Courier-Oblique": 562,
    "Courier-BoldOblique": 562,
    "Helvetica": 718,
    "Helvetica-Bold": 718,
    "Helvetica-Oblique": 718,
    "Helvetica-BoldOblique": 718,
    "Times-Roman": 662,
    "Times-Bold": 676,
    "Times-Italic": 653,
    "Times-BoldItalic": 669,
}

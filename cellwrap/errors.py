"""Errors raised while measuring and wrapping cell text."""


class MeasurementError(Exception):
    """The metrics provider could not measure a string or read a font metric."""


class NoFitError(Exception):
    """Not even a single character plus hyphen fits into the width budget."""

    def __init__(self, text: str, max_width: float):
        super().__init__(f"No character of {text!r} fits into width {max_width}")
        self.text = text
        self.max_width = max_width

"""
Errors raised while reading the plan, ZIP, and request files.

Both abort the run. Unresolved ZIP codes are not errors and never raise.
"""


class SourceReadError(OSError):
    """An input file is missing, unreadable, or not shaped like the expected CSV."""

    def __init__(self, message: str, filepath=None):
        super().__init__(message)
        self.filepath = filepath


class FieldParseError(ValueError):
    """A row carries a field that does not parse (non-numeric rate, bad ZIP, ...)."""

    def __init__(self, message: str, filepath=None, row_number=None, field=None):
        super().__init__(message)
        self.filepath = filepath
        self.row_number = row_number
        self.field = field

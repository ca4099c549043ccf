"""
Exceptions raised by the lawtext converters.
"""


class LawTextError(Exception):
    """Base class for lawtext failures."""
    pass


class ExtractionError(LawTextError):
    """Raised when a single HTML file cannot be read for text extraction."""
    pass


class UsageError(LawTextError):
    """Raised instead of exiting the process when a command line cannot be parsed."""
    pass

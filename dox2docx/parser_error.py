"""Error raised when the Doxygen XML tree cannot be turned into a model."""


class ParserError(Exception):
    """A malformed or unsupported construct in the Doxygen XML output."""

"""Exception hierarchy for Runeglyph."""


class RuneError(Exception):
    """Base exception for all Runeglyph errors."""

    pass


class InputError(RuneError):
    """Errors related to user-supplied values."""

    pass


class InvalidInputError(InputError):
    """Input text could not be turned into a rune value."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid rune value '{text}': {reason}")


class GeometryError(RuneError):
    """Errors in stroke or grid geometry."""

    pass


class StrokeError(GeometryError):
    """Malformed stroke definition."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid stroke: {reason}")


class ExportError(RuneError):
    """Error writing a rune to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to export rune to '{path}': {reason}")

"""Exception classes for reportkit."""


class ReportError(Exception):
    """Base exception for all reporting errors."""
    pass


class UnsupportedOperationError(ReportError, AttributeError):
    """Exception raised when a formatter has no stage or format by that name."""

    def __init__(self, name: str, owner: str = ""):
        """Initialize UnsupportedOperationError.

        Args:
            name: Operation name that could not be resolved
            owner: Name of the class the lookup was made against
        """
        message = f"Unsupported operation '{name}'"
        if owner:
            message += f" for {owner}"
        super().__init__(message)
        self.name = name
        self.owner = owner


class UnknownFormatError(ReportError):
    """Exception raised when no formatter is registered for a renderer/format pair."""

    def __init__(self, renderer: str, format: str):
        super().__init__(f"No formatter registered for format '{format}' on {renderer}")
        self.renderer = renderer
        self.format = format


class TemplateNotFoundError(ReportError, KeyError):
    """Exception raised when a named template does not exist."""

    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Template not found: {self.name!r}"


class ReportConfigError(ReportError):
    """Exception raised for configuration errors."""
    pass


class DataLoadError(ReportError):
    """Exception raised when input data cannot be loaded."""
    pass

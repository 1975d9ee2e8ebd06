"""Exceptions raised when documentation cannot be generated."""


class UnexpectedLanguageError(ValueError):
    """Raised for a language with no known filename suffix."""

    def __init__(self, language: object) -> None:
        """Record the offending language value."""
        super().__init__(f"Unexpected language: `{language}`")
        self.language = language


class ThemeNotFoundError(LookupError):
    """Raised when a configured theme cannot be located."""

    def __init__(self, theme: object) -> None:
        """Record the theme reference that failed to load."""
        super().__init__(f"Could not find theme: {theme}")
        self.theme = theme

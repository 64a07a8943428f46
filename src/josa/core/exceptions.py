"""Custom exception hierarchy for josa.

Selection failures are reported through these types by the strict API
and absorbed into documented fallbacks by the lenient API.
"""


class JosaError(Exception):
    """Base exception for josa.

    All custom exceptions in josa inherit from this class, so callers can
    catch every selection failure with a single except clause.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)
        self.message = message


class EmptyStringError(JosaError):
    """Noun has no characters.

    Raised by the strict selector when there is no last character to
    classify.
    """

    def __init__(self, message: str = "Empty string given to josa selector") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)


class NotHangulSyllableError(JosaError):
    """Character is not a composed Hangul syllable.

    Raised when the last character of a noun falls outside the Hangul
    Syllables block (가-힣), e.g. Latin letters, digits, jamo or markup.
    """

    def __init__(self, char: str, message: str | None = None) -> None:
        """Initialize the exception.

        Args:
            char: The offending character.
            message: Human-readable error message.
        """
        super().__init__(message or f"{char} is not a Hangul Syllable")
        self.char = char


class ConfigurationError(JosaError):
    """Configuration is invalid.

    Raised when a settings value cannot be applied.
    """

    def __init__(self, message: str = "Invalid configuration") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)

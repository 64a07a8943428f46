"""Protocol definitions for josa.

The selector depends on a single collaborator, the syllable classifier,
expressed here as a protocol so alternative decomposers can be plugged in.
"""

from typing import Protocol


class SyllableClassifierProtocol(Protocol):
    """Protocol for syllable classifier implementations.

    Decomposes one character and reports its trailing consonant.
    """

    def jongseong(self, char: str) -> str | None:
        """Get the trailing consonant (jongseong) of a syllable.

        Args:
            char: A single character.

        Returns:
            The trailing consonant jamo, or None for an open syllable.

        Raises:
            NotHangulSyllableError: If char is not a composed Hangul syllable.
        """
        ...

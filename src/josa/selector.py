"""Josa selection for Korean nouns.

Picks the postposition that agrees with the final syllable of a noun:

    >>> select("고양이", JosaCategory.I_GA)
    '가'
    >>> concat("curry", JosaCategory.I_GA)
    'curry이(가)'

`select` is strict and raises on input it cannot classify. `append_josa`
and the concatenation helpers are lenient and never raise a josa error.
"""

from josa.buffer import TextBuffer
from josa.categories import SURFACE_FORMS, JongseongClass, JosaCategory
from josa.core.config import Settings, get_settings
from josa.core.exceptions import EmptyStringError, NotHangulSyllableError
from josa.core.logging import get_logger
from josa.core.protocols import SyllableClassifierProtocol
from josa.hangul import HangulClassifier

logger = get_logger(__name__)

RIEUL = "ㄹ"


def lookup(category: JosaCategory, jongseong_class: JongseongClass) -> str:
    """Look up the surface form of a category after a syllable class.

    Args:
        category: Requested josa category.
        jongseong_class: Class of the preceding syllable.

    Returns:
        The surface form, possibly an empty string.
    """
    return SURFACE_FORMS[category].for_class(jongseong_class)


def ambiguity_marker(category: JosaCategory) -> str:
    """Return the dual-form marker of a category, e.g. 이(가)."""
    return SURFACE_FORMS[category].both


class JosaSelector:
    """Selects josa using a pluggable syllable classifier."""

    def __init__(
        self,
        classifier: SyllableClassifierProtocol | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the selector.

        Settings are read once here; append_josa never consults them.

        Args:
            classifier: Syllable classifier. Defaults to HangulClassifier.
            settings: Library settings. Defaults to get_settings().
        """
        self._classifier = classifier or HangulClassifier()
        self._log_fallbacks = (settings or get_settings()).log_fallbacks

    @property
    def classifier(self) -> SyllableClassifierProtocol:
        """The syllable classifier in use."""
        return self._classifier

    def classify(self, char: str) -> JongseongClass:
        """Classify the trailing consonant of a character.

        Args:
            char: A single character.

        Returns:
            OPEN, RIEUL or CLOSED.

        Raises:
            NotHangulSyllableError: If char is not a composed Hangul syllable.
        """
        jong = self._classifier.jongseong(char)
        if jong is None:
            return JongseongClass.OPEN
        if jong == RIEUL:
            return JongseongClass.RIEUL
        return JongseongClass.CLOSED

    def select(self, noun: str, category: JosaCategory) -> str:
        """Select the josa for a noun.

        Useful when the noun is later wrapped in markup, where the true last
        character would be a tag delimiter:

            >>> josa = select("고양이", JosaCategory.I_GA)
            >>> f'<span class="bold">고양이</span>{josa}'
            '<span class="bold">고양이</span>가'

        Args:
            noun: Noun the josa follows.
            category: Requested josa category.

        Returns:
            The surface form for the noun's last character.

        Raises:
            EmptyStringError: If noun is empty.
            NotHangulSyllableError: If the last character is not a Hangul syllable.
        """
        if not noun:
            raise EmptyStringError()
        return lookup(category, self.classify(noun[-1]))

    def append_josa(self, buffer: TextBuffer, category: JosaCategory) -> None:
        """Append the josa for the buffer's contents to the buffer.

        Never raises a josa error:
        - empty buffer: nothing is appended
        - last character not a Hangul syllable: the ambiguity marker,
          e.g. 이(가), is appended

        Args:
            buffer: Buffer to append to.
            category: Requested josa category.
        """
        try:
            josa = self.select(buffer.last_char() or "", category)
        except EmptyStringError:
            if self._log_fallbacks:
                logger.debug("josa_fallback_empty", category=category.value)
            return
        except NotHangulSyllableError as e:
            if self._log_fallbacks:
                logger.debug("josa_fallback_marker", char=e.char, category=category.value)
            josa = ambiguity_marker(category)

        buffer.push(josa)

    def concat_in_place(self, buffer: TextBuffer, category: JosaCategory) -> TextBuffer:
        """Append josa to buffer and return the same buffer."""
        self.append_josa(buffer, category)
        return buffer

    def concat(self, noun: str | TextBuffer, category: JosaCategory) -> str:
        """Return a new string of noun followed by its josa.

        The noun argument is not modified.
        """
        buffer = TextBuffer(str(noun))
        self.append_josa(buffer, category)
        return buffer.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(classifier={self._classifier!r})"


# Singleton instance
_selector: JosaSelector | None = None


def get_selector() -> JosaSelector:
    """Get the default selector instance."""
    global _selector
    if _selector is None:
        _selector = JosaSelector()
    return _selector


def classify(char: str) -> JongseongClass:
    """Classify a character with the default selector."""
    return get_selector().classify(char)


def select(noun: str, category: JosaCategory) -> str:
    """Select the josa for a noun with the default selector.

    Raises:
        EmptyStringError: If noun is empty.
        NotHangulSyllableError: If the last character is not a Hangul syllable.
    """
    return get_selector().select(noun, category)


def append_josa(buffer: TextBuffer, category: JosaCategory) -> None:
    """Append josa to buffer with the default selector."""
    get_selector().append_josa(buffer, category)


def concat_in_place(buffer: TextBuffer, category: JosaCategory) -> TextBuffer:
    """Append josa to buffer with the default selector and return it."""
    return get_selector().concat_in_place(buffer, category)


def concat(noun: str | TextBuffer, category: JosaCategory) -> str:
    """Return noun followed by its josa, using the default selector."""
    return get_selector().concat(noun, category)

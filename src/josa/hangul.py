"""Korean Hangul syllable decomposition.

한글 유니코드 음절 처리:
- 한글 음절 여부 판별
- 초성/중성/종성 분해 및 조합
- 종성(받침) 추출
"""

from __future__ import annotations

from josa.core.exceptions import NotHangulSyllableError

# =============================================================================
# Korean Unicode Constants
# =============================================================================

# 한글 음절 범위: 가(0xAC00) ~ 힣(0xD7A3)
HANGUL_START = 0xAC00
HANGUL_END = 0xD7A3

# 초성 (Initial consonants) - 19개
CHOSEONG = [
    'ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ', 'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ'
]

# 중성 (Medial vowels) - 21개
JUNGSEONG = [
    'ㅏ', 'ㅐ', 'ㅑ', 'ㅒ', 'ㅓ', 'ㅔ', 'ㅕ', 'ㅖ', 'ㅗ', 'ㅘ',
    'ㅙ', 'ㅚ', 'ㅛ', 'ㅜ', 'ㅝ', 'ㅞ', 'ㅟ', 'ㅠ', 'ㅡ', 'ㅢ', 'ㅣ'
]

# 종성 (Final consonants) - 28개 (첫번째는 종성 없음)
JONGSEONG = [
    '', 'ㄱ', 'ㄲ', 'ㄳ', 'ㄴ', 'ㄵ', 'ㄶ', 'ㄷ', 'ㄹ', 'ㄺ',
    'ㄻ', 'ㄼ', 'ㄽ', 'ㄾ', 'ㄿ', 'ㅀ', 'ㅁ', 'ㅂ', 'ㅄ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ'
]

JUNGSEONG_COUNT = len(JUNGSEONG)
JONGSEONG_COUNT = len(JONGSEONG)


# =============================================================================
# Helper Functions
# =============================================================================

def is_hangul_syllable(char: str) -> bool:
    """Check if character is a complete Hangul syllable (가-힣)."""
    if len(char) != 1:
        return False
    code = ord(char)
    return HANGUL_START <= code <= HANGUL_END


def decompose_syllable(char: str) -> tuple[str, str, str] | None:
    """Decompose a Hangul syllable into (초성, 중성, 종성).

    종성 is an empty string for open syllables.

    Example: 한 → (ㅎ, ㅏ, ㄴ)
    """
    if not is_hangul_syllable(char):
        return None

    code = ord(char) - HANGUL_START
    cho_idx = code // (JUNGSEONG_COUNT * JONGSEONG_COUNT)
    jung_idx = (code % (JUNGSEONG_COUNT * JONGSEONG_COUNT)) // JONGSEONG_COUNT
    jong_idx = code % JONGSEONG_COUNT

    return (CHOSEONG[cho_idx], JUNGSEONG[jung_idx], JONGSEONG[jong_idx])


def compose_syllable(cho: str, jung: str, jong: str = '') -> str:
    """Compose Hangul syllable from (초성, 중성, 종성).

    Unknown jamo are concatenated as-is instead of composed.

    Example: (ㅎ, ㅏ, ㄴ) → 한
    """
    try:
        cho_idx = CHOSEONG.index(cho)
        jung_idx = JUNGSEONG.index(jung)
        jong_idx = JONGSEONG.index(jong) if jong else 0
    except ValueError:
        return cho + jung + jong

    code = (
        HANGUL_START
        + (cho_idx * JUNGSEONG_COUNT * JONGSEONG_COUNT)
        + (jung_idx * JONGSEONG_COUNT)
        + jong_idx
    )
    return chr(code)


def jongseong(char: str) -> str | None:
    """Extract the 종성 (trailing consonant) of a syllable.

    Example: 한 → ㄴ, 하 → None

    Raises:
        NotHangulSyllableError: If char is not a composed Hangul syllable.
    """
    decomposed = decompose_syllable(char)
    if decomposed is None:
        raise NotHangulSyllableError(char)
    return decomposed[2] or None


class HangulClassifier:
    """Syllable classifier backed by Unicode Hangul block arithmetic."""

    def jongseong(self, char: str) -> str | None:
        """Return the trailing consonant of char, or None if it has none."""
        return jongseong(char)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

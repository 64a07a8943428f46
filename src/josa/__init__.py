"""Korean josa (postposition) selection.

Components:
- hangul: 한글 음절 분해/조합, 종성 추출
- categories: 조사 종류와 형태 표
- selector: strict selection and lenient appending
- buffer: mutable text buffer for in-place appending

Example:
    >>> from josa import JosaCategory, concat
    >>> f"{concat('유진', JosaCategory.EUN_NEUN)} {concat('고등어', JosaCategory.I_GA)} 먹고싶다"
    '유진은 고등어가 먹고싶다'
"""

from josa.buffer import TextBuffer
from josa.categories import SURFACE_FORMS, JongseongClass, JosaCategory, SurfaceForms
from josa.core.exceptions import EmptyStringError, JosaError, NotHangulSyllableError
from josa.hangul import HangulClassifier
from josa.selector import (
    JosaSelector,
    ambiguity_marker,
    append_josa,
    classify,
    concat,
    concat_in_place,
    get_selector,
    lookup,
    select,
)

__version__ = "0.1.0"

__all__ = [
    "SURFACE_FORMS",
    "EmptyStringError",
    "HangulClassifier",
    "JongseongClass",
    "JosaCategory",
    "JosaError",
    "JosaSelector",
    "NotHangulSyllableError",
    "SurfaceForms",
    "TextBuffer",
    "ambiguity_marker",
    "append_josa",
    "classify",
    "concat",
    "concat_in_place",
    "get_selector",
    "lookup",
    "select",
]

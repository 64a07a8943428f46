"""Josa categories and their surface-form table."""

from dataclasses import dataclass
from enum import Enum


class JosaCategory(Enum):
    """Josa alternations selected by the final syllable of a noun."""

    EUN_NEUN = "eun_neun"  # 은/는
    I_GA = "i_ga"  # 이/가
    EUL_REUL = "eul_reul"  # 을/를
    GWA_WA = "gwa_wa"  # 과/와
    I = "i"  # noqa: E741  이 (이다, 이랑, 이나 ...)
    EU = "eu"  # 으 (으로, 으면 ...)


class JongseongClass(Enum):
    """Phonological class of a syllable's trailing consonant."""

    OPEN = "open"  # no 받침
    RIEUL = "rieul"  # ㄹ 받침
    CLOSED = "closed"  # any other 받침


@dataclass(frozen=True, slots=True)
class SurfaceForms:
    """Surface forms of one josa category.

    Attributes:
        open: Form after a vowel-final syllable
        rieul: Form after a ㄹ-final syllable
        closed: Form after any other consonant-final syllable
        both: Ambiguity marker used when the syllable cannot be classified
    """

    open: str
    rieul: str
    closed: str
    both: str

    def for_class(self, jongseong_class: JongseongClass) -> str:
        """Return the form used after a syllable of the given class."""
        if jongseong_class is JongseongClass.OPEN:
            return self.open
        if jongseong_class is JongseongClass.RIEUL:
            return self.rieul
        return self.closed


SURFACE_FORMS: dict[JosaCategory, SurfaceForms] = {
    JosaCategory.EUN_NEUN: SurfaceForms(open="는", rieul="은", closed="은", both="은(는)"),
    JosaCategory.I_GA: SurfaceForms(open="가", rieul="이", closed="이", both="이(가)"),
    JosaCategory.EUL_REUL: SurfaceForms(open="를", rieul="을", closed="을", both="을(를)"),
    JosaCategory.GWA_WA: SurfaceForms(open="와", rieul="과", closed="과", both="와(과)"),
    JosaCategory.I: SurfaceForms(open="", rieul="이", closed="이", both="(이)"),
    JosaCategory.EU: SurfaceForms(open="", rieul="", closed="으", both="(으)"),
}

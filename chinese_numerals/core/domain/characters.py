"""
Characters — Символы китайских числительных

Единственный источник символов для всех шкал и вариантов записи:
- NumChar: абстрактный символ (цифра, разряд, единица шкалы, знак)
- Case: строчные (小写) / прописные (大写, финансовые) формы
- Variant: упрощённая / традиционная письменность
- CHAR_TABLES: четыре таблицы NumChar → str

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая таблица покрывает все NumChar (без пропусков)
2. Все символы одного числа берутся из одной таблицы
3. Таблицы неизменяемы (MappingProxyType)
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


# =============================================================================
# ENUMS
# =============================================================================


class Case(str, Enum):
    """Регистр числительных"""

    LOWER = "lower"  # 小写: обычные тексты
    UPPER = "upper"  # 大写: финансовые документы (защита от подделки)


class Variant(str, Enum):
    """Вариант письменности"""

    SIMPLIFIED = "simplified"  # КНР, Сингапур, Малайзия
    TRADITIONAL = "traditional"  # Тайвань, Гонконг, Макао


class NumChar(str, Enum):
    """
    Абстрактный символ числительного.

    Значение enum — внутреннее имя (пиньинь), не выводимый символ.
    Выводимый символ определяется таблицей (Case × Variant).
    """

    # Цифры
    ZERO = "ling"
    ONE = "yi1"
    TWO = "er"
    THREE = "san"
    FOUR = "si"
    FIVE = "wu"
    SIX = "liu"
    SEVEN = "qi"
    EIGHT = "ba"
    NINE = "jiu"

    # Разряды внутри группы
    SHI = "shi"  # 十
    BAI = "bai"  # 百
    QIAN = "qian"  # 千

    # Единицы шкалы
    WAN = "wan"  # 万
    YI = "yi"  # 亿
    ZHAO = "zhao"  # 兆
    JING = "jing"  # 京
    GAI = "gai"  # 垓
    ZI = "zi"  # 秭
    RANG = "rang"  # 穰
    GOU = "gou"  # 沟
    JIAN = "jian"  # 涧
    ZHENG = "zheng"  # 正
    ZAI = "zai"  # 载

    # Знак
    NEG = "fu"  # 负


# Цифры 0-9 в порядке значения
DIGITS: Final[tuple[NumChar, ...]] = (
    NumChar.ZERO,
    NumChar.ONE,
    NumChar.TWO,
    NumChar.THREE,
    NumChar.FOUR,
    NumChar.FIVE,
    NumChar.SIX,
    NumChar.SEVEN,
    NumChar.EIGHT,
    NumChar.NINE,
)

# Разряды внутри группы по десятичной степени (индекс 0 = единицы, без разряда)
SUB_UNITS: Final[tuple[NumChar | None, ...]] = (
    None,
    NumChar.SHI,
    NumChar.BAI,
    NumChar.QIAN,
)

# Единицы шкалы по возрастанию (万 → 载)
SCALE_UNITS: Final[tuple[NumChar, ...]] = (
    NumChar.WAN,
    NumChar.YI,
    NumChar.ZHAO,
    NumChar.JING,
    NumChar.GAI,
    NumChar.ZI,
    NumChar.RANG,
    NumChar.GOU,
    NumChar.JIAN,
    NumChar.ZHENG,
    NumChar.ZAI,
)


# =============================================================================
# CHARACTER TABLES
# =============================================================================

_LOWERCASE_SIMP: Final[dict[NumChar, str]] = dict(
    zip(NumChar, "零一二三四五六七八九十百千万亿兆京垓秭穰沟涧正载负")
)

_LOWERCASE_TRAD: Final[dict[NumChar, str]] = {
    **_LOWERCASE_SIMP,
    NumChar.WAN: "萬",
    NumChar.YI: "億",
    NumChar.GOU: "溝",
    NumChar.JIAN: "澗",
    NumChar.ZAI: "載",
    NumChar.NEG: "負",
}

_UPPERCASE_SIMP: Final[dict[NumChar, str]] = {
    **_LOWERCASE_SIMP,
    **dict(zip(DIGITS[1:], "壹贰叁肆伍陆柒捌玖")),
    NumChar.SHI: "拾",
    NumChar.BAI: "佰",
    NumChar.QIAN: "仟",
}

# Традиционные прописные: прописные цифры/разряды + традиционные единицы шкалы
_UPPERCASE_TRAD: Final[dict[NumChar, str]] = {
    **_UPPERCASE_SIMP,
    NumChar.TWO: "貳",
    NumChar.THREE: "叄",
    NumChar.SIX: "陸",
    NumChar.WAN: "萬",
    NumChar.YI: "億",
    NumChar.GOU: "溝",
    NumChar.JIAN: "澗",
    NumChar.ZAI: "載",
    NumChar.NEG: "負",
}

CHAR_TABLES: Final[Mapping[tuple[Case, Variant], Mapping[NumChar, str]]] = MappingProxyType(
    {
        (Case.LOWER, Variant.SIMPLIFIED): MappingProxyType(_LOWERCASE_SIMP),
        (Case.LOWER, Variant.TRADITIONAL): MappingProxyType(_LOWERCASE_TRAD),
        (Case.UPPER, Variant.SIMPLIFIED): MappingProxyType(_UPPERCASE_SIMP),
        (Case.UPPER, Variant.TRADITIONAL): MappingProxyType(_UPPERCASE_TRAD),
    }
)


def get_char_table(case: Case, variant: Variant) -> Mapping[NumChar, str]:
    """
    Таблица символов для заданного регистра и варианта письменности.

    Args:
        case: Регистр (LOWER/UPPER)
        variant: Вариант письменности (SIMPLIFIED/TRADITIONAL)

    Returns:
        Неизменяемое отображение NumChar → символ
    """
    return CHAR_TABLES[(Case(case), Variant(variant))]

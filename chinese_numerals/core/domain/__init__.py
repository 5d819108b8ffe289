"""
Domain models and value objects.

Символы числительных, таблицы шкал и публичные типы числительных.
"""

from chinese_numerals.core.domain.characters import (
    CHAR_TABLES,
    DIGITS,
    SCALE_UNITS,
    SUB_UNITS,
    Case,
    NumChar,
    Variant,
    get_char_table,
)
from chinese_numerals.core.domain.scales import (
    GROUP_BASE,
    GROUP_WIDTH,
    LONG_SCALE_TABLE,
    MID_SCALE_TABLE,
    MYRIAD_SCALE_TABLE,
    SCALE_TABLES,
    SHORT_SCALE_TABLE,
    Scale,
    ScaleTable,
    ScaleUnit,
    get_scale_table,
)
from chinese_numerals.core.domain.numeral import (
    ChineseNumeral,
    LongScaleBigInt,
    LongScaleInt,
    MidScaleBigInt,
    MidScaleInt,
    MyriadScaleBigInt,
    MyriadScaleInt,
    ShortScaleInt,
    numeral_type,
    to_chinese,
)

__all__ = [
    # Characters
    "CHAR_TABLES",
    "DIGITS",
    "SCALE_UNITS",
    "SUB_UNITS",
    "Case",
    "NumChar",
    "Variant",
    "get_char_table",
    # Scales
    "GROUP_BASE",
    "GROUP_WIDTH",
    "LONG_SCALE_TABLE",
    "MID_SCALE_TABLE",
    "MYRIAD_SCALE_TABLE",
    "SCALE_TABLES",
    "SHORT_SCALE_TABLE",
    "Scale",
    "ScaleTable",
    "ScaleUnit",
    "get_scale_table",
    # Numeral types
    "ChineseNumeral",
    "ShortScaleInt",
    "MyriadScaleInt",
    "MidScaleInt",
    "LongScaleInt",
    "MyriadScaleBigInt",
    "MidScaleBigInt",
    "LongScaleBigInt",
    "numeral_type",
    "to_chinese",
]

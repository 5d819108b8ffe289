"""
chinese_numerals — запись целых чисел китайскими числительными

Четыре шкалы (万进 myriad, 下数 short, 中数 mid, 上数 long),
строчные (小写) и прописные (大写) цифры, упрощённая и традиционная
письменность.

Usage:
    from chinese_numerals import MidScaleInt, ShortScaleInt

    num = ShortScaleInt.from_int(1_0203_0405)
    num.to_lowercase_simp()  # '一垓零二兆零三万零四百零五'
    f"{num:#}"               # '壹垓零贰兆零叁万零肆佰零伍'

    MidScaleInt.from_int(1_0203_0405).to_uppercase_trad()
    # '壹億零貳佰零叄萬零肆佰零伍'
"""

from chinese_numerals.core.domain import (
    Case,
    ChineseNumeral,
    LongScaleBigInt,
    LongScaleInt,
    MidScaleBigInt,
    MidScaleInt,
    MyriadScaleBigInt,
    MyriadScaleInt,
    NumChar,
    Scale,
    ScaleTable,
    ScaleUnit,
    ShortScaleInt,
    Variant,
    get_scale_table,
    numeral_type,
    to_chinese,
)
from chinese_numerals.core.logger import get_logger, setup_logging
from chinese_numerals.core.math import Group, MagnitudeOutOfRange, NumeralFormat, Sign

__version__ = "0.2.0"

__all__ = [
    # Types
    "Case",
    "Group",
    "NumChar",
    "NumeralFormat",
    "Scale",
    "ScaleTable",
    "ScaleUnit",
    "Sign",
    "Variant",
    # Numeral types
    "ChineseNumeral",
    "ShortScaleInt",
    "MyriadScaleInt",
    "MidScaleInt",
    "LongScaleInt",
    "MyriadScaleBigInt",
    "MidScaleBigInt",
    "LongScaleBigInt",
    # Functions
    "get_scale_table",
    "numeral_type",
    "to_chinese",
    # Errors
    "MagnitudeOutOfRange",
    # Logging
    "get_logger",
    "setup_logging",
]

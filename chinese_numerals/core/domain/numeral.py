"""
Numeral — Публичные типы китайских числительных

Immutable Pydantic модели: знак + модуль, шкала и ёмкость — атрибуты класса.
Один базовый класс ChineseNumeral содержит весь рендеринг; подклассы
отличаются только шкалой и ёмкостью:

| Тип                 | Шкала   | Ёмкость (max abs)   |
|---------------------|---------|---------------------|
| ShortScaleInt       | SHORT   | 10^15 - 1           |
| MyriadScaleInt      | MYRIAD  | 2^128 - 1 (u128)    |
| MidScaleInt         | MID     | 2^128 - 1 (u128)    |
| LongScaleInt        | LONG    | 2^128 - 1 (u128)    |
| MyriadScaleBigInt   | MYRIAD  | 10^48 - 1           |
| MidScaleBigInt      | MID     | 10^88 - 1           |
| LongScaleBigInt     | LONG    | 10^8192 - 1         |

"Fixed" типы повторяют диапазон машинных целых хоста, "Big" — полную
ёмкость таблицы шкалы.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Создание вне ёмкости → MagnitudeOutOfRange (from_int) или
   ValidationError (прямой конструктор), никогда не усечение
2. Sign.NIL тогда и только тогда, когда magnitude == 0
3. Рендеринг не изменяет модель и не может завершиться ошибкой
"""

from functools import total_ordering
from typing import ClassVar, SupportsIndex

from pydantic import BaseModel, Field, field_validator

from chinese_numerals.core.domain.characters import Case, Variant
from chinese_numerals.core.domain.scales import (
    LONG_SCALE_TABLE,
    MID_SCALE_TABLE,
    MYRIAD_SCALE_TABLE,
    SHORT_SCALE_TABLE,
    Scale,
    ScaleTable,
    get_scale_table,
)
from chinese_numerals.core.logger import get_logger
from chinese_numerals.core.math.magnitude import (
    U128_MAX,
    MagnitudeOutOfRange,
    Sign,
    describe_magnitude,
    split_sign,
    to_host_int,
    validate_magnitude,
)
from chinese_numerals.core.math.rendering import NumeralFormat, render_magnitude

logger = get_logger(__name__)


# =============================================================================
# BASE MODEL
# =============================================================================


@total_ordering
class ChineseNumeral(BaseModel):
    """
    Базовое китайское числительное.

    Не создаётся напрямую: используйте ShortScaleInt, MyriadScaleInt и т.д.
    """

    sign: Sign = Field(Sign.NIL, description="Знак числа")
    magnitude: int = Field(0, description="Модуль числа (>= 0)")

    model_config = {"frozen": True}

    scale: ClassVar[Scale]
    max_abs: ClassVar[int]

    @classmethod
    def _require_scale(cls) -> None:
        """Базовый класс без шкалы не создаёт числительных"""
        if not hasattr(cls, "scale"):
            raise TypeError(f"{cls.__name__} has no scale; use a scale-specific numeral type")

    @field_validator("magnitude")
    @classmethod
    def validate_magnitude_range(cls, v: int, info) -> int:
        """Модуль в пределах ёмкости и согласован со знаком"""
        cls._require_scale()
        validate_magnitude(v, cls.scale, cls.max_abs)

        if "sign" in info.data:
            sign = info.data["sign"]
            if (sign == Sign.NIL) != (v == 0):
                raise ValueError(f"sign {sign.value} is inconsistent with magnitude")
        return v

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: SupportsIndex) -> "ChineseNumeral":
        """
        Числительное из целого числа хоста.

        Args:
            value: int, numpy-целое или любой объект с __index__

        Returns:
            Числительное этого типа

        Raises:
            MagnitudeOutOfRange: Если abs(value) > max_abs
            TypeError: Если value не целое

        Examples:
            >>> ShortScaleInt.from_int(1_0203_0405).to_lowercase_simp()
            '一垓零二兆零三万零四百零五'
        """
        sign, magnitude = split_sign(value)
        return cls.from_sign_magnitude(sign, magnitude)

    @classmethod
    def from_sign_magnitude(cls, sign: Sign, magnitude: SupportsIndex) -> "ChineseNumeral":
        """
        Числительное из знака и модуля. Нулевой модуль всегда даёт Sign.NIL.

        Raises:
            MagnitudeOutOfRange: Если magnitude > max_abs
            ValueError: Если magnitude < 0
            pydantic.ValidationError: Если Sign.NIL при ненулевом модуле
            TypeError: Если вызван на ChineseNumeral без шкалы
        """
        cls._require_scale()
        magnitude = to_host_int(magnitude)
        try:
            validate_magnitude(magnitude, cls.scale, cls.max_abs)
        except MagnitudeOutOfRange as exc:
            logger.debug("%s rejected: %s", cls.__name__, exc)
            raise

        if magnitude == 0:
            return cls()
        return cls(sign=Sign(sign), magnitude=magnitude)

    @classmethod
    def new_non_pos(cls, abs_value: SupportsIndex) -> "ChineseNumeral":
        """
        Неположительное числительное по модулю.

        Позволяет получить -(2^128 - 1) на "fixed" типах, что ниже
        минимума любого знакового машинного целого.
        """
        return cls.from_sign_magnitude(Sign.NEG, abs_value)

    @classmethod
    def max_value(cls) -> "ChineseNumeral":
        """Наибольшее выразимое число"""
        cls._require_scale()
        return cls(sign=Sign.POS, magnitude=cls.max_abs)

    @classmethod
    def min_value(cls) -> "ChineseNumeral":
        """Наименьшее выразимое число"""
        cls._require_scale()
        return cls(sign=Sign.NEG, magnitude=cls.max_abs)

    @classmethod
    def scale_table(cls) -> ScaleTable:
        cls._require_scale()
        return get_scale_table(cls.scale)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, fmt: NumeralFormat = NumeralFormat()) -> str:
        """
        Запись числа китайскими символами.

        Args:
            fmt: Регистр и вариант письменности

        Returns:
            Числительное; ноль → "零"
        """
        return render_magnitude(self.sign, self.magnitude, self.scale_table(), fmt)

    def to_lowercase(self, variant: Variant = Variant.SIMPLIFIED) -> str:
        """Строчные цифры (小写, обычные тексты)"""
        return self.render(NumeralFormat(case=Case.LOWER, variant=Variant(variant)))

    def to_lowercase_simp(self) -> str:
        """Строчные цифры, упрощённая письменность"""
        return self.to_lowercase(Variant.SIMPLIFIED)

    def to_lowercase_trad(self) -> str:
        """Строчные цифры, традиционная письменность"""
        return self.to_lowercase(Variant.TRADITIONAL)

    def to_uppercase(self, variant: Variant = Variant.SIMPLIFIED) -> str:
        """Прописные цифры (大写, финансовые документы)"""
        return self.render(NumeralFormat(case=Case.UPPER, variant=Variant(variant)))

    def to_uppercase_simp(self) -> str:
        """Прописные цифры, упрощённая письменность"""
        return self.to_uppercase(Variant.SIMPLIFIED)

    def to_uppercase_trad(self) -> str:
        """Прописные цифры, традиционная письменность"""
        return self.to_uppercase(Variant.TRADITIONAL)

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_lowercase_simp()

    def __repr__(self) -> str:
        # Модуль через describe_magnitude: repr(int) ограничен sys.get_int_max_str_digits()
        return (
            f"{type(self).__name__}(sign={self.sign!r}, "
            f"magnitude={describe_magnitude(self.magnitude)})"
        )

    def __format__(self, format_spec: str) -> str:
        """"{}" → строчные, "{:#}" → прописные, "t"/"s" → письменность"""
        return self.render(NumeralFormat.from_format_spec(format_spec))

    def __int__(self) -> int:
        return -self.magnitude if self.sign == Sign.NEG else self.magnitude

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return int(self) < int(other)


# =============================================================================
# FIXED-WIDTH TYPES
# =============================================================================


class ShortScaleInt(ChineseNumeral):
    """
    Short scale (下数).

    「下数者，十十变之。若言十万曰亿，十亿曰兆，十兆曰京也。」
    """

    scale: ClassVar[Scale] = Scale.SHORT
    max_abs: ClassVar[int] = SHORT_SCALE_TABLE.max_abs


class MyriadScaleInt(ChineseNumeral):
    """
    Myriad scale (万进), диапазон u128.

    「以万进者，万万曰亿，万亿曰兆。」
    """

    scale: ClassVar[Scale] = Scale.MYRIAD
    max_abs: ClassVar[int] = U128_MAX


class MidScaleInt(ChineseNumeral):
    """
    Mid-scale (中数), диапазон u128.

    「中数者，万万变之。若言万万曰亿，万万亿曰兆，万万兆曰京也。」
    """

    scale: ClassVar[Scale] = Scale.MID
    max_abs: ClassVar[int] = U128_MAX


class LongScaleInt(ChineseNumeral):
    """
    Long scale (上数), диапазон u128.

    「上数者，数穷则变。若言万万曰亿，亿亿曰兆、兆兆曰京也。」
    """

    scale: ClassVar[Scale] = Scale.LONG
    max_abs: ClassVar[int] = U128_MAX


# =============================================================================
# BIG INTEGER TYPES
# =============================================================================


class MyriadScaleBigInt(ChineseNumeral):
    """Myriad scale (万进), вся ёмкость шкалы: до 载 (10^44)"""

    scale: ClassVar[Scale] = Scale.MYRIAD
    max_abs: ClassVar[int] = MYRIAD_SCALE_TABLE.max_abs


class MidScaleBigInt(ChineseNumeral):
    """Mid-scale (中数), вся ёмкость шкалы: до 载 (10^80)"""

    scale: ClassVar[Scale] = Scale.MID
    max_abs: ClassVar[int] = MID_SCALE_TABLE.max_abs


class LongScaleBigInt(ChineseNumeral):
    """Long scale (上数), вся ёмкость шкалы: до 载 (10^4096)"""

    scale: ClassVar[Scale] = Scale.LONG
    max_abs: ClassVar[int] = LONG_SCALE_TABLE.max_abs


# =============================================================================
# FACTORIES
# =============================================================================

_FIXED_TYPES: dict[Scale, type[ChineseNumeral]] = {
    Scale.SHORT: ShortScaleInt,
    Scale.MYRIAD: MyriadScaleInt,
    Scale.MID: MidScaleInt,
    Scale.LONG: LongScaleInt,
}

# У SHORT нет отдельного big-типа: его ёмкость меньше u128
_BIG_TYPES: dict[Scale, type[ChineseNumeral]] = {
    Scale.SHORT: ShortScaleInt,
    Scale.MYRIAD: MyriadScaleBigInt,
    Scale.MID: MidScaleBigInt,
    Scale.LONG: LongScaleBigInt,
}


def numeral_type(scale: Scale, big: bool = False) -> type[ChineseNumeral]:
    """
    Тип числительного для шкалы.

    Args:
        scale: Шкала
        big: True → полная ёмкость шкалы, False → диапазон u128

    Returns:
        Подкласс ChineseNumeral
    """
    types = _BIG_TYPES if big else _FIXED_TYPES
    return types[Scale(scale)]


def to_chinese(
    value: SupportsIndex,
    scale: Scale = Scale.MYRIAD,
    uppercase: bool = False,
    variant: Variant = Variant.SIMPLIFIED,
    big: bool = True,
) -> str:
    """
    Запись целого числа китайскими символами одним вызовом.

    Args:
        value: Целое число
        scale: Шкала (default MYRIAD)
        uppercase: Прописные (大写) цифры
        variant: Вариант письменности
        big: Использовать полную ёмкость шкалы

    Returns:
        Китайское числительное

    Raises:
        MagnitudeOutOfRange: Если abs(value) превышает ёмкость
        TypeError: Если value не целое

    Examples:
        >>> to_chinese(-15)
        '负十五'
        >>> to_chinese(1_0203_0405, Scale.MID, uppercase=True, variant=Variant.TRADITIONAL)
        '壹億零貳佰零叄萬零肆佰零伍'
    """
    numeral = numeral_type(scale, big).from_int(value)
    case = Case.UPPER if uppercase else Case.LOWER
    return numeral.render(NumeralFormat(case=case, variant=Variant(variant)))

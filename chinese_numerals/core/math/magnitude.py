"""
Magnitude — Знак и модуль целого числа, проверка ёмкости шкалы

Модуль обеспечивает единственный путь от целого числа хоста к паре
(знак, модуль), с которой работает весь остальной код:
- Извлечение знака и модуля (int, numpy-целые, любой __index__)
- Проверка ёмкости: модуль не должен превышать max_abs шкалы
- MagnitudeOutOfRange — единственная доменная ошибка библиотеки

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Модуль всегда >= 0
2. Sign.NIL тогда и только тогда, когда модуль == 0
3. Выход за ёмкость → exception, никогда не усечение
"""

import operator
from enum import Enum
from typing import Final, SupportsIndex

from chinese_numerals.core.domain.scales import Scale


# =============================================================================
# CONSTANTS
# =============================================================================

# Максимум беззнакового 128-битного целого (ёмкость "fixed" типов)
U128_MAX: Final[int] = 2**128 - 1

# Порог (в битах), выше которого значение в сообщениях заменяется описанием.
# str(int) для очень больших чисел упирается в sys.get_int_max_str_digits()
_MESSAGE_MAX_BITS: Final[int] = 1024


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак числа"""

    NEG = "neg"
    NIL = "nil"  # ноль
    POS = "pos"


# =============================================================================
# EXCEPTIONS
# =============================================================================


def describe_magnitude(magnitude: int) -> str:
    """Печатное представление модуля, безопасное для очень больших чисел"""
    if magnitude.bit_length() <= _MESSAGE_MAX_BITS:
        return str(magnitude)
    return f"<{magnitude.bit_length()}-bit integer>"


class MagnitudeOutOfRange(ValueError):
    """
    Модуль числа превышает ёмкость шкалы.

    Возникает только при создании числительного. Рендеринг уже созданного
    числительного не может завершиться ошибкой.
    """

    def __init__(self, scale: Scale, magnitude: int, max_abs: int):
        self.scale = Scale(scale)
        self.magnitude = magnitude
        self.max_abs = max_abs
        super().__init__(
            f"Absolute value {describe_magnitude(magnitude)} out of range "
            f"for a {self.scale.display_name} number"
        )


# =============================================================================
# SIGN / MAGNITUDE
# =============================================================================


def to_host_int(value: SupportsIndex) -> int:
    """
    Конверсия целого хоста в Python int.

    Args:
        value: int, numpy-целое или любой объект с __index__

    Returns:
        Python int

    Raises:
        TypeError: Если value — bool или не целое (float, str, Decimal, ...)
    """
    if isinstance(value, bool):
        raise TypeError("bool is not accepted as an integer value")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"Expected an integer, got {type(value).__name__}"
        ) from None


def split_sign(value: SupportsIndex) -> tuple[Sign, int]:
    """
    Разделение целого числа на знак и модуль.

    Args:
        value: Целое число (любой ширины)

    Returns:
        (sign, magnitude), magnitude >= 0

    Examples:
        >>> split_sign(-5)
        (<Sign.NEG: 'neg'>, 5)
        >>> split_sign(0)
        (<Sign.NIL: 'nil'>, 0)
    """
    number = to_host_int(value)
    if number < 0:
        return Sign.NEG, -number
    if number > 0:
        return Sign.POS, number
    return Sign.NIL, 0


def validate_magnitude(magnitude: int, scale: Scale, max_abs: int) -> int:
    """
    Проверка модуля против ёмкости шкалы.

    Args:
        magnitude: Модуль (>= 0)
        scale: Шкала (для сообщения об ошибке)
        max_abs: Максимальный допустимый модуль

    Returns:
        magnitude без изменений

    Raises:
        ValueError: Если magnitude < 0
        MagnitudeOutOfRange: Если magnitude > max_abs
    """
    if magnitude < 0:
        raise ValueError(f"magnitude must be non-negative, got {magnitude}")
    if magnitude > max_abs:
        raise MagnitudeOutOfRange(scale, magnitude, max_abs)
    return magnitude

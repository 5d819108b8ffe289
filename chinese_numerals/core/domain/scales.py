"""
Scales — Таблицы шкал китайских числительных

Четыре исторические системы наименования больших чисел
(《五经算术》: 下数, 中数, 上数 + 万进):

- SHORT (下数): 「十十变之」 — новое имя на каждый разряд выше 千
  (万=10^4, 亿=10^5, 兆=10^6, ...)
- MYRIAD (万进): 「万万曰亿，万亿曰兆」 — новое имя каждые 4 разряда
- MID (中数): 「万万变之」 — новое имя каждые 8 разрядов, 万 в середине
- LONG (上数): 「数穷则变」 — каждое имя равно квадрату предыдущего
  (兆=亿亿, 京=兆兆, ...)

Таблица шкалы — единственное место, где шкалы различаются.
Алгоритм разбиения и сборки работает одинаково для всех шкал.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экспоненты единиц строго возрастают, первая единица — 万 (10^4)
2. capacity_exponent > экспоненты последней единицы
3. Ширина коэффициента каждой единицы <= её экспоненты (вложенная запись
   коэффициента использует только младшие единицы)
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, NamedTuple

from chinese_numerals.core.domain.characters import SCALE_UNITS, NumChar


# =============================================================================
# CONSTANTS
# =============================================================================

# Ширина группы единиц (0-9999): 千百十 внутри группы
GROUP_WIDTH: Final[int] = 4

# Основание группы
GROUP_BASE: Final[int] = 10**GROUP_WIDTH


# =============================================================================
# ENUMS
# =============================================================================


class Scale(str, Enum):
    """Система наименования больших чисел"""

    SHORT = "short"  # 下数
    MYRIAD = "myriad"  # 万进
    MID = "mid"  # 中数
    LONG = "long"  # 上数

    @property
    def display_name(self) -> str:
        """Название шкалы для сообщений ("mid-scale", "short scale", ...)"""
        return _SCALE_DISPLAY_NAMES[self]


_SCALE_DISPLAY_NAMES: Final[dict[Scale, str]] = {
    Scale.SHORT: "short scale",
    Scale.MYRIAD: "myriad scale",
    Scale.MID: "mid-scale",
    Scale.LONG: "long scale",
}


# =============================================================================
# SCALE TABLE
# =============================================================================


class ScaleUnit(NamedTuple):
    """Единица шкалы: символ и десятичная экспонента (10^exponent)"""

    char: NumChar
    exponent: int


@dataclass(frozen=True)
class ScaleTable:
    """
    Статическая таблица шкалы.

    Единицы разбивают десятичные разряды числа на группы:
    группа единицы i занимает экспоненты [e_i, e_{i+1}),
    последняя — [e_last, capacity_exponent), группа единиц — [0, e_0).
    """

    scale: Scale
    units: tuple[ScaleUnit, ...]
    capacity_exponent: int

    def __post_init__(self) -> None:
        exponents = [unit.exponent for unit in self.units]
        if not exponents or exponents[0] != GROUP_WIDTH:
            raise ValueError(f"{self.scale.value}: first unit must be 10^{GROUP_WIDTH}")
        if any(a >= b for a, b in zip(exponents, exponents[1:])):
            raise ValueError(f"{self.scale.value}: unit exponents must be increasing")
        if self.capacity_exponent <= exponents[-1]:
            raise ValueError(f"{self.scale.value}: capacity below the largest unit")

    @property
    def max_abs(self) -> int:
        """Максимальное абсолютное значение, выразимое шкалой"""
        return 10**self.capacity_exponent - 1

    def units_below(self, span: int) -> tuple[ScaleUnit, ...]:
        """Единицы с экспонентой < span (для вложенной записи коэффициента)"""
        return tuple(unit for unit in self.units if unit.exponent < span)


def _table(scale: Scale, exponents: list[int], capacity_exponent: int) -> ScaleTable:
    return ScaleTable(
        scale=scale,
        units=tuple(ScaleUnit(char, exp) for char, exp in zip(SCALE_UNITS, exponents)),
        capacity_exponent=capacity_exponent,
    )


SHORT_SCALE_TABLE: Final[ScaleTable] = _table(Scale.SHORT, list(range(4, 15)), 15)

MYRIAD_SCALE_TABLE: Final[ScaleTable] = _table(Scale.MYRIAD, list(range(4, 48, 4)), 48)

MID_SCALE_TABLE: Final[ScaleTable] = _table(Scale.MID, [4] + list(range(8, 88, 8)), 88)

LONG_SCALE_TABLE: Final[ScaleTable] = _table(
    Scale.LONG, [4] + [2**k for k in range(3, 13)], 2**13
)

SCALE_TABLES: Final[Mapping[Scale, ScaleTable]] = MappingProxyType(
    {
        Scale.SHORT: SHORT_SCALE_TABLE,
        Scale.MYRIAD: MYRIAD_SCALE_TABLE,
        Scale.MID: MID_SCALE_TABLE,
        Scale.LONG: LONG_SCALE_TABLE,
    }
)


def get_scale_table(scale: Scale) -> ScaleTable:
    """
    Таблица для шкалы.

    Args:
        scale: Шкала (или её строковое имя: "short", "myriad", "mid", "long")

    Returns:
        ScaleTable

    Raises:
        ValueError: Если шкала неизвестна
    """
    return SCALE_TABLES[Scale(scale)]

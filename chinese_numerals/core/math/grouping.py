"""
Grouping — Разбиение модуля на группы разрядов

Разбивает неотрицательный модуль на группы по границам единиц шкалы:
- Группа единиц: разряды [0, 4) — значение 0-9999
- Группа единицы шкалы i: разряды [e_i, e_{i+1})

Для MYRIAD это ровно повторное деление на 10000. SHORT даёт одноразрядные
группы выше 千, MID/LONG — широкие группы (8, 16, 32, ... разрядов),
коэффициент которых записывается вложенно.

ФОРМУЛА:
    magnitude = Σ group.value × 10^group.exponent

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Группы упорядочены от старшей к младшей
2. Старшие нулевые группы отброшены; ноль → одна группа (0, 0)
3. 0 <= group.value < 10^group.width
4. Верхней границы нет: ёмкость проверяется при создании числительного
"""

from typing import NamedTuple, Optional

from chinese_numerals.core.domain.characters import NumChar
from chinese_numerals.core.domain.scales import ScaleTable


class Group(NamedTuple):
    """Группа разрядов с позицией и единицей шкалы"""

    value: int
    exponent: int  # младший разряд группы (10^exponent)
    width: int  # число разрядов группы
    unit: Optional[NumChar]  # None для группы единиц

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    @property
    def is_full(self) -> bool:
        """Старший разряд группы ненулевой (нет ведущих нулей)"""
        return self.value >= 10 ** (self.width - 1)


def group_layout(
    table: ScaleTable, span: Optional[int] = None
) -> list[tuple[int, int, Optional[NumChar]]]:
    """
    Раскладка групп шкалы от младшей к старшей.

    Args:
        table: Таблица шкалы
        span: Ограничение по разрядам (только единицы с экспонентой < span).
            None → вся ёмкость шкалы

    Returns:
        Список (exponent, width, unit); ширина старшей группы
        ограничена span (или capacity_exponent)
    """
    limit = table.capacity_exponent if span is None else span
    units = table.units_below(limit)

    layout: list[tuple[int, int, Optional[NumChar]]] = []
    bounds = [unit.exponent for unit in units] + [limit]
    layout.append((0, bounds[0] if units else limit, None))
    for unit, upper in zip(units, bounds[1:]):
        layout.append((unit.exponent, upper - unit.exponent, unit.char))
    return layout


def decompose_groups(
    magnitude: int, table: ScaleTable, span: Optional[int] = None
) -> list[Group]:
    """
    Разбиение модуля на группы по таблице шкалы.

    Повторное divmod на 10^width очередной группы, пока частное не станет
    нулём. Старшая группа (последняя в раскладке) забирает всё частное,
    поэтому функция тотальна для любого неотрицательного модуля.

    Args:
        magnitude: Модуль (>= 0)
        table: Таблица шкалы
        span: Ограничение по разрядам для вложенной записи коэффициента

    Returns:
        Группы от старшей к младшей

    Raises:
        ValueError: Если magnitude < 0

    Examples:
        >>> [g.value for g in decompose_groups(1_0203_0405, MYRIAD_SCALE_TABLE)]
        [1, 203, 405]
        >>> decompose_groups(0, MYRIAD_SCALE_TABLE)
        [Group(value=0, exponent=0, width=4, unit=None)]
    """
    if magnitude < 0:
        raise ValueError(f"magnitude must be non-negative, got {magnitude}")

    layout = group_layout(table, span)
    groups: list[Group] = []
    rest = magnitude

    for index, (exponent, width, unit) in enumerate(layout):
        is_top = index == len(layout) - 1
        if is_top:
            value, rest = rest, 0
        else:
            rest, value = divmod(rest, 10**width)
        groups.append(Group(value, exponent, width, unit))
        if rest == 0:
            break

    # Цикл останавливается на первой группе, выше которой одни нули,
    # поэтому старшая группа ненулевая (кроме magnitude == 0)
    groups.reverse()
    return groups

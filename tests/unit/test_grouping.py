"""
Тесты для разбиения на группы разрядов

Проверяет:
1. Разбиение по 10000 для myriad scale
2. Одноразрядные группы short scale и широкие группы mid/long scale
3. Ноль → одна нулевая группа
4. Восстановление числа из групп
5. Ограничение по разрядам (span) для вложенной записи
"""

import pytest

from chinese_numerals.core.domain.characters import NumChar
from chinese_numerals.core.domain.scales import (
    LONG_SCALE_TABLE,
    MID_SCALE_TABLE,
    MYRIAD_SCALE_TABLE,
    SCALE_TABLES,
    SHORT_SCALE_TABLE,
)
from chinese_numerals.core.math.grouping import Group, decompose_groups, group_layout


def _rebuild(groups: list[Group]) -> int:
    return sum(group.value * 10**group.exponent for group in groups)


class TestGroupLayout:
    """Тесты раскладки групп"""

    def test_myriad_layout(self) -> None:
        """Все группы myriad scale — по 4 разряда"""
        layout = group_layout(MYRIAD_SCALE_TABLE)
        assert layout[0] == (0, 4, None)
        assert layout[1] == (4, 4, NumChar.WAN)
        assert all(width == 4 for _, width, _ in layout)

    def test_mid_layout(self) -> None:
        """Mid-scale: 万-группа 4 разряда, дальше по 8"""
        layout = group_layout(MID_SCALE_TABLE)
        assert [width for _, width, _ in layout] == [4, 4] + [8] * 10

    def test_long_layout_widths_double(self) -> None:
        """Long scale: ширина группы равна её экспоненте начиная с 兆"""
        layout = group_layout(LONG_SCALE_TABLE)
        for exponent, width, _ in layout[3:]:
            assert width == exponent

    def test_span_limits_units(self) -> None:
        """span отсекает старшие единицы"""
        assert group_layout(MID_SCALE_TABLE, span=8) == [(0, 4, None), (4, 4, NumChar.WAN)]


class TestDecomposeGroups:
    """Тесты decompose_groups"""

    def test_myriad_groups(self) -> None:
        """1_0203_0405 → 1 | 203 | 405"""
        groups = decompose_groups(1_0203_0405, MYRIAD_SCALE_TABLE)
        assert [g.value for g in groups] == [1, 203, 405]
        assert [g.exponent for g in groups] == [8, 4, 0]
        assert [g.unit for g in groups] == [NumChar.YI, NumChar.WAN, None]

    def test_zero_single_group(self) -> None:
        """Ноль → одна группа (0, 0)"""
        for table in SCALE_TABLES.values():
            assert decompose_groups(0, table) == [Group(0, 0, 4, None)]

    def test_small_number_single_group(self) -> None:
        """Число < 10000 → одна группа единиц"""
        assert decompose_groups(9999, MYRIAD_SCALE_TABLE) == [Group(9999, 0, 4, None)]

    def test_short_scale_digit_groups(self) -> None:
        """Short scale: по одному разряду на единицу выше 千"""
        groups = decompose_groups(1_0203_0405, SHORT_SCALE_TABLE)
        assert [g.value for g in groups] == [1, 0, 2, 0, 3, 405]
        assert [g.unit for g in groups] == [
            NumChar.GAI,
            NumChar.JING,
            NumChar.ZHAO,
            NumChar.YI,
            NumChar.WAN,
            None,
        ]

    def test_mid_scale_wide_group(self) -> None:
        """Mid-scale 10^12: коэффициент 亿 = 10000 в 8-разрядной группе"""
        groups = decompose_groups(10**12, MID_SCALE_TABLE)
        assert groups[0] == Group(10000, 8, 8, NumChar.YI)
        assert [g.value for g in groups[1:]] == [0, 0]

    def test_leading_group_nonzero(self) -> None:
        """Старшая группа всегда ненулевая"""
        for table in SCALE_TABLES.values():
            for magnitude in (1, 10**4, 10**8, 10**12 + 7, 10**16):
                assert decompose_groups(magnitude, table)[0].value > 0

    def test_rebuild(self) -> None:
        """Σ value × 10^exponent восстанавливает число"""
        samples = [0, 7, 10_000, 1_0000_0001, 13054805271563705972964, 2**128 - 1]
        for table in SCALE_TABLES.values():
            for magnitude in samples:
                assert _rebuild(decompose_groups(magnitude, table)) == magnitude

    def test_group_values_within_width(self) -> None:
        """0 <= value < 10^width"""
        for table in SCALE_TABLES.values():
            for group in decompose_groups(min(10**40 - 1, table.max_abs), table):
                assert 0 <= group.value < 10**group.width

    def test_span(self) -> None:
        """Вложенная запись: 8-разрядный коэффициент → 万 + единицы"""
        groups = decompose_groups(1234_5678, MID_SCALE_TABLE, span=8)
        assert groups == [Group(1234, 4, 4, NumChar.WAN), Group(5678, 0, 4, None)]

    def test_no_upper_bound(self) -> None:
        """Разбиение тотально: выше ёмкости всё уходит в старшую группу"""
        groups = decompose_groups(10**48, MYRIAD_SCALE_TABLE)
        assert groups[0].unit == NumChar.ZAI
        assert groups[0].value == 10**4
        assert _rebuild(groups) == 10**48

    def test_negative_raises(self) -> None:
        """Отрицательный модуль → ValueError"""
        with pytest.raises(ValueError, match="non-negative"):
            decompose_groups(-1, MYRIAD_SCALE_TABLE)


class TestGroup:
    """Тесты свойств Group"""

    def test_is_full(self) -> None:
        """Группа заполнена, если старший разряд ненулевой"""
        assert Group(1000, 0, 4, None).is_full
        assert not Group(999, 0, 4, None).is_full
        assert Group(1, 5, 1, NumChar.YI).is_full
        assert not Group(1000_0000 - 1, 8, 8, NumChar.YI).is_full

    def test_is_zero(self) -> None:
        assert Group(0, 4, 4, NumChar.WAN).is_zero
        assert not Group(1, 4, 4, NumChar.WAN).is_zero

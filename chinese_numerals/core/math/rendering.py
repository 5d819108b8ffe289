"""
Rendering — Запись групп разрядов китайскими символами

Три уровня записи:
- render_group: группа 0-9999 → цифры с разрядами 千百十
- assemble_groups: группы числа → цифры + единицы шкалы + мосты 零
- to_text: знак + выбор таблицы символов (регистр × письменность)

ПРАВИЛА НУЛЕЙ:
1. Внутри группы: нули между ненулевыми цифрами → один 零,
   хвостовые нули опускаются (1010 → 一千零一十, 1100 → 一千一百)
2. Между группами: перед ненулевой группой ставится ровно один 零, если
   выше были пропущены нулевые группы или группа не заполнена до старшего
   разряда (1_0000_0405 → 一亿零四百零五)
3. Ноль целиком → ровно один 零

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сборка не различает шкалы: все отличия — в ScaleTable
2. Все функции чистые и детерминированные
"""

from dataclasses import dataclass
from typing import Final, Optional

from chinese_numerals.core.domain.characters import (
    DIGITS,
    SUB_UNITS,
    Case,
    NumChar,
    Variant,
    get_char_table,
)
from chinese_numerals.core.domain.scales import GROUP_BASE, GROUP_WIDTH, ScaleTable
from chinese_numerals.core.math.grouping import decompose_groups
from chinese_numerals.core.math.magnitude import Sign


# =============================================================================
# CONFIG
# =============================================================================

# Символы format spec → поле NumeralFormat
_FORMAT_SPEC_CASE: Final[dict[str, Case]] = {"#": Case.UPPER}
_FORMAT_SPEC_VARIANT: Final[dict[str, Variant]] = {
    "s": Variant.SIMPLIFIED,
    "t": Variant.TRADITIONAL,
}


@dataclass(frozen=True)
class NumeralFormat:
    """
    Конфигурация вывода числительного.

    По умолчанию — строчные упрощённые (как str()).
    """

    case: Case = Case.LOWER
    variant: Variant = Variant.SIMPLIFIED

    @property
    def omit_leading_one(self) -> bool:
        """Строчная запись опускает 一 перед ведущим 十 (十五, не 一十五)"""
        return self.case == Case.LOWER

    @classmethod
    def from_format_spec(cls, format_spec: str) -> "NumeralFormat":
        """
        Разбор format spec: "" → строчные, "#" → прописные,
        "s"/"t" → упрощённые/традиционные.

        Examples:
            >>> NumeralFormat.from_format_spec("#t")
            NumeralFormat(case=<Case.UPPER: 'upper'>, variant=<Variant.TRADITIONAL: 'traditional'>)

        Raises:
            ValueError: Если format_spec содержит неизвестные символы
        """
        case = Case.LOWER
        variant = Variant.SIMPLIFIED
        for char in format_spec:
            if char in _FORMAT_SPEC_CASE:
                case = _FORMAT_SPEC_CASE[char]
            elif char in _FORMAT_SPEC_VARIANT:
                variant = _FORMAT_SPEC_VARIANT[char]
            else:
                raise ValueError(
                    f"Unknown format spec {format_spec!r} for a Chinese numeral"
                )
        return cls(case=case, variant=variant)


# =============================================================================
# GROUP RENDERER
# =============================================================================


def render_group(value: int, omit_leading_one: bool = False) -> list[NumChar]:
    """
    Запись группы 0-9999 без единицы шкалы.

    Args:
        value: Значение группы (0-9999)
        omit_leading_one: Опустить 一 перед ведущим 十 (значения 10-19)

    Returns:
        Символы от старшего к младшему; для 0 — пустой список

    Raises:
        ValueError: Если value вне 0-9999

    Examples:
        >>> render_group(1010)
        [<NumChar.ONE: 'yi1'>, <NumChar.QIAN: 'qian'>, <NumChar.ZERO: 'ling'>, <NumChar.ONE: 'yi1'>, <NumChar.SHI: 'shi'>]
    """
    if not 0 <= value < GROUP_BASE:
        raise ValueError(f"group value must be in [0, {GROUP_BASE - 1}], got {value}")

    chars: list[NumChar] = []
    pending_zero = False

    for exponent in reversed(range(GROUP_WIDTH)):
        digit = value // 10**exponent % 10
        if digit == 0:
            # Ноль значим, только если перед ним уже что-то записано
            pending_zero = pending_zero or bool(chars)
            continue
        if pending_zero:
            chars.append(NumChar.ZERO)
            pending_zero = False
        if not (omit_leading_one and not chars and digit == 1 and exponent == 1):
            chars.append(DIGITS[digit])
        sub_unit = SUB_UNITS[exponent]
        if sub_unit is not None:
            chars.append(sub_unit)

    return chars


# =============================================================================
# SEQUENCE ASSEMBLER
# =============================================================================


def assemble_groups(
    magnitude: int,
    table: ScaleTable,
    span: Optional[int] = None,
    omit_leading_one: bool = False,
) -> list[NumChar]:
    """
    Запись модуля числа: группы + единицы шкалы + мосты 零.

    Группы шире 4 разрядов (коэффициенты MID/LONG) записываются
    рекурсивно той же таблицей, ограниченной шириной группы:
    MID 10^12 → коэффициент 亿 = 10000 → 一万 + 亿 = 一万亿.

    Args:
        magnitude: Модуль (>= 0)
        table: Таблица шкалы
        span: Ограничение по разрядам (для вложенной записи)
        omit_leading_one: Опустить 一 перед 十 в старшей группе числа

    Returns:
        Символы от старшего к младшему; для 0 — пустой список

    Examples:
        >>> "".join(to_text(assemble_groups(1_0203_0405, SHORT_SCALE_TABLE)))
        '一垓零二兆零三万零四百零五'
    """
    chars: list[NumChar] = []
    bridge_pending = False

    for group in decompose_groups(magnitude, table, span):
        if group.is_zero:
            bridge_pending = bridge_pending or bool(chars)
            continue

        # Один 零 на любое число пропущенных нулевых групп
        if chars and (bridge_pending or not group.is_full):
            chars.append(NumChar.ZERO)
        bridge_pending = False

        is_leading = omit_leading_one and not chars
        if group.width > GROUP_WIDTH:
            chars.extend(assemble_groups(group.value, table, group.width, is_leading))
        else:
            chars.extend(render_group(group.value, is_leading))

        if group.unit is not None:
            chars.append(group.unit)

    return chars


# =============================================================================
# SIGN & CASE WRAPPER
# =============================================================================


def apply_sign(chars: list[NumChar], sign: Sign) -> list[NumChar]:
    """
    Знак числа: 负 перед отрицательными, ровно один 零 для нуля.

    Args:
        chars: Символы модуля (от assemble_groups)
        sign: Знак числа

    Returns:
        Новый список символов
    """
    if sign == Sign.NIL:
        return [NumChar.ZERO]
    if sign == Sign.NEG:
        return [NumChar.NEG, *chars]
    return list(chars)


def to_text(chars: list[NumChar], fmt: NumeralFormat = NumeralFormat()) -> str:
    """Вывод символов одной таблицей (регистр × письменность)"""
    char_table = get_char_table(fmt.case, fmt.variant)
    return "".join(char_table[char] for char in chars)


def render_magnitude(
    sign: Sign, magnitude: int, table: ScaleTable, fmt: NumeralFormat = NumeralFormat()
) -> str:
    """
    Полный конвейер записи: группы → сборка → знак → таблица символов.

    Args:
        sign: Знак числа
        magnitude: Модуль (>= 0, в пределах ёмкости таблицы)
        table: Таблица шкалы
        fmt: Конфигурация вывода

    Returns:
        Китайское числительное
    """
    chars = assemble_groups(magnitude, table, omit_leading_one=fmt.omit_leading_one)
    return to_text(apply_sign(chars, sign), fmt)

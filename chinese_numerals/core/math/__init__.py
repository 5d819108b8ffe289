"""
Core math modules для chinese_numerals

Знак и модуль числа, разбиение на группы разрядов, запись групп.
"""

# Magnitude
from chinese_numerals.core.math.magnitude import (
    U128_MAX,
    MagnitudeOutOfRange,
    Sign,
    describe_magnitude,
    split_sign,
    to_host_int,
    validate_magnitude,
)

# Grouping
from chinese_numerals.core.math.grouping import (
    Group,
    decompose_groups,
    group_layout,
)

# Rendering
from chinese_numerals.core.math.rendering import (
    NumeralFormat,
    apply_sign,
    assemble_groups,
    render_group,
    render_magnitude,
    to_text,
)

__all__ = [
    # Magnitude — Constants
    "U128_MAX",
    # Magnitude — Exceptions
    "MagnitudeOutOfRange",
    # Magnitude — Types
    "Sign",
    # Magnitude — Functions
    "describe_magnitude",
    "split_sign",
    "to_host_int",
    "validate_magnitude",
    # Grouping
    "Group",
    "decompose_groups",
    "group_layout",
    # Rendering — Config
    "NumeralFormat",
    # Rendering — Functions
    "apply_sign",
    "assemble_groups",
    "render_group",
    "render_magnitude",
    "to_text",
]

"""Numeric mappers and binary operators."""

from __future__ import annotations

import operator

from klaw_combinators.decorators import binary, mapper
from klaw_combinators.interfaces import Mapper, Transform2

__all__ = [
    'HEX_PREFIX',
    'add',
    'add_hex_prefix',
    'difference_of_squares_formula',
    'hex_with_prefix',
    'to_hex',
    'to_text',
]

HEX_PREFIX = '0x'


@mapper
def to_hex(number: int) -> str:
    """Lower-case hexadecimal digits without a prefix; negatives keep a '-' sign."""
    return format(number, 'x')


@mapper
def add_hex_prefix(digits: str) -> str:
    return HEX_PREFIX + digits


# 255 -> '0xff', 0 -> '0x0'
hex_with_prefix: Mapper[int, str] = to_hex >> add_hex_prefix

to_text: Mapper[object, str] = Mapper(str, name='to_text')

add: Transform2[int] = Transform2(operator.add, name='add')


@binary
def difference_of_squares_formula(a: float, b: float) -> float:
    return ((a + b) * (a - b)) / 114 + 514 - 810

"""String transforms and binary operators."""

from __future__ import annotations

from klaw_combinators.compose.ops import max_by
from klaw_combinators.decorators import transform
from klaw_combinators.interfaces import Transform1, Transform2

__all__ = [
    'concat',
    'longer',
    'lower',
    'lower_after_first_word',
    'underscores_to_spaces',
    'upper',
]

lower: Transform1[str] = Transform1(str.lower, name='lower')
upper: Transform1[str] = Transform1(str.upper, name='upper')

concat: Transform2[str] = Transform2(str.__add__, name='concat')

# '114514' vs '1919810' -> '1919810'
longer: Transform2[str] = max_by(len, name='longer')


@transform
def underscores_to_spaces(text: str) -> str:
    return text.replace('_', ' ')


@transform
def lower_after_first_word(text: str) -> str:
    """Lower-case the first letter of every word except the first.

    Words are split on single spaces and re-joined the same way, so
    ``'Welcome To Functional Programing!'`` becomes
    ``'Welcome to functional programing!'``.
    """
    first, *rest = text.split(' ')
    return ' '.join([first, *(word[:1].lower() + word[1:] for word in rest)])

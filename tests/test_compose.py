"""Tests for composition operators."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from klaw_combinators import (
    CompositionTypeError,
    Consumer,
    Mapper,
    Predicate,
    Producer,
    Transform1,
    Transform2,
    all_of,
    and_,
    any_of,
    binary_then,
    chain,
    compose_unary,
    map_then,
    max_by,
    min_by,
    not_,
    or_,
    produce_then,
    then,
)
from klaw_combinators.decorators import step_note

from tests.strategies import exception_types, int_lists, int_predicates, int_transforms, integers, texts, text_transforms


class CountingPredicate:
    """Predicate stub that records how often it was evaluated."""

    def __init__(self, result: bool) -> None:
        self.result = result
        self.calls = 0
        self.__name__ = f'counting_{result}'

    def __call__(self, value: object) -> bool:
        self.calls += 1
        return self.result


class TestComposeUnary:
    """Tests for compose_unary() and chain()."""

    @given(int_transforms, int_transforms, int_transforms, integers)
    def test_associative(self, f, g, h, x):
        """(f >> g) >> h agrees with f >> (g >> h)."""
        left = compose_unary(compose_unary(f, g), h)
        right = compose_unary(f, compose_unary(g, h))
        assert left(x) == right(x)

    @given(text_transforms, text_transforms, texts)
    def test_applies_f_then_g(self, f, g, text):
        """compose_unary(f, g)(x) == g(f(x))."""
        assert compose_unary(f, g)(text) == g(f(text))

    @given(int_transforms, integers)
    def test_identity_is_neutral(self, f, x):
        """Identity on either side changes nothing."""
        identity = Transform1.identity()
        assert compose_unary(identity, f)(x) == f(x)
        assert compose_unary(f, identity)(x) == f(x)

    def test_accepts_plain_callables(self):
        """Plain callables are lifted to Transform1."""
        composed = compose_unary(str.strip, str.upper)
        assert isinstance(composed, Transform1)
        assert composed('  hi ') == 'HI'

    def test_label(self):
        """The composed label joins both labels."""
        assert compose_unary(str.strip, str.upper).label == 'strip >> upper'

    def test_chain_empty_is_identity(self):
        """chain() is the identity."""
        assert chain()('same') == 'same'

    def test_chain_single(self):
        """chain(f) is f lifted."""
        assert chain(str.upper)('a') == 'A'

    @given(st.lists(int_transforms, min_size=2, max_size=6), integers)
    def test_chain_applies_left_to_right(self, transforms, x):
        """chain(f, g, h, ...) applies each transform in order."""
        expected = x
        for transform in transforms:
            expected = transform(expected)
        assert chain(*transforms)(x) == expected


class TestFailurePropagation:
    """Tests for step failure semantics."""

    @given(exception_types)
    def test_exception_propagates_unmodified(self, error_type):
        """The raised exception object reaches the caller unchanged."""
        error = error_type('boom')

        def fail(value):
            raise error

        with pytest.raises(error_type) as exc_info:
            compose_unary(str.upper, fail)('x')
        assert exc_info.value is error

    def test_second_step_not_run_after_failure(self):
        """A failing first step aborts the composition."""
        seen = []

        def fail(value):
            raise ValueError('first failed')

        with pytest.raises(ValueError):
            compose_unary(fail, lambda v: seen.append(v) or v)('x')
        assert seen == []

    def test_note_identifies_failing_step(self):
        """The exception carries a note naming the failing step."""

        def explode(value):
            raise ValueError('boom')

        with pytest.raises(ValueError) as exc_info:
            compose_unary(str.upper, explode)('x')
        assert exc_info.value.__notes__ == [step_note('explode', 'transform')]

    def test_nested_notes_innermost_first(self):
        """Each enclosing composition adds its own note, innermost first."""

        def explode(value):
            raise ValueError('boom')

        inner = compose_unary(str.upper, explode)
        outer = compose_unary(inner, str.lower)

        with pytest.raises(ValueError) as exc_info:
            outer('x')
        assert exc_info.value.__notes__ == [
            step_note('explode', 'transform'),
            step_note('upper >> explode', 'transform'),
        ]

    def test_repeated_failure_with_shared_exception(self):
        """A composition failing repeatedly with one shared exception keeps one note."""
        error = ValueError('always')

        def fail(value):
            raise error

        composed = compose_unary(fail, str.upper)
        for _ in range(3):
            with pytest.raises(ValueError):
                composed('x')

        assert error.__notes__ == [step_note('fail', 'transform')]

    def test_mapper_failure_note(self):
        """Mapper compositions label their steps too."""
        parse = Mapper(int, name='parse')
        with pytest.raises(ValueError) as exc_info:
            map_then(parse, lambda n: n * 2)('not a number')
        assert step_note('parse', 'mapper') in exc_info.value.__notes__


class TestSelection:
    """Tests for max_by() and min_by()."""

    def test_max_by_picks_larger_key(self):
        """max_by keeps the value with the larger key."""
        longer = max_by(len)
        assert longer('114514', '1919810') == '1919810'
        assert longer('1919810', '114514') == '1919810'

    def test_max_by_tie_keeps_left(self):
        """On a tie max_by returns the left value."""
        assert max_by(len)('ab', 'cd') == 'ab'

    def test_min_by_picks_smaller_key(self):
        """min_by keeps the value with the smaller key."""
        shorter = min_by(len)
        assert shorter('abc', 'a') == 'a'
        assert shorter('a', 'abc') == 'a'

    def test_min_by_tie_keeps_left(self):
        """On a tie min_by returns the left value."""
        assert min_by(len)('ab', 'cd') == 'ab'

    @given(integers, integers)
    def test_max_by_matches_builtin_max(self, a, b):
        """max_by(abs) agrees with max(key=abs), which also keeps the first on ties."""
        assert max_by(abs)(a, b) == max(a, b, key=abs)

    def test_labels(self):
        """Selection operators are labelled after their key."""
        assert max_by(len).label == 'max_by(len)'
        assert min_by(len, name='shorter').label == 'shorter'

    def test_is_transform2(self):
        """Selection operators are Transform2 values."""
        assert isinstance(max_by(len), Transform2)

    @pytest.mark.parametrize('select', [max_by, min_by, Transform2.max_by, Transform2.min_by])
    def test_rejects_non_callable_key(self, select):
        """A non-callable key fails when the operator is built, not when it runs."""
        with pytest.raises(CompositionTypeError) as exc_info:
            select(5)
        assert isinstance(exc_info.value, TypeError)
        assert exc_info.value.kind == 'Transform2'
        assert exc_info.value.received == 'int'

    def test_key_failure_note(self):
        """A failing key is named in the selection note."""

        def rank(value):
            raise KeyError(value)

        with pytest.raises(KeyError) as exc_info:
            max_by(rank)('a', 'b')
        assert exc_info.value.__notes__ == [step_note('rank', 'selection')]

    def test_binary_then(self):
        """binary_then applies a unary transform to the selected value."""
        loudest = binary_then(max_by(len), str.upper)
        assert loudest('ab', 'abc') == 'ABC'


class TestPredicateLogic:
    """Tests for and_(), or_(), not_(), all_of(), any_of()."""

    @given(int_predicates, int_predicates, integers)
    def test_and_truth_table(self, p, q, x):
        """and_(p, q)(x) == p(x) and q(x)."""
        assert and_(p, q)(x) == (p(x) and q(x))

    @given(int_predicates, int_predicates, integers)
    def test_or_truth_table(self, p, q, x):
        """or_(p, q)(x) == p(x) or q(x)."""
        assert or_(p, q)(x) == (p(x) or q(x))

    @given(int_predicates, integers)
    def test_not(self, p, x):
        """not_(p)(x) == not p(x)."""
        assert not_(p)(x) == (not p(x))

    def test_and_skips_right_when_left_false(self):
        """and_ does not evaluate q when p is false."""
        right = CountingPredicate(True)
        assert and_(lambda x: False, right)(1) is False
        assert right.calls == 0

    def test_and_evaluates_right_when_left_true(self):
        """and_ evaluates q when p is true."""
        right = CountingPredicate(False)
        assert and_(lambda x: True, right)(1) is False
        assert right.calls == 1

    def test_or_skips_right_when_left_true(self):
        """or_ does not evaluate q when p is true."""
        right = CountingPredicate(False)
        assert or_(lambda x: True, right)(1) is True
        assert right.calls == 0

    def test_or_evaluates_right_when_left_false(self):
        """or_ evaluates q when p is false."""
        right = CountingPredicate(True)
        assert or_(lambda x: False, right)(1) is True
        assert right.calls == 1

    def test_results_are_bool(self):
        """Composed predicates return plain bools even for truthy operands."""
        assert and_(len, len)([1]) is True
        assert or_(len, len)([]) is False

    def test_labels(self):
        """Composed predicates describe their structure."""
        even = Predicate(lambda n: n % 2 == 0, name='even')
        positive = Predicate(lambda n: n > 0, name='positive')
        assert (even & ~positive).label == '(even & ~positive)'
        assert (even | positive).label == '(even | positive)'

    @given(st.lists(int_predicates, max_size=5), integers)
    def test_all_of(self, predicates, x):
        """all_of matches all() over the predicate results."""
        assert all_of(*predicates)(x) == all(p(x) for p in predicates)

    @given(st.lists(int_predicates, max_size=5), integers)
    def test_any_of(self, predicates, x):
        """any_of matches any() over the predicate results."""
        assert any_of(*predicates)(x) == any(p(x) for p in predicates)

    def test_all_of_short_circuits(self):
        """all_of stops at the first false predicate."""
        last = CountingPredicate(True)
        assert all_of(lambda x: True, lambda x: False, last)(0) is False
        assert last.calls == 0

    def test_any_of_short_circuits(self):
        """any_of stops at the first true predicate."""
        last = CountingPredicate(False)
        assert any_of(lambda x: False, lambda x: True, last)(0) is True
        assert last.calls == 0


class TestMapThen:
    """Tests for map_then()."""

    @given(integers)
    def test_applies_f_then_g(self, n):
        """map_then(f, g)(x) == g(f(x))."""
        assert map_then(hex, str.upper)(n) == hex(n).upper()

    @given(int_lists)
    def test_type_changes_through_chain(self, numbers):
        """Intermediate and final types may all differ."""
        total_text = map_then(sum, str)
        assert total_text(numbers) == str(sum(numbers))

    def test_returns_mapper(self):
        """map_then returns a Mapper."""
        assert isinstance(map_then(len, str), Mapper)


class TestProduceThen:
    """Tests for produce_then()."""

    def test_maps_produced_value(self):
        """The mapper receives the produced value."""
        produced = produce_then(lambda: 21, lambda n: n * 2)
        assert isinstance(produced, Producer)
        assert produced() == 42


class TestThen:
    """Tests for then() on consumers."""

    def test_both_observe_same_value_in_order(self):
        """c1 completes before c2 starts, and both see the same value."""
        events = []

        def c1(value):
            events.append(('c1 start', value))
            events.append(('c1 end', value))

        def c2(value):
            events.append(('c2 start', value))
            events.append(('c2 end', value))

        then(c1, c2)('hello')

        assert events == [
            ('c1 start', 'hello'),
            ('c1 end', 'hello'),
            ('c2 start', 'hello'),
            ('c2 end', 'hello'),
        ]

    def test_fail_fast(self):
        """If c1 fails, c2 is not invoked and the error propagates."""
        seen = []
        error = OSError('disk full')

        def c1(value):
            raise error

        with pytest.raises(OSError) as exc_info:
            then(c1, seen.append)('hello')

        assert exc_info.value is error
        assert seen == []
        assert step_note('c1', 'consumer') in exc_info.value.__notes__

    def test_returns_consumer(self):
        """then returns a Consumer whose call returns None."""
        composed = then(lambda v: v, lambda v: v)
        assert isinstance(composed, Consumer)
        assert composed('x') is None

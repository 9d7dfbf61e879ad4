"""Tests for Either (Left and Right)."""

import pytest
from hypothesis import given

from highkind import Either, EmptyValueAccessError, InvalidArgument, InvalidArgumentError, List, Maybe
from tests.strategies import either_functions, eithers, int_functions, integers


class TestEitherBasics:
    """Tests for construction, queries and extraction."""

    def test_sides(self):
        """left() and right() build the two cases."""
        assert Either.left('e').is_left()
        assert Either.right(1).is_right()
        assert not Either.right(1).is_left()

    def test_either_collapses(self):
        """either() applies the function for the matching side."""
        assert Either.left('e').either(len, str) == 1
        assert Either.right(12).either(len, str) == '12'
        assert Either.right(12).cata(len, str) == '12'

    def test_get_or_else(self):
        """get_or_else() falls back on Left."""
        assert Either.right(1).get_or_else(0) == 1
        assert Either.left('e').get_or_else(0) == 0

    def test_get_or_fail_on_left(self):
        """get_or_fail() on a plain Left raises EmptyValueAccessError."""
        with pytest.raises(EmptyValueAccessError, match='Left'):
            Either.left('boom').get_or_fail()

    def test_get_or_fail_chains_exception(self):
        """A Left holding an exception becomes the cause."""
        cause = ValueError('bad')
        with pytest.raises(EmptyValueAccessError) as exc_info:
            Either.left(cause).get_or_fail()
        assert exc_info.value.__cause__ is cause

    def test_get_or_fail_converts_struct(self):
        """A Left holding an error struct raises its exception variant."""
        with pytest.raises(InvalidArgumentError, match='count'):
            Either.left(InvalidArgument('count', 'negative')).get_or_fail()

    def test_left_or_fail(self):
        """left_or_fail() returns the Left value and raises on Right."""
        assert Either.left('e').left_or_fail() == 'e'
        with pytest.raises(EmptyValueAccessError):
            Either.right(1).left_or_fail()

    def test_maybe_sides(self):
        """maybe_left() and maybe_right() view one side as a Maybe."""
        assert Either.left('e').maybe_left() == Maybe.present('e')
        assert Either.left('e').maybe_right().is_empty()
        assert Either.right(1).maybe_right() == Maybe.present(1)
        assert Either.right(None).maybe_right().is_empty()


class TestEitherTransformation:
    """Tests for map, bind, map_left, bimap and swap."""

    def test_map_skips_left(self):
        """map() only touches a Right."""
        assert Either.right(1).map(lambda x: x + 1) == Either.right(2)
        assert Either.left('e').map(lambda x: x + 1) == Either.left('e')

    def test_map_left(self):
        """map_left() only touches a Left."""
        assert Either.left('e').map_left(str.upper) == Either.left('E')
        assert Either.right(1).map_left(str.upper) == Either.right(1)

    def test_bimap_and_swap(self):
        """bimap() maps both sides, swap() exchanges them."""
        assert Either.left('e').bimap(str.upper, abs) == Either.left('E')
        assert Either.right(-1).bimap(str.upper, abs) == Either.right(1)
        assert Either.left('e').swap() == Either.right('e')

    @given(eithers, int_functions, int_functions)
    def test_functor_composition(self, either, f, g):
        """map(g . f) == map(f).map(g)."""
        assert either.map(lambda x: g(f(x))) == either.map(f).map(g)

    @given(integers, either_functions)
    def test_monad_left_identity(self, value, f):
        """right(x).bind(f) == f(x)."""
        assert Either.right(value).bind(f) == f(value)

    @given(eithers)
    def test_monad_right_identity(self, either):
        """e.bind(right) == e."""
        assert either.bind(Either.right) == either

    @given(eithers, either_functions, either_functions)
    def test_monad_associativity(self, either, f, g):
        """e.bind(f).bind(g) == e.bind(lambda x: f(x).bind(g))."""
        assert either.bind(f).bind(g) == either.bind(lambda x: f(x).bind(g))


class TestEitherCollections:
    """Tests for lefts() and rights()."""

    def test_partition(self):
        """lefts() and rights() keep order."""
        values = [Either.left('a'), Either.right(1), Either.left('b'), Either.right(2)]
        assert Either.lefts(values) == List.of('a', 'b')
        assert Either.rights(values) == List.of(1, 2)


class TestEitherInstances:
    """Tests for the Monad and MonadError instance."""

    def test_monad(self):
        """The Monad instance short-circuits on Left."""
        monad = Either.monad()
        assert monad.pure(1) == Either.right(1)
        assert monad.bind(Either.right(1), lambda x: Either.right(x * 2)) == Either.right(2)
        assert monad.bind(Either.left('e'), lambda x: Either.right(x * 2)) == Either.left('e')
        assert monad.ap(Either.right(lambda x: x + 1), Either.right(1)) == Either.right(2)

    def test_monad_error(self):
        """throw_error() raises into Left and catch_error() recovers."""
        errors = Either.monad_error()
        failed = errors.throw_error('oops')
        assert failed == Either.left('oops')
        assert errors.catch_error(failed, lambda e: Either.right(len(e))) == Either.right(4)
        assert errors.catch_error(Either.right(1), lambda e: Either.right(0)) == Either.right(1)


class TestEitherObjectProtocol:
    """Tests for equality, hashing and rendering."""

    def test_equality(self):
        """Same side and equal value means equal."""
        assert Either.left(1) == Either.left(1)
        assert Either.left(1) != Either.right(1)
        assert hash(Either.right((1, 2))) == hash(Either.right((1, 2)))

    def test_render(self):
        """Left(x) and Right(x)."""
        assert str(Either.left('Not enough fingers!')) == 'Left(Not enough fingers!)'
        assert repr(Either.right(List.of(1))) == 'Right(List(1))'

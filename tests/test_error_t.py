"""Tests for the ErrorT monad transformer."""

from hypothesis import given
from hypothesis import strategies as st

from highkind import Either, ErrorT, List, Maybe
from highkind.transformer.error_t import ErrorTMonad, ErrorTMonadError
from highkind.typeclass import Applicative, Functor, Monad
from tests.strategies import integers


def safe_div(x):
    return ErrorT(List.of(Either.left('div by zero') if x == 0 else Either.right(100 // x)))


class TestErrorTBasics:
    """Tests for construction, lifting and the instance factories."""

    def test_lift_wraps_in_right(self):
        """lift() runs an inner action as success."""
        lifted = ErrorT.lift(List.monad, List.of(1, 2))
        assert lifted.run == List.of(Either.right(1), Either.right(2))

    def test_narrow_returns_same_object(self):
        """narrow() hands back the value it received."""
        value = ErrorT(Maybe.present(Either.right(1)))
        assert ErrorT.narrow(value) is value

    def test_factories_build_instances(self):
        """Each factory wraps the inner instance in the matching typeclass."""
        assert isinstance(ErrorT.functor(List.monad), Functor)
        assert isinstance(ErrorT.applicative(List.monad), Applicative)
        assert isinstance(ErrorT.monad(List.monad), ErrorTMonad)
        assert isinstance(ErrorT.monad(List.monad), Monad)
        assert isinstance(ErrorT.monad_error(Maybe.monad), ErrorTMonadError)
        assert ErrorT.bind(List.monad).inner is List.monad


class TestErrorTMonad:
    """Tests for map, ap, pure and bind over an inner List."""

    def test_map_only_touches_rights(self):
        """map() skips Lefts inside the inner monad."""
        functor = ErrorT.functor(List.monad)
        value = ErrorT(List.of(Either.right(1), Either.left('e')))
        assert functor.map(lambda x: x + 1, value).run == List.of(Either.right(2), Either.left('e'))

    def test_pure(self):
        """pure() is an inner pure of a Right."""
        assert ErrorT.applicative(List.monad).pure(1).run == List.of(Either.right(1))

    def test_ap(self):
        """ap() combines every inner pairing; a Left function stays a Left."""
        apply = ErrorT.apply(List.monad)
        fns = ErrorT(List.of(Either.right(lambda x: x * 10), Either.left('no fn')))
        values = ErrorT(List.of(Either.right(1), Either.left('no value')))
        assert apply.ap(fns, values).run == List.of(
            Either.right(10),
            Either.left('no value'),
            Either.left('no fn'),
            Either.left('no fn'),
        )

    def test_bind_short_circuits(self):
        """bind() stops at a Left and keeps every inner branch."""
        monad = ErrorT.monad(List.monad)
        program = monad.bind(ErrorT.lift(List.monad, List.of(5, 0, 20)), safe_div)
        assert program.run == List.of(Either.right(20), Either.left('div by zero'), Either.right(5))

    def test_bind_does_not_call_continuation_on_left(self):
        """The continuation is skipped for a Left."""
        calls = []
        monad = ErrorT.monad(Maybe.monad)
        failed = ErrorT(Maybe.present(Either.left('e')))
        result = monad.bind(failed, lambda x: calls.append(x) or monad.pure(x))
        assert result.run == Maybe.present(Either.left('e'))
        assert calls == []

    def test_inner_empty_wins(self):
        """An Empty inner Maybe stays Empty."""
        monad = ErrorT.monad(Maybe.monad)
        result = monad.bind(ErrorT(Maybe.empty()), monad.pure)
        assert result.run.is_empty()

    @given(integers)
    def test_left_identity(self, value):
        """bind(pure(x), f) == f(x)."""
        monad = ErrorT.monad(List.monad)
        assert monad.bind(monad.pure(value), safe_div).run == safe_div(value).run

    @given(st.lists(st.one_of(integers.map(Either.right), st.text(max_size=3).map(Either.left)), max_size=5))
    def test_right_identity(self, eithers):
        """bind(m, pure) == m."""
        monad = ErrorT.monad(List.monad)
        value = ErrorT(List.from_iterable(eithers))
        assert monad.bind(value, monad.pure).run == value.run


class TestErrorTMonadError:
    """Tests for throw_error and catch_error."""

    def test_throw_error(self):
        """throw_error() is an inner pure of a Left."""
        errors = ErrorT.monad_error(Maybe.monad)
        assert errors.throw_error('boom').run == Maybe.present(Either.left('boom'))

    def test_catch_error_recovers(self):
        """catch_error() replaces a Left with the handler's result."""
        errors = ErrorT.monad_error(Maybe.monad)
        recovered = errors.catch_error(errors.throw_error('boom'), lambda e: errors.pure(len(e)))
        assert recovered.run == Maybe.present(Either.right(4))

    def test_catch_error_passes_rights(self):
        """catch_error() leaves a Right untouched."""
        errors = ErrorT.monad_error(Maybe.monad)
        assert errors.catch_error(errors.pure(1), lambda e: errors.pure(0)).run == Maybe.present(Either.right(1))

    def test_docstring_program(self):
        """Odd inputs raise, even inputs scale, per inner branch."""
        errors = ErrorT.monad_error(List.monad)
        program = errors.bind(
            ErrorT.lift(List.monad, List.of(1, 2)),
            lambda x: errors.throw_error('odd') if x % 2 else errors.pure(x * 10),
        )
        assert str(program.run) == 'List(Left(odd),Right(20))'

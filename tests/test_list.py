"""Tests for List."""

import pytest
from hypothesis import given

from highkind import EmptyValueAccessError, InvalidArgumentError, List, Maybe
from tests.strategies import int_functions, integers, list_functions, lists


class TestListCreation:
    """Tests for the List constructors."""

    def test_nil_is_shared(self):
        """All empty lists are the same instance."""
        assert List.nil() is List.of()
        assert List.from_iterable([]) is List.nil()

    def test_cons(self):
        """cons() prepends."""
        assert List.cons(0, List.of(1, 2)) == List.of(0, 1, 2)

    def test_range_inclusive(self):
        """range() includes its stop value."""
        assert List.range(1, 1, 3) == List.of(1, 2, 3)
        assert List.range(10, -3, 1) == List.of(10, 7, 4, 1)
        assert List.range(1, 2, 6) == List.of(1, 3, 5)

    def test_range_zero_step(self):
        """A zero step is rejected."""
        with pytest.raises(InvalidArgumentError):
            List.range(1, 0, 3)

    def test_is_frozen(self):
        """Lists are immutable."""
        with pytest.raises(AttributeError):
            List.of(1).items = ()  # type: ignore[misc]


class TestListAccess:
    """Tests for head, tail, cata and indexing."""

    def test_head_and_tail(self):
        """head() and tail() split the first element off."""
        items = List.of(1, 2, 3)
        assert items.head() == 1
        assert items.tail() == List.of(2, 3)

    def test_head_of_nil_raises(self):
        """head() and tail() of an empty list raise."""
        with pytest.raises(EmptyValueAccessError):
            List.nil().head()
        with pytest.raises(EmptyValueAccessError):
            List.nil().tail()

    def test_maybe_head(self):
        """maybe_head() is Empty for an empty list."""
        assert List.of(1).maybe_head() == Maybe.present(1)
        assert List.nil().maybe_head().is_empty()

    def test_cata(self):
        """cata() exposes the cons view."""
        assert List.nil().cata('nil', lambda h, t: h) == 'nil'
        assert List.of(1, 2).cata(None, lambda h, t: (h, t)) == (1, List.of(2))

    def test_indexing(self):
        """Integer indexes give elements, slices give Lists."""
        items = List.of('a', 'b', 'c')
        assert items[1] == 'b'
        assert items[-1] == 'c'
        assert items[1:] == List.of('b', 'c')

    def test_size(self):
        """size() and len() agree."""
        assert List.of(1, 2).size() == len(List.of(1, 2)) == 2
        assert List.nil().is_empty()
        assert not List.nil()


class TestListTransformation:
    """Tests for map, bind, filter and the slicing operations."""

    def test_filter(self):
        """filter() keeps matching elements in order."""
        assert List.range(1, 1, 6).filter(lambda x: x % 2 == 0) == List.of(2, 4, 6)

    def test_take_and_drop(self):
        """take() and drop() clamp negative counts to zero."""
        items = List.of(1, 2, 3)
        assert items.take(2) == List.of(1, 2)
        assert items.take(-1) == List.nil()
        assert items.drop(2) == List.of(3)
        assert items.drop(-1) == items

    def test_folds(self):
        """fold_left() and fold_right() associate in opposite directions."""
        items = List.of('a', 'b', 'c')
        assert items.fold_left(lambda acc, x: f'({acc}{x})', '') == '(((a)b)c)'
        assert items.fold_right(lambda x, acc: f'({x}{acc})', '') == '(a(b(c)))'

    def test_reverse_and_append(self):
        """reverse() flips, append() and + concatenate."""
        assert List.of(1, 2).reverse() == List.of(2, 1)
        assert List.of(1).append(List.of(2)) == List.of(1, 2) == List.of(1) + List.of(2)

    @given(lists)
    def test_functor_identity(self, items):
        """map(identity) == identity."""
        assert items.map(lambda x: x) == items

    @given(lists, int_functions, int_functions)
    def test_functor_composition(self, items, f, g):
        """map(g . f) == map(f).map(g)."""
        assert items.map(lambda x: g(f(x))) == items.map(f).map(g)

    @given(integers, list_functions)
    def test_monad_left_identity(self, value, f):
        """of(x).bind(f) == f(x)."""
        assert List.of(value).bind(f) == f(value)

    @given(lists)
    def test_monad_right_identity(self, items):
        """l.bind(of) == l."""
        assert items.bind(List.of) == items

    @given(lists, list_functions, list_functions)
    def test_monad_associativity(self, items, f, g):
        """l.bind(f).bind(g) == l.bind(lambda x: f(x).bind(g))."""
        assert items.bind(f).bind(g) == items.bind(lambda x: f(x).bind(g))


class TestListInstances:
    """Tests for the List typeclass instances."""

    def test_monad_plus(self):
        """mplus concatenates and mzero is the empty list."""
        monad = List.monad
        assert monad.mplus(List.of(1), List.of(2)) == List.of(1, 2)
        assert monad.msum([List.of(1), List.nil(), List.of(2, 3)]) == List.of(1, 2, 3)
        assert monad.ap(List.of(lambda x: x + 1, lambda x: x * 10), List.of(1, 2)) == List.of(2, 3, 10, 20)

    def test_traverse(self):
        """Traversing with Maybe fails as a whole when one element fails."""
        half = lambda x: Maybe.present_when(x % 2 == 0, lambda: x // 2)  # noqa: E731
        assert List.traversable.traverse(Maybe.monad, half, List.of(2, 4)) == Maybe.present(List.of(1, 2))
        assert List.traversable.traverse(Maybe.monad, half, List.of(2, 3)).is_empty()

    def test_sequence_a(self):
        """sequence_a() of Lists of Lists is the cartesian product."""
        result = List.traversable.sequence_a(List.monad, List.of(List.of(1, 2), List.of(3)))
        assert result == List.of(List.of(1, 3), List.of(2, 3))

    @given(lists)
    def test_monoid_identity(self, items):
        """nil is the identity of concatenation."""
        monoid = List.monoid()
        assert monoid.apply(monoid.identity(), items) == items == monoid.apply(items, monoid.identity())

    def test_fold_map(self):
        """fold_map() through the Foldable instance."""
        assert List.monad.fold_map(List.monoid(), lambda x: List.of(x, x), List.of(1, 2)) == List.of(1, 1, 2, 2)


class TestListRendering:
    """Tests for str() and repr()."""

    def test_render(self):
        """List(a,b,c) with no spaces."""
        assert str(List.of(1, 2, 3)) == 'List(1,2,3)'
        assert repr(List.nil()) == 'List()'
        assert str(List.of(List.of(1), Maybe.empty())) == 'List(List(1),Empty)'

import pytest

from int_set import Empty, NonEmpty, from_ints


class TestEmpty:

    def test_empty(self):
        assert not Empty.contains(1)
        assert Empty.size() == 0
        assert str(Empty) == "."


class TestIncl:

    def test_step_by_step(self):
        step1 = Empty.incl(3)
        assert str(step1) == "{.3.}"
        step2 = step1.incl(1)
        assert str(step2) == "{{.1.}3.}"
        step3 = step2.incl(5)
        assert str(step3) == "{{.1.}3{.5.}}"

    def test_persistent(self):
        base = from_ints(3, 1)
        bigger = base.incl(5)
        assert 5 in bigger
        assert 5 not in base
        assert len(base) == 2

    def test_duplicate_returns_same_set(self):
        s = from_ints(3, 1, 5)
        assert s.incl(3) is s
        assert s.size() == 3

    @pytest.mark.parametrize("x", [1, 3, 4, 7, 9])
    def test_contains(self, x):
        assert from_ints(4, 1, 7, 3, 9).contains(x)

    @pytest.mark.parametrize("x", [0, 2, 5, 8, 10])
    def test_not_contains(self, x):
        assert not from_ints(4, 1, 7, 3, 9).contains(x)


class TestUnion:

    def test_union(self):
        a = from_ints(3, 1, 5)
        b = from_ints(4, 2, 5, 6)
        u = a.union(b)
        assert u.size() == 6
        assert all(u.contains(x) for x in range(1, 7))

    def test_union_with_empty(self):
        a = from_ints(2, 1)
        assert Empty.union(a) is a
        assert a.union(Empty).size() == 2

    def test_search_tree_order(self):
        u = from_ints(8, 3).union(from_ints(1, 9, 4))
        assert isinstance(u, NonEmpty)

        def in_order(s):
            if not isinstance(s, NonEmpty):
                return []
            return in_order(s.left) + [s.elem] + in_order(s.right)

        assert in_order(u) == [1, 3, 4, 8, 9]

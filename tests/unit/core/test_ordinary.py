import threading

import pytest
from hypothesis import given, strategies as st

from statelab.core.errors import DuplicationUnsupported, StateError
from statelab.core.ordinary import OrdinaryVariable, and_, duplicate, implies, negate

values = st.one_of(
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(),
    st.lists(st.integers()),
    st.dictionaries(st.text(), st.lists(st.booleans())),
)


@given(values, values)
def test_set_copies_value(initial, x):
    a = OrdinaryVariable(x)
    b = OrdinaryVariable(initial)
    b.set(a)
    assert b.get() == a.get()


@given(values)
def test_get_is_repeatable(x):
    v = OrdinaryVariable(x)
    assert v.get() == v.get()


def test_get_returns_independent_copy():
    v = OrdinaryVariable([1, 2, 3])
    out = v.get()
    out.append(4)
    assert v.get() == [1, 2, 3]


def test_construction_and_set_do_not_alias_the_source():
    payload = {"k": [1]}
    v = OrdinaryVariable(payload)
    payload["k"].append(2)
    assert v.get() == {"k": [1]}

    other = OrdinaryVariable({"k": [9]})
    v.set(other)
    v_value = v.get()
    v_value["k"].append(10)
    assert other.get() == {"k": [9]}
    assert v.get() == {"k": [9]}


def test_set_does_not_touch_other():
    a = OrdinaryVariable("Hello, world!")
    b = OrdinaryVariable("")
    b.set(a)
    assert a.get() == "Hello, world!"
    assert b.get() == "Hello, world!"


def test_set_from_self_is_a_noop():
    a = OrdinaryVariable(42)
    a.set(a)
    assert a.get() == 42


def test_set_rejects_other_container_kinds():
    from statelab.core.random_bool import RandomBool

    with pytest.raises(TypeError):
        OrdinaryVariable(True).set(RandomBool(1.0))


def test_duplication_unsupported():
    with pytest.raises(DuplicationUnsupported) as excinfo:
        OrdinaryVariable(threading.Lock())
    assert isinstance(excinfo.value, StateError)
    assert isinstance(excinfo.value, TypeError)


def test_duplicate_honours_deepcopy_hook():
    class Token:
        def __init__(self, n):
            self.n = n

        def __deepcopy__(self, memo):
            return Token(self.n + 1)

    assert duplicate(Token(1)).n == 2


@pytest.mark.parametrize("x,expected", [(True, False), (False, True)])
def test_negate(x, expected):
    v = OrdinaryVariable(x)
    negate(v)
    assert v.get() is expected


@pytest.mark.parametrize("l_val", [True, False])
@pytest.mark.parametrize("r_val", [True, False])
def test_and_and_implies_truth_tables(l_val, r_val):
    out = OrdinaryVariable(False)
    and_(out, OrdinaryVariable(l_val), OrdinaryVariable(r_val))
    assert out.get() is (l_val and r_val)

    imp = OrdinaryVariable(False)
    left, right = OrdinaryVariable(l_val), OrdinaryVariable(r_val)
    implies(imp, left, right)
    assert imp.get() is ((not l_val) or r_val)
    # operands untouched
    assert left.get() is l_val and right.get() is r_val


def test_x_implies_not_y():
    x = OrdinaryVariable(True)
    y = OrdinaryVariable(True)
    out = OrdinaryVariable(False)
    negate(y)
    and_(out, x, y)
    negate(out)
    assert out.get() is True

import pytest
from hypothesis import given, settings, strategies as st

from statelab.core.composites import and_, negate, or_
from statelab.core.random_bool import RandomBool
from statelab.core.rng import default_source, make_source, set_seed

probs = st.floats(min_value=0.0, max_value=1.0, allow_nan=False)
seeds = st.integers(min_value=0, max_value=2**32 - 1)


@pytest.mark.parametrize("p,expected", [(1.0, False), (0.0, True)])
def test_negate_degenerate(p, expected):
    v = RandomBool(p)
    negate(v)
    assert v.collapsed
    assert v.get() is expected


@settings(max_examples=50)
@given(probs, seeds)
def test_negate_is_complement_of_observation(p, seed):
    src = make_source(seed)
    v = RandomBool(p, rng=src)
    twin = RandomBool(p, rng=make_source(seed))
    seen = twin.get()
    negate(v)
    assert v.prob_true == (0.0 if seen else 1.0)
    assert v.get() is (not seen)


@settings(max_examples=50)
@given(probs, probs, probs, seeds)
def test_and_contract(p_out, p_l, p_r, seed):
    src = make_source(seed)
    out, left, right = RandomBool(p_out, rng=src), RandomBool(p_l, rng=src), RandomBool(p_r, rng=src)
    and_(out, left, right)
    assert left.collapsed and right.collapsed and out.collapsed
    assert out.get() is (left.get() and right.get())


@settings(max_examples=50)
@given(probs, probs, seeds)
def test_or_contract(p_l, p_r, seed):
    src = make_source(seed)
    out, left, right = RandomBool(0.5, rng=src), RandomBool(p_l, rng=src), RandomBool(p_r, rng=src)
    or_(out, left, right)
    assert out.get() is (left.get() or right.get())


def test_and_observes_both_operands_without_short_circuit(scripted):
    src = scripted(0.9, 0.1)
    left = RandomBool(0.5, rng=src)   # 0.9 -> False
    right = RandomBool(0.5, rng=src)  # 0.1 -> True
    out = RandomBool(1.0, rng=src)
    and_(out, left, right)
    assert src.draws == 2
    assert left.prob_true == 0.0
    assert right.prob_true == 1.0
    assert out.prob_true == 0.0


def test_output_may_alias_an_operand(scripted):
    x = RandomBool(0.5, rng=scripted(0.1, 0.5))
    y = RandomBool(0.5, rng=scripted(0.2))
    and_(x, x, y)
    assert x.get() is True

    z = RandomBool(0.5, rng=scripted(0.9, 0.5))
    w = RandomBool(0.0)
    or_(z, z, w)
    assert z.get() is False


def test_implication_chain_matches_classical_result():
    x, y, out = RandomBool(1.0), RandomBool(1.0), RandomBool(0.0)
    negate(y)
    and_(out, x, y)
    negate(out)
    assert out.get() is True


def test_explicit_sources_leave_default_stream_untouched():
    set_seed(1)
    expected = [default_source().uniform() for _ in range(3)]
    set_seed(1)
    src = make_source(5)
    out, left, right = RandomBool(0.5, rng=src), RandomBool(0.5, rng=src), RandomBool(0.5, rng=src)
    and_(out, left, right)
    or_(out, left, right)
    negate(out)
    assert default_source().draws == 0
    assert [default_source().uniform() for _ in range(3)] == expected


def test_rng_keyword_observes_operands(scripted):
    src = scripted(0.1, 0.9)
    left = RandomBool(0.5, rng=scripted())
    right = RandomBool(0.5, rng=scripted())
    out = RandomBool(0.5)
    or_(out, left, right, rng=src)
    assert src.draws == 2
    assert (left.prob_true, right.prob_true, out.prob_true) == (1.0, 0.0, 1.0)

    v = RandomBool(0.5, rng=scripted())
    negate(v, rng=scripted(0.7))
    assert v.prob_true == 1.0

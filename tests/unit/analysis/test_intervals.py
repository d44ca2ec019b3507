import math

import pytest

from statelab.analysis.intervals import hoeffding_radius, norm_ppf, wilson_ci_from_counts


def test_norm_ppf_known_quantiles():
    assert norm_ppf(0.5) == pytest.approx(0.0, abs=1e-9)
    assert norm_ppf(0.975) == pytest.approx(1.959964, abs=1e-5)
    assert norm_ppf(0.01) == pytest.approx(-2.326348, abs=1e-5)
    assert norm_ppf(0.99) == pytest.approx(2.326348, abs=1e-5)


@pytest.mark.parametrize("p", [0.0, 1.0, -0.1])
def test_norm_ppf_domain(p):
    with pytest.raises(ValueError):
        norm_ppf(p)


def test_wilson_contains_phat_and_stays_in_unit_interval():
    for k, n in [(0, 10), (10, 10), (5, 10), (4975, 10_000)]:
        lo, hi = wilson_ci_from_counts(k, n)
        assert 0.0 <= lo <= k / n <= hi <= 1.0


def test_wilson_narrows_with_n():
    lo_s, hi_s = wilson_ci_from_counts(50, 100)
    lo_b, hi_b = wilson_ci_from_counts(5000, 10_000)
    assert (hi_b - lo_b) < (hi_s - lo_s)


@pytest.mark.parametrize("k,n,delta", [(-1, 10, 0.05), (11, 10, 0.05), (1, 0, 0.05), (1, 10, 0.0), (1, True, 0.05)])
def test_wilson_rejects(k, n, delta):
    with pytest.raises(ValueError):
        wilson_ci_from_counts(k, n, delta)


def test_hoeffding_radius():
    assert hoeffding_radius(10_000, 0.05) == pytest.approx(math.sqrt(math.log(40) / 20_000))
    assert hoeffding_radius(10_000) < 0.05
    assert hoeffding_radius(100) > hoeffding_radius(1000)
    with pytest.raises(ValueError):
        hoeffding_radius(0)

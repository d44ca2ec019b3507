import pytest

from statelab import demos
from statelab.core.rng import make_source


def test_eager_randomness_uses_three_draws(scripted, capsys):
    src = scripted(0.1, 0.999, 0.0)
    demos.example_3(src)
    out = capsys.readouterr().out.splitlines()
    assert out == ["coin is heads", "dice is 6", "weather is 11.0 degrees"]
    assert src.draws == 3


@pytest.mark.parametrize("seed", range(10))
def test_nickel_and_dime_always_agree(seed, capsys):
    demos.example_4(make_source(seed))
    first = capsys.readouterr().out.splitlines()[0]
    nickel, _, rest = first.partition(" and ")
    dime = rest.split(".")[0]
    assert nickel == dime


def test_joint_example_runs(capsys):
    demos.example_5(make_source(0))
    out = capsys.readouterr().out
    assert "P(rain)=0.300" in out
    assert "P(umbrella | rain)=0.833" in out
    assert "Umbrella is" in out


def test_run_all_runs_every_example(capsys):
    demos.run_all(make_source(1))
    out = capsys.readouterr().out
    assert out.count("First it's") == 4
    assert "dice is" in out

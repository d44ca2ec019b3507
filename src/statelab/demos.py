# src/statelab/demos.py
"""
Narrated demonstrations, printed to stdout.

1. classical variables of a few types
2. classical computation (x => y)
3. randomness resolved when a variable is created
4. randomness resolved when a variable is observed
5. randomness that is never resolved early: a joint distribution
"""

from __future__ import annotations

from typing import Callable, List, Optional

from statelab.core import composites
from statelab.core import ordinary
from statelab.core.ordinary import OrdinaryVariable
from statelab.core.random_bool import RandomBool
from statelab.core.rng import UniformSource, resolve_source
from statelab.joint.state import JointBooleanState

__all__ = ["EXAMPLES", "example_1", "example_2", "example_3", "example_4", "example_5", "run_all"]


def example_1(rng: Optional[UniformSource] = None) -> None:
    """A variable stores a value, keeps it, and can be set and read."""
    bit = OrdinaryVariable(False)
    print(f"First it's {bit.get()}")
    true_bit = OrdinaryVariable(True)
    bit.set(true_bit)
    print(f"Now it's {bit.get()}")

    integer = OrdinaryVariable(0)
    print(f"First it's {integer.get()}")
    forty_two = OrdinaryVariable(42)
    integer.set(forty_two)
    print(f"Now it's {integer.get()}")

    real = OrdinaryVariable(0.0)
    print(f"First it's {real.get()}")
    pi = OrdinaryVariable(3.14159)
    real.set(pi)
    print(f"Now it's {real.get()}")

    text = OrdinaryVariable("")
    print(f'First it\'s "{text.get()}"')
    hello_world = OrdinaryVariable("Hello, world!")
    text.set(hello_world)
    print(f'Now it\'s "{text.get()}"')


def example_2(rng: Optional[UniformSource] = None) -> None:
    x = OrdinaryVariable(True)
    y = OrdinaryVariable(True)
    output = OrdinaryVariable(False)
    ordinary.negate(y)
    ordinary.and_(output, x, y)
    ordinary.negate(output)
    print(f"x => y == {output.get()}")


def example_3(rng: Optional[UniformSource] = None) -> None:
    """Eager randomness: the draw happens at creation and the variable is ordinary from then on."""
    source = resolve_source(rng)
    coin = OrdinaryVariable(source.uniform() < 1.0 / 3.0)  # 1 in 3 for heads
    print(f"coin is {'heads' if coin.get() else 'tails'}")
    dice = OrdinaryVariable(min(int(source.uniform() * 6), 5))
    print(f"dice is {dice.get() + 1}")
    weather = OrdinaryVariable(11.0 + 3.5 * source.uniform())
    print(f"weather is {weather.get()} degrees")


def example_4(rng: Optional[UniformSource] = None) -> None:
    """Lazy randomness: copying a random variable copies the outcome."""
    nickel = RandomBool(0.5, rng=rng)
    dime = RandomBool(0.0, rng=rng)
    dime.set(nickel)
    quarter = RandomBool(0.8, rng=rng) if dime.get() else RandomBool(0.4, rng=rng)
    print(f"{nickel.get()} and {dime.get()}. See, you get nickeled and dimed all the same!")
    print(f"And the quarter is {quarter.get()}: likely same as dime, but not always.")

    flipped = RandomBool(0.5, rng=rng)
    both = RandomBool(0.0, rng=rng)
    composites.and_(both, nickel, flipped)
    print(f"nickel AND a fresh coin: {both.get()} (both operands were observed to compute it)")


def example_5(rng: Optional[UniformSource] = None) -> None:
    """Joint randomness: observe one variable and the others are conditioned, not collapsed."""
    state = JointBooleanState(rng)
    rain, umbrella = state.add_pair("rain", "umbrella", 0.3, 0.4, 0.25)
    state.derive_not("no_umbrella", "umbrella")
    wet = state.derive_and("wet", "rain", "no_umbrella")
    print(f"P(rain)={rain.probability:.3f}, P(umbrella)={umbrella.probability:.3f}, "
          f"correlation={state.correlation('rain', 'umbrella'):.3f}")
    print(f"P(umbrella | rain)={state.conditional('umbrella', {'rain': True}):.3f}")

    saw_wet = wet.get()
    print(f"Observed wet={saw_wet}; now P(rain)={rain.probability:.3f} "
          f"and P(umbrella)={umbrella.probability:.3f}, still unobserved.")
    print(f"Umbrella is {umbrella.get()}.")


EXAMPLES: List[Callable[[Optional[UniformSource]], None]] = [
    example_1,
    example_2,
    example_3,
    example_4,
    example_5,
]


def run_all(rng: Optional[UniformSource] = None) -> None:
    for example in EXAMPLES:
        example(rng)

"""Ready-made rule sets.

``fizz_buzz`` builds the classic rules for any numeric type; the named
presets are declarative specs that can be inspected, rendered or hashed
before being turned into a runtime rule set.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fizzy.matcher import Matcher
from fizzy.models import FizzySpec, MatcherSpec
from fizzy.predicates import PredicateDivisibleBy
from fizzy.rules import Fizzy

logger = logging.getLogger(__name__)


def fizz_buzz(number_type: Callable[..., Any] = int) -> Fizzy[Any]:
    """Return the classic fizz/buzz rules for values of ``number_type``.

    ``number_type()`` must give the type's zero and ``number_type(3)`` its
    three; values must support ``%`` and ``==``. Multiples of both divisors
    produce ``"fizzbuzz"`` since both matchers fire in order.
    """
    zero = number_type()
    three = number_type(3)
    five = number_type(5)
    return (
        Fizzy.with_capacity(2)
        .add_matcher(Matcher(lambda n: n % three == zero, "fizz"))
        .add_matcher(Matcher(lambda n: n % five == zero, "buzz"))
    )


def _divisible_by(divisor: int, substitution: str) -> MatcherSpec:
    return MatcherSpec(
        predicate=PredicateDivisibleBy(divisor=divisor),
        substitution=substitution,
    )


def fizz_buzz_spec() -> FizzySpec:
    """Declarative equivalent of ``fizz_buzz()`` for integers."""
    return FizzySpec(
        matchers=[_divisible_by(3, "fizz"), _divisible_by(5, "buzz")]
    )


@dataclass(frozen=True)
class RulePreset:
    name: str
    description: str
    build: Callable[[], FizzySpec]


def _fizz_buzz_bam_spec() -> FizzySpec:
    return FizzySpec(
        matchers=[
            _divisible_by(3, "fizz"),
            _divisible_by(5, "buzz"),
            _divisible_by(7, "bam"),
        ]
    )


PRESETS: dict[str, RulePreset] = {
    "fizz_buzz": RulePreset(
        name="fizz_buzz",
        description="3 -> fizz, 5 -> buzz",
        build=fizz_buzz_spec,
    ),
    "fizz_buzz_bam": RulePreset(
        name="fizz_buzz_bam",
        description="3 -> fizz, 5 -> buzz, 7 -> bam",
        build=_fizz_buzz_bam_spec,
    ),
}


def get_preset_spec(name: str) -> FizzySpec:
    """Return a fresh spec for preset ``name``.

    Raises:
        ValueError: If ``name`` is not a known preset.
    """
    preset = PRESETS.get(name)
    if preset is None:
        raise ValueError(
            f"Unknown preset: {name}. Valid: {sorted(PRESETS)}"
        )
    return preset.build()


def get_preset(name: str) -> Fizzy[int]:
    logger.debug("Building preset %s", name)
    return Fizzy.from_spec(get_preset_spec(name))

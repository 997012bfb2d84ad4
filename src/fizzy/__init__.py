"""fizzy: predicate/substitution rule sets over sequences of values."""

from fizzy.matcher import Matcher
from fizzy.models import (
    FizzySpec,
    MatcherSpec,
    dumps_spec,
    loads_spec,
    rule_set_id,
)
from fizzy.predicates import Predicate, eval_predicate, render_predicate
from fizzy.presets import (
    PRESETS,
    fizz_buzz,
    fizz_buzz_spec,
    get_preset,
    get_preset_spec,
)
from fizzy.render import render_fizzy
from fizzy.rules import Fizzy

__all__ = [
    "PRESETS",
    "Fizzy",
    "FizzySpec",
    "Matcher",
    "MatcherSpec",
    "Predicate",
    "dumps_spec",
    "eval_predicate",
    "fizz_buzz",
    "fizz_buzz_spec",
    "get_preset",
    "get_preset_spec",
    "loads_spec",
    "render_fizzy",
    "render_predicate",
    "rule_set_id",
]

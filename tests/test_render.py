from typing import Any

import pytest

from fizzy.models import FizzySpec, MatcherSpec
from fizzy.predicates import (
    PredicateAnd,
    PredicateDivisibleBy,
    PredicateModEq,
    PredicateNot,
)
from fizzy.presets import fizz_buzz_spec, get_preset_spec
from fizzy.render import render_fizzy
from fizzy.rules import Fizzy


def _compile(code: str, func_name: str = "f") -> Any:
    namespace: dict[str, Any] = {}
    exec(code, namespace)  # noqa: S102
    return namespace[func_name]


class TestRenderFizzy:
    def test_fizz_buzz_source(self) -> None:
        code = render_fizzy(fizz_buzz_spec())
        assert code == "\n".join(
            [
                "def f(x):",
                "    out = ''",
                "    if x % 3 == 0:",
                "        out += 'fizz'",
                "    if x % 5 == 0:",
                "        out += 'buzz'",
                "    return out or str(x)",
            ]
        )

    def test_empty_spec(self) -> None:
        f = _compile(render_fizzy(FizzySpec()))
        assert f(12) == "12"

    def test_custom_names(self) -> None:
        code = render_fizzy(fizz_buzz_spec(), func_name="classify", var="n")
        assert code.startswith("def classify(n):")
        assert _compile(code, "classify")(30) == "fizzbuzz"

    def test_quotes_are_escaped(self) -> None:
        spec = FizzySpec(
            matchers=[
                MatcherSpec(
                    predicate=PredicateDivisibleBy(divisor=2),
                    substitution="it's \"even\"",
                )
            ]
        )
        assert _compile(render_fizzy(spec))(2) == "it's \"even\""

    def test_agrees_with_runtime(self) -> None:
        spec = get_preset_spec("fizz_buzz_bam")
        spec.matchers.append(
            MatcherSpec(
                predicate=PredicateAnd(
                    operands=[
                        PredicateModEq(divisor=10, remainder=1),
                        PredicateNot(operand=PredicateDivisibleBy(divisor=3)),
                    ]
                ),
                substitution="!",
            )
        )
        rendered = _compile(render_fizzy(spec))
        runtime = Fizzy.from_spec(spec)
        for n in range(-20, 121):
            assert rendered(n) == runtime.apply_to(n)

    @pytest.mark.parametrize("func_name", ["", "1f", "def", "f(x):", "a b"])
    def test_rejects_invalid_func_name(self, func_name) -> None:
        with pytest.raises(ValueError, match="func_name"):
            render_fizzy(fizz_buzz_spec(), func_name=func_name)

    @pytest.mark.parametrize("var", ["", "x)", "lambda", "x=1"])
    def test_rejects_invalid_var(self, var) -> None:
        with pytest.raises(ValueError, match="var"):
            render_fizzy(fizz_buzz_spec(), var=var)

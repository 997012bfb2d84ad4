"""Declarative conditions for rule sets built from config.

Only residue checks are atomic; everything else is composed from them with
``not``/``and``/``or``. Values may be any number type with ``%``, so residues
are normalised before comparing: ``Decimal`` keeps the dividend's sign where
``int`` and ``Fraction`` floor towards the divisor.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, model_validator


class PredicateDivisibleBy(BaseModel):
    kind: Literal["divisible_by"] = "divisible_by"
    divisor: int = Field(ge=1, description="Positive divisor")


class PredicateModEq(BaseModel):
    kind: Literal["mod_eq"] = "mod_eq"
    divisor: int = Field(ge=1, description="Positive divisor")
    remainder: int = Field(ge=0, description="Expected residue, < divisor")

    @model_validator(mode="after")
    def remainder_below_divisor(self) -> "PredicateModEq":
        if self.remainder >= self.divisor:
            raise ValueError(
                f"remainder ({self.remainder}) must be < "
                f"divisor ({self.divisor})"
            )
        return self


class PredicateNot(BaseModel):
    kind: Literal["not"] = "not"
    operand: "Predicate"


class PredicateAnd(BaseModel):
    kind: Literal["and"] = "and"
    operands: list["Predicate"] = Field(min_length=2)


class PredicateOr(BaseModel):
    kind: Literal["or"] = "or"
    operands: list["Predicate"] = Field(min_length=2)


Predicate = Annotated[
    PredicateDivisibleBy
    | PredicateModEq
    | PredicateNot
    | PredicateAnd
    | PredicateOr,
    Field(discriminator="kind"),
]

for _model in (PredicateNot, PredicateAnd, PredicateOr):
    _model.model_rebuild()


def residue(x: Any, divisor: int) -> Any:
    """``x mod divisor`` in ``[0, divisor)`` for any numeric ``x``."""
    r = x % divisor
    if r < 0:
        r += divisor
    return r


def eval_predicate(pred: Predicate, x: Any) -> bool:
    match pred:
        case PredicateDivisibleBy(divisor=d):
            return residue(x, d) == 0
        case PredicateModEq(divisor=d, remainder=r):
            return residue(x, d) == r
        case PredicateNot(operand=inner):
            return not eval_predicate(inner, x)
        case PredicateAnd(operands=parts):
            return all(eval_predicate(p, x) for p in parts)
        case PredicateOr(operands=parts):
            return any(eval_predicate(p, x) for p in parts)
        case _:
            raise ValueError(f"Unknown predicate: {pred}")


def render_predicate(pred: Predicate, var: str = "x") -> str:
    """Render ``pred`` as a Python boolean expression over int ``var``."""
    match pred:
        case PredicateDivisibleBy(divisor=d):
            return f"{var} % {d} == 0"
        case PredicateModEq(divisor=d, remainder=r):
            return f"{var} % {d} == {r}"
        case PredicateNot(operand=inner):
            return f"not ({render_predicate(inner, var)})"
        case PredicateAnd(operands=parts) | PredicateOr(operands=parts):
            rendered = [render_predicate(p, var) for p in parts]
            return "(" + f" {pred.kind} ".join(rendered) + ")"
        case _:
            raise ValueError(f"Unknown predicate: {pred}")

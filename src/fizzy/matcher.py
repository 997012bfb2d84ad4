from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from fizzy.models import MatcherSpec
from fizzy.predicates import eval_predicate

T = TypeVar("T")


@dataclass(frozen=True)
class Matcher(Generic[T]):
    """A predicate paired with the text it contributes when it holds."""

    predicate: Callable[[T], bool]
    substitution: str

    def __post_init__(self) -> None:
        if not callable(self.predicate):
            raise TypeError(
                "predicate must be callable, got "
                f"{type(self.predicate).__name__}"
            )
        if not isinstance(self.substitution, str):
            raise TypeError(
                "substitution must be str, got "
                f"{type(self.substitution).__name__}"
            )

    def matches(self, value: T) -> bool:
        return bool(self.predicate(value))

    @classmethod
    def from_spec(cls, spec: MatcherSpec) -> "Matcher[T]":
        predicate = spec.predicate
        return cls(lambda x: eval_predicate(predicate, x), spec.substitution)

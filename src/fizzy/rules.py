"""Ordered rule sets that turn values into substituted strings.

A ``Fizzy`` holds matchers in insertion order. Applying it to a value
concatenates the substitution of every matcher whose predicate holds, falling
back to ``str(value)`` when none does.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

from fizzy.matcher import Matcher
from fizzy.models import FizzySpec

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _substitute(matchers: Sequence[Matcher[T]], value: T) -> str:
    out = "".join(m.substitution for m in matchers if m.matches(value))
    if not out:
        return str(value)
    return out


class Fizzy(Generic[T]):
    def __init__(self, matchers: Iterable[Matcher[T]] | None = None) -> None:
        self._matchers: list[Matcher[T]] = []
        for matcher in matchers or ():
            self.add_matcher(matcher)

    @classmethod
    def new(cls) -> "Fizzy[T]":
        return cls()

    @classmethod
    def with_capacity(cls, capacity: int) -> "Fizzy[T]":
        """Create an empty rule set; ``capacity`` is only a sizing hint."""
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        return cls()

    @classmethod
    def from_spec(cls, spec: FizzySpec) -> "Fizzy[T]":
        logger.debug(
            "Building rule set from %d matcher specs", len(spec.matchers)
        )
        return cls(Matcher.from_spec(m) for m in spec.matchers)

    @property
    def matchers(self) -> tuple[Matcher[T], ...]:
        return tuple(self._matchers)

    def __len__(self) -> int:
        return len(self._matchers)

    def __repr__(self) -> str:
        subs = [m.substitution for m in self._matchers]
        return f"{type(self).__name__}({subs!r})"

    def add_matcher(self, matcher: Matcher[T]) -> "Fizzy[T]":
        """Append ``matcher`` after the existing ones and return ``self``."""
        if not isinstance(matcher, Matcher):
            raise TypeError(
                f"expected Matcher, got {type(matcher).__name__}"
            )
        self._matchers.append(matcher)
        logger.debug(
            "Added matcher %d with substitution %r",
            len(self._matchers),
            matcher.substitution,
        )
        return self

    def apply_to(self, value: T) -> str:
        return _substitute(self._matchers, value)

    def apply(self, values: Iterable[T]) -> Iterator[str]:
        """Lazily map ``apply_to`` over ``values``.

        The matchers are captured when this is called, so matchers added
        afterwards do not affect the returned iterator. Nothing is evaluated
        until the iterator is advanced, and infinite inputs are fine.
        """
        matchers = tuple(self._matchers)
        return (_substitute(matchers, value) for value in values)

import hashlib

import srsly
from pydantic import BaseModel, Field

from fizzy.predicates import Predicate


class MatcherSpec(BaseModel):
    predicate: Predicate = Field(description="Condition checked per value")
    substitution: str = Field(
        description="Text emitted when the predicate holds"
    )


class FizzySpec(BaseModel):
    matchers: list[MatcherSpec] = Field(
        default_factory=list,
        description="Matchers in the order their substitutions concatenate",
    )


def dumps_spec(spec: FizzySpec) -> str:
    """Serialize a rule set to canonical (sorted-key) JSON."""
    return srsly.json_dumps(spec.model_dump(mode="json"), sort_keys=True)


def loads_spec(text: str) -> FizzySpec:
    return FizzySpec.model_validate(srsly.json_loads(text))


def rule_set_id(spec: FizzySpec) -> str:
    hash_bytes = hashlib.sha256(dumps_spec(spec).encode()).digest()[:8]
    return f"fizzy_{hash_bytes.hex()}"

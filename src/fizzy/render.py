import keyword

from fizzy.models import FizzySpec
from fizzy.predicates import render_predicate


def _check_identifier(name: str, role: str) -> None:
    if not name.isidentifier() or keyword.iskeyword(name):
        raise ValueError(f"{role} must be a Python identifier, got {name!r}")


def render_fizzy(
    spec: FizzySpec, func_name: str = "f", var: str = "x"
) -> str:
    """Render a rule set as a function accumulating substitutions."""
    _check_identifier(func_name, "func_name")
    _check_identifier(var, "var")
    lines = [f"def {func_name}({var}):", "    out = ''"]

    for matcher in spec.matchers:
        cond = render_predicate(matcher.predicate, var)
        lines.append(f"    if {cond}:")
        lines.append(f"        out += {matcher.substitution!r}")

    # Nothing matched (or only empty substitutions did)
    lines.append(f"    return out or str({var})")

    return "\n".join(lines)

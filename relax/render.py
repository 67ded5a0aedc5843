"""Text renderings of a relation's incidence matrix."""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional

from tabulate import tabulate

from relax.types import RenderConfig

if TYPE_CHECKING:
    from relax.relation.relation import Relation


def to_tex(r: "Relation", config: Optional[RenderConfig] = None) -> str:
    r"""
    Render r as a LaTeX array environment.

    One column per element of Y (the header row), one row per element of X.
    Cells use the true and false tokens of config, e.g. ``\true`` and ``\false``,
    which the including document is expected to define.
    """
    config = config or RenderConfig()
    domain_x, domain_y = r.get_domain()
    parts: List[str] = [r"\begin{array}", "{c|" + "c" * len(domain_y) + "}\n"]
    parts.extend(f" & {y}" for y in domain_y)
    parts.append(f" {config.separator}")
    for ix, x in enumerate(domain_x):
        parts.append(f" {config.row_terminator}\n")
        parts.append(str(x))
        for iy in r.iys():
            token = config.true_token if r.eval_at(ix, iy) else config.false_token
            parts.append(f" & {token}")
    parts.append("\n")
    parts.append(r"\end{array}")
    return "".join(parts)


def to_table(r: "Relation", tablefmt: str = "simple") -> str:
    """Render r as a plain-text table, 1 for related and 0 for unrelated pairs."""
    domain_x, domain_y = r.get_domain()
    headers = [""] + [str(y) for y in domain_y]
    rows = [
        [str(x)] + [int(r.eval_at(ix, iy)) for iy in r.iys()]
        for ix, x in enumerate(domain_x)
    ]
    return tabulate(rows, headers=headers, tablefmt=tablefmt)

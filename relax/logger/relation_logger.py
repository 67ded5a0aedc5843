"""Incidence matrix and property display for logs."""

from typing import TYPE_CHECKING, List, Tuple

from relax.logger.formatting import format_element
from relax.logger.table_logger import TableLogger

if TYPE_CHECKING:
    from relax.relation.relation import Relation

# Predicates reported by RelationLogger.properties, in display order
PROPERTY_NAMES: Tuple[str, ...] = (
    "homogeneous",
    "reflexive",
    "irreflexive",
    "symmetric",
    "antisymmetric",
    "asymmetric",
    "transitive",
    "preorder",
    "partial_order",
    "equivalent",
    "difunctional",
    "injective",
    "functional",
    "lefttotal",
    "surjective",
    "bijective",
    "function",
)


class RelationLogger(TableLogger):
    """
    Logger that can display relations.

    Usage:
        logger = RelationLogger("closure")
        logger.section("Reflexive closure")
        logger.relation(r, title="R")
        logger.properties(r)
    """

    def relation(self, r: "Relation", title: str = "") -> None:
        """Display the incidence matrix of r, 1 for related pairs."""
        if self.disabled:
            return
        domain_x, domain_y = r.get_domain()
        headers = [""] + [format_element(y) for y in domain_y]
        rows: List[List[object]] = [
            [format_element(x)] + [int(r.eval_at(ix, iy)) for iy in r.iys()]
            for ix, x in enumerate(domain_x)
        ]
        self.table(rows, headers=headers, title=title or None, tablefmt="simple")

    def properties(self, r: "Relation", title: str = "Properties") -> None:
        """Display which of the derived predicates hold for r."""
        if self.disabled:
            return
        rows = [[name, getattr(r, f"is_{name}")()] for name in PROPERTY_NAMES]
        self.table(rows, headers=["property", "holds"], title=title)

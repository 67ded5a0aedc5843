"""Table display functionality for logs."""

from typing import Any, List, Optional, Sequence
from tabulate import tabulate
from relax.logger.base_logger import AlgorithmLogger


class TableLogger(AlgorithmLogger):
    """Extension of AlgorithmLogger with table support."""

    def table(
        self,
        data: List[List[Any]],
        headers: Optional[List[str]] = None,
        title: Optional[str] = None,
        tablefmt: str = "grid",
        colalign: Optional[Sequence[Optional[str]]] = None,
    ) -> None:
        """Display data as a formatted table."""
        if self.disabled:
            return

        if title:
            self.info(f"\n{title}:")

        ascii_table = tabulate(
            data,
            headers=headers or [],
            tablefmt=tablefmt,
            colalign=colalign,
            showindex=False,
        )
        self.info(ascii_table)

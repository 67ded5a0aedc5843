"""Logging package for relax."""

from relax.logger.base_logger import AlgorithmLogger
from relax.logger.table_logger import TableLogger
from relax.logger.relation_logger import RelationLogger, PROPERTY_NAMES
from relax.logger.formatting import format_set, format_element

# Shared tracing logger, silent unless a caller enables it
relax_logger = RelationLogger("relax.trace")
relax_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "TableLogger",
    "RelationLogger",
    "PROPERTY_NAMES",
    "relax_logger",
    "format_set",
    "format_element",
]

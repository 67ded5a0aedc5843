"""Base logging functionality for tracing relation computations."""

import logging
from typing import Any, Callable, List, TypeVar, cast
from functools import wraps

F = TypeVar("F", bound=Callable[..., Any])


class AlgorithmLogger:
    """Base logger class for step-by-step tracing of relation algorithms."""

    def __init__(self, name: str):
        self.name = name
        self.disabled = False
        self._transcript: List[str] = []

        self.logger = logging.getLogger(name)

        # Only add a default StreamHandler if no handlers exist, so two
        # instances sharing a name do not duplicate each other's output.
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)
            self.logger.propagate = False
        elif self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.INFO)

    def _emit(self, level: int, message: str) -> None:
        if self.disabled:
            return
        self.logger.log(level, message)
        self._transcript.append(message)

    def section(self, title: str):
        """Start a new section in the log."""
        self._emit(logging.INFO, f"\n{'=' * 20} {title} {'=' * 20}\n")

    def subsection(self, title: str):
        """Start a new subsection in the log."""
        self._emit(logging.INFO, f"\n{'-' * 15} {title} {'-' * 15}\n")

    def info(self, message: str):
        self._emit(logging.INFO, message)

    def warning(self, message: str):
        self._emit(logging.WARNING, message)

    def error(self, message: str):
        self._emit(logging.ERROR, message)

    def debug(self, message: str):
        self._emit(logging.DEBUG, message)

    def result(self, label: str, value: Any):
        """Log a result with a label."""
        self._emit(logging.INFO, f"{label}: {value}")

    def clear(self):
        """Clear the accumulated transcript."""
        self._transcript = []

    def get_transcript(self) -> str:
        """Everything logged since the last clear, one entry per line."""
        return "\n".join(self._transcript)

    def log_execution(self, func: F) -> F:
        """Decorator for logging function execution with type safety."""

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            self.section(f"Executing {func.__name__}")
            try:
                result = func(*args, **kwargs)
                self.info(f"{func.__name__} completed successfully")
                return result
            except Exception as e:
                self.info(f"Error in {func.__name__}: {str(e)}")
                raise

        return cast(F, wrapper)

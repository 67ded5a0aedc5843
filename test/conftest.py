import logging

from relax.logger import relax_logger


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Keep the tracing logger quiet unless a test enables it
    relax_logger.disabled = True

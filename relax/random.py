"""Random relations with independent Bernoulli entries."""

import logging
from typing import Optional, Union

import numpy as np

from relax.relation.matrix import RelationMatrix
from relax.types import DomainLike, as_domain

logger = logging.getLogger(__name__)

Seed = Union[None, int, np.random.Generator]


def generate_random(domain: DomainLike, p: float, rng: Seed = None) -> RelationMatrix:
    """
    Generate a random relation over domain.

    Every cell of the incidence matrix is drawn independently and is True
    with probability p, so p = 0 yields the empty relation and p = 1 the
    universal relation.

    Args:
        domain: The (X, Y) pair of ordered sets, or one set for (X, X)
        p: Density of the incidence matrix, in [0, 1]
        rng: A numpy Generator, an integer seed, or None for fresh entropy

    Returns:
        A RelationMatrix over domain

    Raises:
        ValueError: If p is not in [0, 1]
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Density p must lie in [0, 1], got {p}")
    generator = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    domain_x, domain_y = as_domain(domain)
    size = len(domain_x) * len(domain_y)
    logger.debug("Drawing %d Bernoulli(%s) entries", size, p)
    # random() is in [0, 1), so p = 0 never and p = 1 always succeeds
    table = generator.random(size) < p
    return RelationMatrix((domain_x, domain_y), table)

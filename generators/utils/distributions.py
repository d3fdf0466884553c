"""Statistical distribution helpers for realistic data generation."""

import numpy as np


def log_normal_sample(
    rng: np.random.Generator,
    mean: float,
    std: float,
    min_val: float = 0.01,
    max_val: float | None = None,
) -> float:
    value = float(rng.lognormal(mean, std))
    value = max(value, min_val)
    if max_val is not None:
        value = min(value, max_val)
    return round(value, 2)


def micro_amount(rng: np.random.Generator, max_val: float = 49.0) -> float:
    """Tiny probe amount of the kind used to test stolen cards."""
    return round(float(rng.uniform(1.0, max_val)), 2)

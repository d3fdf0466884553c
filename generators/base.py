"""Base generator class with seeded RNG and shared helpers."""

import random
from datetime import datetime, timedelta
from typing import Any

import numpy as np


class BaseGenerator:
    def __init__(self, config: dict[str, Any], seed: int = 42):
        self.config = config
        self.seed = seed
        random.seed(seed)
        self.rng = np.random.default_rng(seed)

    def _random_datetime(self, start: datetime, end: datetime) -> datetime:
        """Generate a random datetime between start and end, minute precision."""
        delta = end - start
        random_minutes = random.randint(0, max(1, int(delta.total_seconds() // 60)))
        return start + timedelta(minutes=random_minutes)

    def _weighted_choice(self, options: dict[str, float]) -> str:
        """Choose from weighted options."""
        items = list(options.keys())
        weights = list(options.values())
        return random.choices(items, weights=weights, k=1)[0]

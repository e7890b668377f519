"""
Normal distribution backed by scipy.stats.
"""

import math

from scipy import stats

from openforecast.core.errors import InvalidArgumentError


class Normal:
    """Normal distribution with the given mean and standard deviation."""

    def __init__(self, mean: float = 0.0, std_deviation: float = 1.0):
        if not math.isfinite(mean):
            raise InvalidArgumentError(f"mean must be finite, got {mean}")
        if not math.isfinite(std_deviation) or std_deviation < 0:
            raise InvalidArgumentError(f"std_deviation must be finite and non-negative, got {std_deviation}")
        self.mean = float(mean)
        self.std_deviation = float(std_deviation)

    def quantile(self, prob: float) -> float:
        """Value x such that P(X <= x) = prob."""
        if not 0.0 <= prob <= 1.0:
            raise InvalidArgumentError(f"prob must lie in [0, 1], got {prob}")
        # scipy rejects scale=0; the distribution is a point mass at the mean
        if self.std_deviation == 0.0:
            return self.mean
        return float(stats.norm.ppf(prob, loc=self.mean, scale=self.std_deviation))

    def __repr__(self) -> str:
        return f"Normal(mean={self.mean}, std_deviation={self.std_deviation})"

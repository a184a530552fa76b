"""
lmsif Configuration

Centralized defaults for the LMS frequency estimator and the analytic
signal provider.

Usage:
    from lmsif.config import LMS_CONFIG as cfg

    out = np.full(n, cfg.lms.initial_value)
    if n < cfg.min_samples.summary:
        return nan_result
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LMSConfig:
    """Configuration for the adaptive predictor loop."""

    # Value placed in result[0] when the estimator allocates the buffer.
    # The loop itself never writes index 0.
    initial_value: float = 0.0

    # Result buffer dtype
    dtype: str = "float64"


@dataclass(frozen=True)
class AnalyticConfig:
    """Configuration for the analytic signal provider."""

    # FFT length for the Hilbert transform (None = signal length).
    # Longer transforms are zero-padded and truncated back to N samples.
    n_fft: Optional[int] = None


@dataclass(frozen=True)
class MinSamplesConfig:
    """Minimum sample requirements."""

    lms: int = 1        # N >= 1, zero updates for N == 1
    summary: int = 2    # at least one written estimate


@dataclass(frozen=True)
class SummaryConfig:
    """Configuration for frequency-track summary statistics."""

    # Leading fraction of estimates dropped as convergence transient
    burn_in_ratio: float = 0.1


@dataclass(frozen=True)
class LMSIFConfig:
    """Master configuration."""

    lms: LMSConfig = LMSConfig()
    analytic: AnalyticConfig = AnalyticConfig()
    min_samples: MinSamplesConfig = MinSamplesConfig()
    summary: SummaryConfig = SummaryConfig()


# Global singleton instance
LMS_CONFIG = LMSIFConfig()

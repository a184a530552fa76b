"""
Error taxonomy for LMS instantaneous-frequency estimation.

InvalidInputError is raised before any computation starts.
UpstreamFailureError wraps failures of the analytic signal provider.
Numeric degeneracy (NaN estimates) is not an error; it is counted.
"""


class LMSIFError(Exception):
    """Base class for all lmsif errors."""


class InvalidInputError(LMSIFError, ValueError):
    """Signal length, shape, step size or output buffer is unusable."""


class UpstreamFailureError(LMSIFError, RuntimeError):
    """The analytic signal provider could not produce a usable signal."""

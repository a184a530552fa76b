"""
Instantaneous frequency estimation entry point.

Validates caller input, resolves real-only signals through the analytic
signal provider, then runs the LMS estimator.
"""

import logging

import numpy as np
from typing import Callable, Optional

from lmsif.errors import InvalidInputError
from lmsif.individual.hilbert import analytic_signal
from lmsif.individual.lms import ProgressSink, check_output_buffer, lms_frequency
from lmsif.individual.signal import RealSignal, from_parts, to_complex

logger = logging.getLogger(__name__)


def estimate_if(
    real,
    mu: float,
    imag=None,
    n: Optional[int] = None,
    out: Optional[np.ndarray] = None,
    fs: Optional[float] = None,
    progress: Optional[ProgressSink] = None,
    provider: Callable[[np.ndarray], np.ndarray] = analytic_signal
) -> np.ndarray:
    """
    Estimate the instantaneous frequency of a sampled signal.

    Parameters
    ----------
    real : array_like
        Real parts, N >= 1 samples
    mu : float
        LMS step size, must be finite
    imag : array_like, optional
        Imaginary parts. When omitted the analytic signal of ``real``
        is used.
    n : int, optional
        Expected signal length. Checked against both sequences.
    out : np.ndarray, optional
        (N,) float buffer whose index 0 the caller owns
    fs : float, optional
        Sampling frequency. Scales indices 1..N-1 from cycles/sample to Hz.
    progress : callable, optional
        Completion sink, called with values in [0, 1]
    provider : callable
        Analytic signal provider for real-only input

    Returns
    -------
    np.ndarray
        (N,) frequency track. Index 0 is never computed.

    Raises
    ------
    InvalidInputError
        Bad length, mismatched parts, non-finite samples, mu or fs.
        Raised before any computation.
    UpstreamFailureError
        The analytic signal provider failed.
    """
    signal = from_parts(real, imag)
    length = len(signal)

    if length < 1:
        raise InvalidInputError("Signal must contain at least one sample")
    if n is not None and n != length:
        raise InvalidInputError(f"Declared length {n} does not match signal length {length}")
    if not np.all(np.isfinite(signal.values)):
        raise InvalidInputError("Signal contains non-finite values")
    try:
        mu = float(mu)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Step size must be a real number, got {mu!r}") from exc
    if not np.isfinite(mu):
        raise InvalidInputError(f"Step size must be finite, got {mu}")
    if fs is not None:
        try:
            fs = float(fs)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Sampling frequency must be a real number, got {fs!r}") from exc
        if not (np.isfinite(fs) and fs > 0):
            raise InvalidInputError(f"Sampling frequency must be positive and finite, got {fs}")
    if out is not None:
        check_output_buffer(out, length)

    logger.debug(
        "estimate_if: n=%d mu=%g analytic=%s",
        length, mu, isinstance(signal, RealSignal),
    )

    samples = to_complex(signal, provider)
    result = lms_frequency(samples, mu, out=out, progress=progress)

    if fs is not None:
        result[1:] *= fs
    return result

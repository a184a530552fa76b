"""
Hilbert Transform Primitives

Analytic signal provider and the reference (phase-derivative)
instantaneous frequency it implies.
"""

import logging
import operator

import numpy as np
from scipy import signal as scipy_signal
from typing import Optional

from lmsif.config import LMS_CONFIG as cfg
from lmsif.errors import InvalidInputError, UpstreamFailureError

logger = logging.getLogger(__name__)


def hilbert_transform(signal: np.ndarray) -> np.ndarray:
    """
    Compute Hilbert transform (analytic signal).

    Parameters
    ----------
    signal : np.ndarray
        Input signal (real)

    Returns
    -------
    np.ndarray
        Complex analytic signal

    Notes
    -----
    z(t) = x(t) + i*H[x](t)
    where H is the Hilbert transform.
    """
    signal = np.asarray(signal)
    return scipy_signal.hilbert(signal)


def analytic_signal(
    signal: np.ndarray,
    n_fft: Optional[int] = None
) -> np.ndarray:
    """
    Analytic signal of a real 1D signal, exactly N samples long.

    Parameters
    ----------
    signal : np.ndarray
        1D array of N >= 1 real, finite values
    n_fft : int, optional
        FFT length. Defaults to cfg.analytic.n_fft, then to N.
        Longer transforms are zero-padded and truncated back to N.

    Returns
    -------
    np.ndarray
        complex128 array of length N. The real part is the input
        itself, the imaginary part its quadrature companion.

    Raises
    ------
    InvalidInputError
        Input is not a non-empty, real, finite 1D array.
    UpstreamFailureError
        The transform failed or produced fewer than N samples.
    """
    signal = np.asarray(signal)
    if signal.ndim != 1 or len(signal) < 1:
        raise InvalidInputError(
            f"Expected a non-empty 1D signal, got shape {signal.shape}"
        )
    if np.iscomplexobj(signal):
        raise InvalidInputError("Analytic signal input must be real")
    signal = signal.astype(np.float64)
    if not np.all(np.isfinite(signal)):
        raise InvalidInputError("Signal contains non-finite values")

    n = len(signal)
    if n_fft is None:
        n_fft = cfg.analytic.n_fft
    if n_fft is not None:
        try:
            n_fft = operator.index(n_fft)
        except TypeError as exc:
            raise InvalidInputError(f"FFT length must be an integer, got {n_fft!r}") from exc
        if n_fft < n:
            raise InvalidInputError(f"FFT length {n_fft} is shorter than the signal ({n})")

    try:
        if n_fft is None:
            z = scipy_signal.hilbert(signal)
        else:
            z = scipy_signal.hilbert(signal, N=n_fft)
    except (ValueError, TypeError) as exc:
        raise UpstreamFailureError(
            f"Hilbert transform failed for N={n}, n_fft={n_fft}: {exc}"
        ) from exc

    z = np.asarray(z)
    if z.ndim != 1 or len(z) < n:
        raise UpstreamFailureError(
            f"Hilbert transform returned {z.shape}, need {n} samples"
        )
    if not np.all(np.isfinite(z[:n])):
        raise UpstreamFailureError("Hilbert transform produced non-finite values")

    logger.debug("analytic signal: n=%d n_fft=%s", n, n_fft)

    result = signal.astype(np.complex128)
    result.imag = z[:n].imag
    return result


def instantaneous_phase(signal: np.ndarray) -> np.ndarray:
    """
    Compute instantaneous phase.

    Parameters
    ----------
    signal : np.ndarray
        Input signal

    Returns
    -------
    np.ndarray
        Instantaneous phase (unwrapped)
    """
    analytic = hilbert_transform(signal)
    return np.unwrap(np.angle(analytic))


def hilbert_instantaneous_frequency(
    signal: np.ndarray,
    fs: float = 1.0
) -> np.ndarray:
    """
    Compute instantaneous frequency from the analytic signal phase.

    Non-adaptive reference estimate for comparing against the LMS track.

    Parameters
    ----------
    signal : np.ndarray
        Input signal (real) or an analytic signal (complex)
    fs : float
        Sampling frequency

    Returns
    -------
    np.ndarray
        Instantaneous frequency (cycles/sample when fs == 1)

    Notes
    -----
    f(t) = (1/2π) * d(phase)/dt
    where phase = angle(z(t))
    """
    signal = np.asarray(signal)
    if np.iscomplexobj(signal):
        phase = np.unwrap(np.angle(signal))
    else:
        phase = instantaneous_phase(signal)
    return np.gradient(phase, 1/fs) / (2 * np.pi)

"""
LMS Instantaneous Frequency Primitives

A single complex coefficient linearly predicts each sample from the one
before it. The coefficient is adapted by the least-mean-squares rule
after every sample, and its phase is read off as the instantaneous
frequency.
"""

import logging

import numpy as np
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from lmsif.config import LMS_CONFIG as cfg
from lmsif.errors import InvalidInputError

logger = logging.getLogger(__name__)

ProgressSink = Callable[[float], None]


@dataclass(frozen=True)
class LMSEstimate:
    """
    Full output of one LMS run.

    Attributes
    ----------
    frequency : np.ndarray
        (N,) normalized frequency track. Index 0 holds the initial value.
    coefficients : np.ndarray
        (N-1,) complex predictor coefficient after each update
    errors : np.ndarray
        (N-1,) complex one-step prediction errors
    coefficient : complex
        Final coefficient (the first sample when N == 1)
    n_degenerate : int
        Number of NaN estimates (coefficient collapsed to zero)
    """

    frequency: np.ndarray
    coefficients: np.ndarray
    errors: np.ndarray
    coefficient: complex
    n_degenerate: int


def lms_update(
    coeff: complex,
    current: complex,
    following: complex,
    mu: float
) -> Tuple[complex, complex]:
    """
    One predictor step.

    Parameters
    ----------
    coeff : complex
        Coefficient before the step
    current, following : complex
        Samples s[n] and s[n+1]
    mu : float
        Step size

    Returns
    -------
    (coeff, error) : tuple of complex
        Updated coefficient and the prediction error that drove it

    Notes
    -----
    e = w*s[n] + s[n+1]
    w <- w - 2*mu * e * conj(s[n])

    The gradient of |e|² with respect to w is replaced by its
    instantaneous value, which is what makes this LMS.
    """
    error_re = coeff.real * current.real - coeff.imag * current.imag + following.real
    error_im = coeff.real * current.imag + coeff.imag * current.real + following.imag

    re = coeff.real - 2. * mu * (error_re * current.real + error_im * current.imag)
    im = coeff.imag - 2. * mu * (error_im * current.real - error_re * current.imag)
    return complex(re, im), complex(error_re, error_im)


def coefficient_frequency(coeff):
    """
    Map predictor coefficient(s) to normalized frequency.

    Parameters
    ----------
    coeff : complex or np.ndarray
        Coefficient value(s)

    Returns
    -------
    float or np.ndarray
        Frequency in cycles/sample, in [0, 0.5). NaN where the
        coefficient is exactly zero.

    Notes
    -----
    phase = atan(Im/Re), shifted by π when negative, divided by 2π.

    This is a two-quadrant arctangent with a half-wrap, not atan2.
    The sign of the phase is folded away, so a coefficient and its
    negation map to the same frequency. Re == 0 gives atan(±inf) = ±π/2.
    """
    coeff = np.asarray(coeff, dtype=np.complex128)
    with np.errstate(divide='ignore', invalid='ignore'):
        phase = np.arctan(coeff.imag / coeff.real)
    phase = np.where(phase < 0, phase + np.pi, phase)
    freq = phase / (2. * np.pi)
    if freq.ndim == 0:
        return float(freq)
    return freq


def _check_inputs(samples, mu: float) -> Tuple[np.ndarray, float]:
    samples = np.asarray(samples)
    if samples.ndim != 1:
        raise InvalidInputError(f"Signal must be 1D, got shape {samples.shape}")
    if len(samples) < cfg.min_samples.lms:
        raise InvalidInputError(
            f"Signal needs at least {cfg.min_samples.lms} sample(s), got {len(samples)}"
        )
    try:
        mu = float(mu)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Step size must be a real number, got {mu!r}") from exc
    if not np.isfinite(mu):
        raise InvalidInputError(f"Step size must be finite, got {mu}")
    return samples.astype(np.complex128), mu


def check_output_buffer(out, n: int) -> None:
    """Reject a caller result buffer that is not a float array of shape (n,)."""
    if not isinstance(out, np.ndarray) or out.shape != (n,):
        raise InvalidInputError(
            f"Output buffer must be an array of shape ({n},), got "
            f"{getattr(out, 'shape', type(out).__name__)}"
        )
    if not np.issubdtype(out.dtype, np.floating):
        raise InvalidInputError(f"Output buffer must be floating point, got {out.dtype}")


def _adapt(
    samples: np.ndarray,
    mu: float,
    progress: Optional[ProgressSink] = None
) -> Tuple[np.ndarray, np.ndarray, complex]:
    """Run the sequential update loop. Returns coefficients, errors, final coefficient."""
    values = samples.tolist()
    n = len(values)

    coefficients = np.empty(n - 1, dtype=np.complex128)
    errors = np.empty(n - 1, dtype=np.complex128)

    coeff = values[0]
    for i in range(n - 1):
        coeff, error = lms_update(coeff, values[i], values[i + 1], mu)
        coefficients[i] = coeff
        errors[i] = error
        if progress is not None:
            progress((i + 1) / (n - 1))

    if progress is not None and n == 1:
        progress(1.0)

    return coefficients, errors, complex(coeff)


def _report_degenerate(n_degenerate: int, n: int) -> None:
    if n_degenerate:
        logger.warning(
            "%d of %d LMS frequency estimates are NaN (predictor coefficient collapsed to zero)",
            n_degenerate, n - 1,
        )


def lms_frequency(
    samples: np.ndarray,
    mu: float,
    out: Optional[np.ndarray] = None,
    progress: Optional[ProgressSink] = None
) -> np.ndarray:
    """
    Estimate instantaneous frequency with an adaptive LMS predictor.

    Parameters
    ----------
    samples : np.ndarray
        1D complex signal, N >= 1
    mu : float
        Step size. Not range-checked: small values track slowly and
        smoothly, large values track fast and noisily and may diverge.
    out : np.ndarray, optional
        (N,) float buffer. Indices 1..N-1 are overwritten, index 0 is
        left as the caller set it. Allocated with
        cfg.lms.initial_value when omitted.
    progress : callable, optional
        Called with the completed fraction after every update

    Returns
    -------
    np.ndarray
        The result buffer (``out`` itself when given)

    Notes
    -----
    w[0] = s[0]
    e[n] = w*s[n] + s[n+1]
    w <- w - 2*mu * e[n] * conj(s[n])
    f[n+1] = atan(Im w / Re w) (+π if negative) / 2π

    Exactly N-1 updates. N == 1 leaves the buffer untouched.
    """
    samples, mu = _check_inputs(samples, mu)
    n = len(samples)

    if out is None:
        out = np.full(n, cfg.lms.initial_value, dtype=cfg.lms.dtype)
    else:
        check_output_buffer(out, n)

    logger.debug("lms_frequency: n=%d mu=%g", n, mu)

    coefficients, _, _ = _adapt(samples, mu, progress)
    if n > 1:
        freq = coefficient_frequency(coefficients)
        out[1:] = freq
        _report_degenerate(int(np.count_nonzero(np.isnan(freq))), n)

    return out


def lms_trace(
    samples: np.ndarray,
    mu: float,
    progress: Optional[ProgressSink] = None
) -> LMSEstimate:
    """
    Run the LMS estimator and keep its internal trajectory.

    Same update as lms_frequency, additionally returning the coefficient
    and prediction error after every step and the degenerate count.

    Parameters
    ----------
    samples : np.ndarray
        1D complex signal, N >= 1
    mu : float
        Step size

    Returns
    -------
    LMSEstimate
    """
    samples, mu = _check_inputs(samples, mu)
    n = len(samples)

    coefficients, errors, coeff = _adapt(samples, mu, progress)

    frequency = np.full(n, cfg.lms.initial_value, dtype=cfg.lms.dtype)
    n_degenerate = 0
    if n > 1:
        frequency[1:] = coefficient_frequency(coefficients)
        n_degenerate = int(np.count_nonzero(np.isnan(frequency[1:])))
        _report_degenerate(n_degenerate, n)

    return LMSEstimate(
        frequency=frequency,
        coefficients=coefficients,
        errors=errors,
        coefficient=coeff,
        n_degenerate=n_degenerate,
    )


def lms_if_summary(samples: np.ndarray, mu: float) -> dict:
    """
    Summary statistics of the LMS frequency track.

    Parameters
    ----------
    samples : np.ndarray
        1D complex signal
    mu : float
        Step size

    Returns
    -------
    dict with keys:
        if_mean : float       — mean frequency after burn-in
        if_std : float        — std of frequency after burn-in
        if_median : float     — median frequency after burn-in
        if_min : float        — minimum frequency after burn-in
        if_max : float        — maximum frequency after burn-in
        if_final : float      — last estimate
        error_rms : float     — RMS prediction error after burn-in
        n_degenerate : int    — NaN estimates over the whole track

    Notes
    -----
    The first cfg.summary.burn_in_ratio of the N-1 estimates are
    dropped as convergence transient. NaN estimates are excluded from
    the statistics but counted.
    """
    samples = np.asarray(samples)

    nan_result = {
        'if_mean': np.nan,
        'if_std': np.nan,
        'if_median': np.nan,
        'if_min': np.nan,
        'if_max': np.nan,
        'if_final': np.nan,
        'error_rms': np.nan,
        'n_degenerate': 0,
    }

    if samples.ndim != 1 or len(samples) < cfg.min_samples.summary:
        return nan_result

    estimate = lms_trace(samples, mu)
    track = estimate.frequency[1:]
    burn_in = int(cfg.summary.burn_in_ratio * len(track))
    tail = track[burn_in:]
    errors = estimate.errors[burn_in:]

    finite = tail[np.isfinite(tail)]
    result = dict(nan_result)
    result['n_degenerate'] = estimate.n_degenerate
    result['if_final'] = float(track[-1])
    if len(errors) > 0:
        result['error_rms'] = float(np.sqrt(np.mean(np.abs(errors) ** 2)))
    if len(finite) == 0:
        return result

    result.update({
        'if_mean': float(np.mean(finite)),
        'if_std': float(np.std(finite)),
        'if_median': float(np.median(finite)),
        'if_min': float(np.min(finite)),
        'if_max': float(np.max(finite)),
    })
    return result

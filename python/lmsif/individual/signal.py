"""
Signal Variants

A signal arrives either as real samples only, which still need their
quadrature companion, or as complete complex samples.
"""

import numpy as np
from dataclasses import dataclass
from typing import Callable, Union

from lmsif.errors import InvalidInputError, LMSIFError, UpstreamFailureError
from lmsif.individual.hilbert import analytic_signal


@dataclass(frozen=True)
class RealSignal:
    """Real-only samples. Resolved through the analytic signal provider."""

    values: np.ndarray

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class ComplexSignal:
    """Complex samples, used as given."""

    values: np.ndarray

    def __len__(self) -> int:
        return len(self.values)


Signal = Union[RealSignal, ComplexSignal]


def from_parts(real, imag=None) -> Signal:
    """
    Build a signal variant from a real part and an optional imaginary part.

    Parameters
    ----------
    real : array_like
        Real parts, length N >= 1
    imag : array_like, optional
        Imaginary parts, length N. None selects RealSignal.

    Returns
    -------
    RealSignal or ComplexSignal
    """
    real = np.asarray(real, dtype=np.float64)
    if real.ndim != 1:
        raise InvalidInputError(f"Real part must be 1D, got shape {real.shape}")
    if imag is None:
        return RealSignal(real)

    imag = np.asarray(imag, dtype=np.float64)
    if imag.ndim != 1:
        raise InvalidInputError(f"Imaginary part must be 1D, got shape {imag.shape}")
    if len(imag) != len(real):
        raise InvalidInputError(
            f"Length mismatch: real has {len(real)} samples, imag has {len(imag)}"
        )
    return ComplexSignal(real + 1j * imag)


def to_complex(
    signal: Signal,
    provider: Callable[[np.ndarray], np.ndarray] = analytic_signal
) -> np.ndarray:
    """
    Resolve a signal variant to a complex128 array.

    The provider is called once, and only for RealSignal. Its output must
    hold exactly N samples.
    """
    if isinstance(signal, ComplexSignal):
        return np.asarray(signal.values, dtype=np.complex128)
    if not isinstance(signal, RealSignal):
        raise InvalidInputError(f"Unsupported signal type: {type(signal).__name__}")

    n = len(signal)
    try:
        z = np.asarray(provider(signal.values))
    except LMSIFError:
        raise
    except Exception as exc:
        raise UpstreamFailureError(f"Analytic signal provider failed: {exc}") from exc
    if z.shape != (n,):
        raise UpstreamFailureError(
            f"Analytic signal provider returned shape {z.shape}, expected ({n},)"
        )
    if not np.iscomplexobj(z):
        raise UpstreamFailureError(
            f"Analytic signal provider returned real dtype {z.dtype}, expected complex"
        )
    if not np.all(np.isfinite(z)):
        raise UpstreamFailureError("Analytic signal provider returned non-finite values")
    return z.astype(np.complex128)

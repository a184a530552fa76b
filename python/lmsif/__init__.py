"""
lmsif — adaptive LMS instantaneous-frequency estimation.

Tracks the dominant frequency of a signal sample by sample with a
one-coefficient complex LMS predictor, without a spectrogram.

Usage:
    from lmsif import estimate_if
    freq = estimate_if(x, mu=0.01)            # real input, analytic signal derived
    freq = estimate_if(re, mu=0.01, imag=im)  # complex input

    # Or import by category:
    from lmsif.individual.lms import lms_frequency, lms_trace
    from lmsif.individual.hilbert import analytic_signal
"""
__version__ = "0.1.0"

import logging
import os

logging.getLogger(__name__).addHandler(logging.NullHandler())

_LOG_LEVEL = os.environ.get("LMSIF_LOG_LEVEL")
if _LOG_LEVEL:
    logging.getLogger(__name__).setLevel(_LOG_LEVEL.upper())

from lmsif.errors import (  # noqa: E402
    LMSIFError,
    InvalidInputError,
    UpstreamFailureError,
)
from lmsif.individual.hilbert import analytic_signal  # noqa: E402
from lmsif.individual.lms import (  # noqa: E402
    LMSEstimate,
    lms_frequency,
    lms_trace,
    lms_if_summary,
)
from lmsif.individual.signal import RealSignal, ComplexSignal  # noqa: E402
from lmsif.estimate import estimate_if  # noqa: E402

# Subpackages
from lmsif import individual  # noqa: F401, E402

__all__ = [
    "estimate_if",
    "analytic_signal",
    "lms_frequency",
    "lms_trace",
    "lms_if_summary",
    "LMSEstimate",
    "RealSignal",
    "ComplexSignal",
    "LMSIFError",
    "InvalidInputError",
    "UpstreamFailureError",
    # Subpackages
    "individual",
]

"""
Unit tests for the estimate_if entry point.
"""
import numpy as np
import pytest

import lmsif
from lmsif import estimate_if
from lmsif.errors import InvalidInputError, LMSIFError, UpstreamFailureError
from lmsif.individual.lms import lms_frequency


def _tone(f, n):
    return np.exp(1j * 2 * np.pi * f * np.arange(n))


class TestEstimateIFBasic:
    """Basic contract tests."""

    def test_complex_parts(self):
        z = _tone(0.1, 200)
        result = estimate_if(z.real, mu=0.05, imag=z.imag)
        assert result.shape == (200,)
        assert np.array_equal(result, lms_frequency(z, mu=0.05))

    def test_real_only_uses_analytic_signal(self):
        x = np.cos(2 * np.pi * 0.1 * np.arange(1000))
        result = estimate_if(x, mu=0.05)
        assert abs(result[-1] - 0.1) < 1e-3

    def test_real_only_calls_provider(self):
        calls = []

        def provider(x):
            calls.append(len(x))
            return x + 0j

        estimate_if(np.ones(10), mu=0.01, provider=provider)
        assert calls == [10]

    def test_complex_input_skips_provider(self):
        def provider(x):
            raise AssertionError("provider must not be called")

        estimate_if(np.ones(10), mu=0.01, imag=np.zeros(10), provider=provider)

    def test_declared_length(self):
        result = estimate_if(np.ones(5), mu=0.01, imag=np.ones(5), n=5)
        assert result.shape == (5,)

    def test_caller_buffer_index_zero(self):
        out = np.full(50, np.nan)
        z = _tone(0.2, 50)
        estimate_if(z.real, mu=0.05, imag=z.imag, out=out)
        assert np.isnan(out[0])
        assert np.all(np.isfinite(out[1:]))

    def test_sampling_rate_scaling(self):
        z = _tone(0.2, 300)
        normalized = estimate_if(z.real, mu=0.05, imag=z.imag)
        hz = estimate_if(z.real, mu=0.05, imag=z.imag, fs=1000.0)
        assert np.allclose(hz[1:], normalized[1:] * 1000.0)
        assert hz[0] == normalized[0]

    def test_single_sample(self):
        result = estimate_if([1.0], mu=0.1)
        assert result.shape == (1,)
        assert result[0] == 0.0

    def test_top_level_exports(self):
        assert lmsif.estimate_if is estimate_if
        assert lmsif.__version__


class TestEstimateIFErrors:
    """Invalid input is rejected before any work."""

    def test_empty(self):
        with pytest.raises(InvalidInputError):
            estimate_if([], mu=0.1)

    def test_length_mismatch(self):
        with pytest.raises(InvalidInputError):
            estimate_if(np.ones(5), mu=0.1, imag=np.ones(4))

    def test_declared_length_mismatch(self):
        with pytest.raises(InvalidInputError):
            estimate_if(np.ones(5), mu=0.1, imag=np.ones(5), n=6)

    @pytest.mark.parametrize("mu", [np.nan, np.inf, None, "slow"])
    def test_bad_mu(self, mu):
        with pytest.raises(InvalidInputError):
            estimate_if(np.ones(5), mu=mu)

    @pytest.mark.parametrize("fs", [0.0, -1.0, np.inf, np.nan, "fast", [1.0]])
    def test_bad_sampling_rate(self, fs):
        with pytest.raises(InvalidInputError):
            estimate_if(np.ones(5), mu=0.1, fs=fs)

    def test_non_finite_samples(self):
        with pytest.raises(InvalidInputError):
            estimate_if(np.array([1.0, np.nan]), mu=0.1, imag=np.zeros(2))

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            estimate_if(np.ones(5), mu=0.1, imag=np.ones(4))

    def test_no_provider_call_on_invalid_input(self):
        calls = []

        def provider(x):
            calls.append(x)
            return x + 0j

        with pytest.raises(InvalidInputError):
            estimate_if(np.ones(5), mu=np.nan, provider=provider)
        assert calls == []

    def test_buffer_untouched_on_invalid_input(self):
        out = np.full(5, 9.0)
        with pytest.raises(InvalidInputError):
            estimate_if(np.ones(5), mu=np.inf, out=out)
        assert np.all(out == 9.0)

    @pytest.mark.parametrize("out", [np.zeros(7), np.zeros(8, dtype=int), [0.0] * 8])
    def test_bad_buffer_rejected_before_provider(self, out):
        calls = []

        def provider(x):
            calls.append(x)
            return x + 0j

        with pytest.raises(InvalidInputError):
            estimate_if(np.ones(8), mu=0.1, out=out, provider=provider)
        assert calls == []

    def test_upstream_failure(self):
        with pytest.raises(UpstreamFailureError):
            estimate_if(np.ones(8), mu=0.1, provider=lambda x: np.ones(3, dtype=complex))

    def test_errors_share_base(self):
        assert issubclass(InvalidInputError, LMSIFError)
        assert issubclass(UpstreamFailureError, LMSIFError)

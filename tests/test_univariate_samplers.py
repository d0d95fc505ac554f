from __future__ import annotations

import math

import numpy as np
import pytest

from pyRVGen.rv_gen_beta import Sampler_univariate_Beta
from pyRVGen.rv_gen_gamma import Sampler_univariate_Gamma


@pytest.mark.parametrize("shape, scale", [(0.0, 1.0), (-1.0, 1.0), (math.nan, 1.0), (1.0, 0.0)])
def test_gamma_invalid_parameters_raise(shape, scale):
    with pytest.raises(ValueError):
        Sampler_univariate_Gamma(shape, scale)


@pytest.mark.parametrize("a, b", [(0.0, 1.0), (1.0, -2.0), (math.nan, 1.0), (1.0, math.nan)])
def test_beta_invalid_parameters_raise(a, b):
    with pytest.raises(ValueError):
        Sampler_univariate_Beta(a, b)


def test_gamma_matches_numpy_generator():
    inst = Sampler_univariate_Gamma(2.5)
    got = inst.sampler_iter(5, np.random.default_rng(123))
    expected = np.random.default_rng(123).gamma(2.5, 1.0, size=5)
    np.testing.assert_allclose(got, expected, rtol=1e-12)


def test_beta_samples_lie_in_unit_interval():
    rng = np.random.default_rng(0)
    samples = Sampler_univariate_Beta(0.001, 0.002).sampler_iter(2000, rng)
    assert all(0.0 <= x <= 1.0 for x in samples)
    assert not any(math.isnan(x) for x in samples)


def test_gamma_mean():
    samples = Sampler_univariate_Gamma(2.0, 3.0).sampler_iter(20000, np.random.default_rng(1))
    assert abs(np.mean(samples) - 6.0) < 0.15


def test_samplers_share_base_and_name_the_bad_parameter():
    from pyRVGen.rv_gen_gamma import UnivariateBase

    assert isinstance(Sampler_univariate_Gamma(1.0), UnivariateBase)
    assert isinstance(Sampler_univariate_Beta(1.0, 1.0), UnivariateBase)
    with pytest.raises(ValueError, match="b should be >0"):
        Sampler_univariate_Beta(1.0, 0.0)
    with pytest.raises(ValueError, match="scale should be >0"):
        Sampler_univariate_Gamma(1.0, -1.0)


def test_beta_sampler_iter_draws_sequentially():
    got = Sampler_univariate_Beta(2.0, 5.0).sampler_iter(4, np.random.default_rng(9))
    rng_reference = np.random.default_rng(9)
    expected = [rng_reference.beta(2.0, 5.0) for _ in range(4)]
    np.testing.assert_allclose(got, expected, rtol=1e-12)

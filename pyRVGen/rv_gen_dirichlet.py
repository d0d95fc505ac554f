import logging
from enum import Enum
from math import isfinite
from operator import index

import numpy as np

from pyRVGen.rv_gen_gamma import Sampler_univariate_Gamma
from pyRVGen.rv_gen_beta import Sampler_univariate_Beta

logger = logging.getLogger(__name__)

# at or below this for every component, all gamma draws underflow to 0 too often
SMALL_ALPHA_THRESHOLD = 0.1


class Dirichlet_ErrorKind(Enum):
    ALPHA_TOO_SHORT = "alpha_too_short"
    ALPHA_TOO_SMALL = "alpha_too_small"
    SIZE_TOO_SMALL = "size_too_small"

    @property
    def message(self) -> str:
        if self is Dirichlet_ErrorKind.ALPHA_TOO_SMALL:
            return "alpha is not positive in Dirichlet distribution"
        return "less than 2 dimensions in Dirichlet distribution"


class Dirichlet_Error(ValueError):
    def __init__(self, kind: Dirichlet_ErrorKind):
        super().__init__(kind.message)
        self.kind = kind


class Dirichlet_Strategy(Enum):
    STICK_BREAKING = "stick_breaking"
    GAMMA_NORMALIZATION = "gamma_normalization"


class Dirichlet_Param:
    """Concentration vector alpha of a Dirichlet distribution.

    Validated once at construction and read-only afterwards:
    len(alpha) >= 2 and every element is finite and > 0.

    >>> Dirichlet_Param([1.0, 2.0, 3.0]).alpha
    (1.0, 2.0, 3.0)
    >>> Dirichlet_Param.with_size(0.5, 3) == Dirichlet_Param([0.5, 0.5, 0.5])
    True
    """
    __slots__ = ("_alpha",)

    def __init__(self, alpha):
        if isinstance(alpha, (str, bytes)):
            raise TypeError("alpha should be a sequence of numbers, not " + type(alpha).__name__)
        alpha = tuple(float(a) for a in alpha)
        if len(alpha) < 2:
            raise Dirichlet_Error(Dirichlet_ErrorKind.ALPHA_TOO_SHORT)
        for a in alpha:
            self._value_support_checker(a)
        object.__setattr__(self, "_alpha", alpha)
        logger.debug("Dirichlet parameter constructed: dim=%d", len(alpha))

    @classmethod
    def with_size(cls, alpha: float, size: int) -> "Dirichlet_Param":
        "alpha repeated `size` times"
        cls._value_support_checker(float(alpha))
        size = index(size)
        if size < 2:
            raise Dirichlet_Error(Dirichlet_ErrorKind.SIZE_TOO_SMALL)
        return cls([alpha] * size)

    @staticmethod
    def _value_support_checker(a):
        # nan fails every ordered comparison, so `a > 0` rejects it as well
        if not (a > 0 and isfinite(a)):
            raise Dirichlet_Error(Dirichlet_ErrorKind.ALPHA_TOO_SMALL)

    @property
    def alpha(self) -> tuple:
        return self._alpha

    def __setattr__(self, name, value):
        raise AttributeError("Dirichlet_Param is immutable")

    def __delattr__(self, name):
        raise AttributeError("Dirichlet_Param is immutable")

    def __len__(self):
        return len(self._alpha)

    def __eq__(self, other):
        if not isinstance(other, Dirichlet_Param):
            return NotImplemented
        return self._alpha == other._alpha

    def __hash__(self):
        return hash(self._alpha)

    def __reduce__(self):
        return (Dirichlet_Param, (list(self._alpha),))

    def __repr__(self):
        return "Dirichlet_Param(alpha=" + repr(list(self._alpha)) + ")"

    def to_dict(self) -> dict:
        return {"alpha": list(self._alpha)}

    @classmethod
    def from_dict(cls, d: dict) -> "Dirichlet_Param":
        return cls(d["alpha"])


def choose_strategy(alpha) -> Dirichlet_Strategy:
    if all(a <= SMALL_ALPHA_THRESHOLD for a in alpha):
        return Dirichlet_Strategy.STICK_BREAKING
    return Dirichlet_Strategy.GAMMA_NORMALIZATION


def reverse_exclusive_cumsum(alpha) -> list:
    "[a0, a1, a2, a3] -> [a1+a2+a3, a2+a3, a3]"
    n = len(alpha)
    cum_sum = [0.0 for _ in range(n-1)]
    acc = 0.0
    for i in range(n-2, -1, -1):
        acc += alpha[i+1]
        cum_sum[i] = acc
    return cum_sum


def _sampler_stick_breaking(alpha, rng: np.random.Generator) -> list:
    # marginal beta construction; each break uses the alpha mass not yet assigned
    n = len(alpha)
    alpha_sum_rl = reverse_exclusive_cumsum(alpha)
    sample = [0.0 for _ in range(n)]
    left_stick_length = 1.0
    for i in range(n-1):
        portion = Sampler_univariate_Beta(alpha[i], alpha_sum_rl[i]).sampler(rng)
        sample[i] = left_stick_length * portion
        left_stick_length = left_stick_length * (1 - portion)
    sample[n-1] = left_stick_length
    return sample


def _sampler_gamma_normalization(alpha, rng: np.random.Generator) -> list:
    gamma_samples = []
    sum_gamma_samples = 0.0
    for a in alpha:
        g = Sampler_univariate_Gamma(a, 1.0).sampler(rng)
        gamma_samples.append(g)
        sum_gamma_samples += g
    inv_sum = 1.0 / sum_gamma_samples
    return [g * inv_sum for g in gamma_samples]


def sample_dirichlet(param: Dirichlet_Param, rng: np.random.Generator) -> list:
    """Draw one point of the simplex from Dirichlet(param.alpha).

    Output is a fresh list of len(param) floats summing to 1 (up to rounding).
    When all alphas are <= SMALL_ALPHA_THRESHOLD the stick-breaking method is
    used, otherwise gamma variates normalized by their sum.
    """
    alpha = param.alpha
    if choose_strategy(alpha) is Dirichlet_Strategy.STICK_BREAKING:
        return _sampler_stick_breaking(alpha, rng)
    return _sampler_gamma_normalization(alpha, rng)


class Sampler_Dirichlet:
    def __init__(self, set_seed=None):
        if set_seed is not None:
            self.random_generator = np.random.default_rng(seed=set_seed)
        else:
            self.random_generator = np.random.default_rng()

    def sampler(self, param: Dirichlet_Param) -> list:
        return sample_dirichlet(param, self.random_generator)

    def sampler_iter(self, sample_size: int, param: Dirichlet_Param):
        logger.debug("drawing %d samples, dim=%d, strategy=%s",
                     sample_size, len(param), choose_strategy(param.alpha).value)
        samples = []
        for _ in range(sample_size):
            samples.append(self.sampler(param))
        return samples


if __name__ == "__main__":
    import matplotlib.pyplot as plt
    from scipy.stats import dirichlet as sp_dirichlet

    from pyRVGen.util_logging import setup_logging

    setup_logging(logging.DEBUG)
    dir_sampler_inst = Sampler_Dirichlet(20220406)
    print(dir_sampler_inst.sampler_iter(5, Dirichlet_Param([1, 2, 3, 4, 5])))
    print(dir_sampler_inst.sampler_iter(5, Dirichlet_Param.with_size(0.001, 5)))

    fig, ax = plt.subplots(1, 3, figsize=(12, 4))
    for axis, alpha in zip(ax, [[1, 2, 3], [0.5, 0.5, 0.5], [0.05, 0.05, 0.05]]):
        param = Dirichlet_Param(alpha)
        samples = np.array(dir_sampler_inst.sampler_iter(3000, param))
        print(alpha, "mean:", "sim:", samples.mean(axis=0), " true:", sp_dirichlet.mean(alpha))
        axis.scatter(samples[:, 0], samples[:, 1], s=2)
        axis.set_title(r"$\alpha$=" + str(alpha) + " (" + choose_strategy(alpha).value + ")")
    plt.show()

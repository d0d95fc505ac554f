import numpy as np

from pyRVGen.rv_gen_gamma import UnivariateBase


class Sampler_univariate_Beta(UnivariateBase):
    """beta(a, b) on [0, 1]

    numpy's generator switches to Johnk's algorithm (evaluated in log space)
    when both a and b are <= 1, so very small parameters do not produce 0/0.
    """
    def __init__(self, a_param, b_param):
        self._parameter_support_checker(a=a_param, b=b_param)
        self.a_param = a_param
        self.b_param = b_param

    def sampler(self, rng: np.random.Generator) -> float:
        return float(rng.beta(self.a_param, self.b_param))


if __name__ == "__main__":
    from statistics import mean
    rng = np.random.default_rng(20230419)
    for a, b in [(1, 1), (2, 5), (0.001, 0.002)]:
        samples = Sampler_univariate_Beta(a, b).sampler_iter(10000, rng)
        print("beta(", a, ",", b, ") mean:", "sim:", mean(samples), " true:", a/(a+b))

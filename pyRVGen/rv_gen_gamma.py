import numpy as np


class UnivariateBase:
    "single-variate sampler drawing from a caller-owned numpy Generator"
    def _parameter_support_checker(self, **params):
        # written as `not (x > 0)` so that nan is rejected too
        for name, value in params.items():
            if not value > 0:
                raise ValueError(name + " should be >0")

    def sampler(self, rng: np.random.Generator) -> float:
        raise NotImplementedError

    def sampler_iter(self, sample_size: int, rng: np.random.Generator):
        samples = []
        for _ in range(sample_size):
            samples.append(self.sampler(rng))
        return samples


class Sampler_univariate_Gamma(UnivariateBase):
    "gamma(shape, scale), mean = shape*scale"
    def __init__(self, alpha_shape, scale=1.0):
        self._parameter_support_checker(shape=alpha_shape, scale=scale)
        self.alpha_shape = alpha_shape
        self.scale = scale

    def sampler(self, rng: np.random.Generator) -> float:
        return float(rng.gamma(self.alpha_shape, self.scale))


if __name__ == "__main__":
    from statistics import mean, variance
    rng = np.random.default_rng(20220420)
    inst = Sampler_univariate_Gamma(2, 3)
    test_samples = inst.sampler_iter(10000, rng)
    print(mean(test_samples), 2*3, "\n", variance(test_samples), 2*3**2)

import numpy as np


class RandomNoiseSource:
    """Zero-mean Gaussian noise drawn from an owned numpy Generator.

    ``seed=None`` seeds from the OS, so runs are not reproducible.
    """

    def __init__(self, seed=None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def sample(self, stddev):
        if stddev < 0:
            raise ValueError(f"stddev must be >= 0, got {stddev}")
        if stddev == 0:
            return 0.0
        return float(self.rng.normal(0.0, stddev))


class TrueMotionModel:
    def __init__(self, velocity):
        self.velocity = velocity

    def position(self, t):
        return self.velocity * t


class MeasurementGenerator:
    # noisy position sensor: z(t) = v*t + N(0, stddev^2)
    def __init__(self, model, noise, sensor_noise_stddev):
        self.model = model
        self.noise = noise
        self.sensor_noise_stddev = sensor_noise_stddev

    def measure(self, t):
        if t < 0:
            raise ValueError(f"time must be >= 0, got {t}")
        return self.model.position(t) + self.noise.sample(self.sensor_noise_stddev)

import numpy as np
import pytest

from core.motion import MeasurementGenerator, RandomNoiseSource, TrueMotionModel


def test_zero_stddev_is_exactly_zero():
    noise = RandomNoiseSource(seed=1)
    assert noise.sample(0.0) == 0.0


def test_zero_stddev_does_not_consume_generator():
    a = RandomNoiseSource(seed=5)
    b = RandomNoiseSource(seed=5)
    a.sample(0.0)
    assert a.sample(1.0) == b.sample(1.0)


def test_seeded_sources_repeat():
    a = RandomNoiseSource(seed=123)
    b = RandomNoiseSource(seed=123)
    assert [a.sample(2.0) for _ in range(10)] == [b.sample(2.0) for _ in range(10)]


def test_negative_stddev_rejected():
    with pytest.raises(ValueError):
        RandomNoiseSource(seed=0).sample(-1.0)


def test_samples_are_zero_mean_with_requested_spread():
    noise = RandomNoiseSource(seed=2024)
    draws = np.array([noise.sample(2.0) for _ in range(20000)])
    assert abs(draws.mean()) < 0.1
    assert draws.std() == pytest.approx(2.0, abs=0.1)


def test_true_position_is_velocity_times_time():
    model = TrueMotionModel(velocity=2.0)
    assert model.position(0.0) == 0.0
    assert model.position(2.5) == pytest.approx(5.0)


def test_noiseless_measurement_equals_truth():
    model = TrueMotionModel(velocity=-1.5)
    sensor = MeasurementGenerator(model, RandomNoiseSource(seed=0), 0.0)
    assert sensor.measure(4.0) == pytest.approx(-6.0)


def test_noisy_measurement_adds_noise():
    model = TrueMotionModel(velocity=1.0)
    sensor = MeasurementGenerator(model, RandomNoiseSource(seed=9), 1.0)
    expected_noise = RandomNoiseSource(seed=9).sample(1.0)
    assert sensor.measure(3.0) == pytest.approx(3.0 + expected_noise)


def test_negative_time_rejected():
    sensor = MeasurementGenerator(TrueMotionModel(1.0), RandomNoiseSource(seed=0), 0.0)
    with pytest.raises(ValueError):
        sensor.measure(-0.1)

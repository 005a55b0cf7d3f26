"""
Time-stepping simulation of a constant-velocity object tracked by a 1D Kalman filter.

Each step:
- samples the true position at t = step * dt
- draws one noisy measurement of it
- runs the filter predict + update
- emits a StepRecord
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from core.kalman import KalmanFilter1D
from core.motion import MeasurementGenerator, RandomNoiseSource, TrueMotionModel
from utils.math_utils import rmse, step_count

DEFAULT_INITIAL_STATE = (0.0, 0.0)
DEFAULT_INITIAL_VARIANCE = 1000.0


class ValidationError(ValueError):
    """Invalid simulation configuration. ``field`` names the offending setting."""

    def __init__(self, field_name: str, message: str):
        super().__init__(f"{field_name}: {message}")
        self.field = field_name


def _as_float_array(field_name, value):
    try:
        return np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(field_name, f"must be numeric, got {value!r}") from e


@dataclass(frozen=True)
class SimulationConfig:
    total_time: float
    dt: float
    velocity: float
    sensor_noise_stddev: float
    process_noise_variance: float
    initial_state: Optional[Tuple[float, float]] = None
    initial_covariance: Optional[Sequence[Sequence[float]]] = None
    seed: Optional[int] = None

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Reject the configuration before anything runs."""
        for name in ("total_time", "dt", "velocity",
                     "sensor_noise_stddev", "process_noise_variance"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float, np.integer)):
                raise ValidationError(name, f"must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValidationError(name, f"must be finite, got {value}")

        if self.total_time <= 0:
            raise ValidationError("total_time", f"must be > 0, got {self.total_time}")
        if self.dt <= 0:
            raise ValidationError("dt", f"must be > 0, got {self.dt}")
        if self.dt > self.total_time:
            raise ValidationError(
                "dt", f"must not exceed total_time ({self.dt} > {self.total_time})")
        if self.sensor_noise_stddev < 0:
            raise ValidationError(
                "sensor_noise_stddev", f"must be >= 0, got {self.sensor_noise_stddev}")
        if self.process_noise_variance < 0:
            raise ValidationError(
                "process_noise_variance", f"must be >= 0, got {self.process_noise_variance}")

        if self.initial_state is not None:
            x0 = _as_float_array("initial_state", self.initial_state)
            if x0.shape != (2,):
                raise ValidationError(
                    "initial_state", f"must hold [position, velocity], got shape {x0.shape}")
            if not np.all(np.isfinite(x0)):
                raise ValidationError("initial_state", "must be finite")

        if self.initial_covariance is not None:
            P0 = _as_float_array("initial_covariance", self.initial_covariance)
            if P0.shape != (2, 2):
                raise ValidationError(
                    "initial_covariance", f"must be 2x2, got shape {P0.shape}")
            if not np.all(np.isfinite(P0)):
                raise ValidationError("initial_covariance", "must be finite")
            if not np.allclose(P0, P0.T):
                raise ValidationError("initial_covariance", "must be symmetric")
            if np.any(np.diag(P0) < 0):
                raise ValidationError("initial_covariance", "diagonal must be >= 0")
            if np.linalg.eigvalsh(P0).min() < -1e-9:
                raise ValidationError("initial_covariance", "must be positive semi-definite")

        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, (int, np.integer)):
                raise ValidationError("seed", f"must be an int or None, got {self.seed!r}")
            if self.seed < 0:
                raise ValidationError("seed", f"must be >= 0, got {self.seed}")

    @property
    def steps(self) -> int:
        return step_count(self.total_time, self.dt)

    @property
    def observation_variance(self) -> float:
        return self.sensor_noise_stddev ** 2

    def resolved_initial_state(self) -> np.ndarray:
        if self.initial_state is None:
            return np.array(DEFAULT_INITIAL_STATE, dtype=np.float64)
        return np.asarray(self.initial_state, dtype=np.float64)

    def resolved_initial_covariance(self) -> np.ndarray:
        if self.initial_covariance is None:
            return np.eye(2, dtype=np.float64) * DEFAULT_INITIAL_VARIANCE
        return np.asarray(self.initial_covariance, dtype=np.float64)


@dataclass(frozen=True)
class StepRecord:
    time: float
    true_position: float
    measurement: float
    estimated_position: float
    estimated_velocity: float


def build_filter(config: SimulationConfig) -> KalmanFilter1D:
    return KalmanFilter1D(dt=config.dt,
                          q=config.process_noise_variance,
                          r=config.observation_variance,
                          x0=config.resolved_initial_state(),
                          P0=config.resolved_initial_covariance())


def iter_steps(config: SimulationConfig) -> Iterator[StepRecord]:
    """Run the simulation lazily, yielding one StepRecord per step."""
    config.validate()

    noise = RandomNoiseSource(config.seed)
    model = TrueMotionModel(config.velocity)
    sensor = MeasurementGenerator(model, noise, config.sensor_noise_stddev)
    kf = build_filter(config)

    for i in range(config.steps):
        t = i * config.dt
        true_position = model.position(t)
        z = sensor.measure(t)

        kf.predict()
        kf.update(z)

        yield StepRecord(time=t,
                         true_position=true_position,
                         measurement=z,
                         estimated_position=kf.position,
                         estimated_velocity=kf.velocity)


def run(config: SimulationConfig) -> List[StepRecord]:
    """Run the whole simulation. Every call starts from a fresh filter and generator."""
    return list(iter_steps(config))


def summarize(records: Sequence[StepRecord], velocity: float) -> Dict[str, float]:
    truth = [r.true_position for r in records]
    summary = {
        'steps': len(records),
        'measurement_rmse': rmse([r.measurement for r in records], truth),
        'estimate_rmse': rmse([r.estimated_position for r in records], truth),
        'final_velocity_error': 0.0,
    }
    if records:
        summary['final_velocity_error'] = abs(records[-1].estimated_velocity - velocity)
    return summary

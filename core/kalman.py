import numpy as np

# --------- 1D constant-velocity Kalman filter (position, velocity) ----------
INITIALIZED = "initialized"
PREDICTED = "predicted"
UPDATED = "updated"


class KalmanFilter1D:
    """
    Linear Kalman filter over the state [position, velocity].

    Only position is observed. ``predict`` and ``update`` must alternate,
    starting with ``predict``.
    """

    def __init__(self, dt, q=0.0, r=1.0, x0=(0.0, 0.0), P0=None):
        if r < 0:
            raise ValueError(f"observation noise variance must be >= 0, got {r}")
        if q < 0:
            raise ValueError(f"process noise variance must be >= 0, got {q}")

        self.dt = dt
        self.x = np.array(x0, dtype=np.float64).reshape(2)
        if P0 is None:
            self.P = np.eye(2, dtype=np.float64) * 1000.0
        else:
            self.P = np.array(P0, dtype=np.float64).reshape(2, 2)

        self.F = np.array([[1.0, dt],
                           [0.0, 1.0]], dtype=np.float64)
        self.H = np.array([[1.0, 0.0]], dtype=np.float64)  # measure position only
        self.Q = q * np.array([[dt**4 / 4, dt**3 / 2],
                               [dt**3 / 2, dt**2]], dtype=np.float64)
        self.R = float(r)

        self.phase = INITIALIZED
        self.innovation = 0.0
        self.innovation_variance = 0.0
        self.gain = np.zeros(2, dtype=np.float64)

    def predict(self):
        """Time update. Returns the predicted position."""
        if self.phase == PREDICTED:
            raise RuntimeError("predict() called twice without update()")
        x = self.F @ self.x
        P = self.F @ self.P @ self.F.T + self.Q
        self.x, self.P = x, (P + P.T) / 2
        self.phase = PREDICTED
        return float(self.x[0])

    def update(self, z):
        """Measurement update with position ``z``. Returns the filtered position."""
        if self.phase != PREDICTED:
            raise RuntimeError("update() must follow predict()")
        self.phase = UPDATED

        y = float(z) - float((self.H @ self.x)[0])           # innovation
        S = float((self.H @ self.P @ self.H.T)[0, 0]) + self.R  # innovation covariance
        self.innovation = y
        self.innovation_variance = S

        if S <= 0.0:
            # prior is exact and so is the sensor: keep the prior
            self.gain = np.zeros(2, dtype=np.float64)
            return float(self.x[0])

        K = (self.P @ self.H.T)[:, 0] / S                    # Kalman gain
        I = np.eye(2, dtype=np.float64)
        x = self.x + K * y
        P = (I - np.outer(K, self.H[0])) @ self.P
        self.x, self.P = x, (P + P.T) / 2
        self.gain = K
        return float(self.x[0])

    def step(self, z):
        self.predict()
        return self.update(z)

    @property
    def position(self):
        return float(self.x[0])

    @property
    def velocity(self):
        return float(self.x[1])

    def get_state(self):
        """Copy of the current state estimate [position, velocity]."""
        return self.x.copy()

    def get_covariance(self):
        """Copy of the error covariance matrix."""
        return self.P.copy()

import math


def clamp(x, lo, hi):
    return max(lo, min(hi, x))


def step_count(total_time, dt):
    """Number of steps covering ``total_time``; ratios within rounding of an integer count as that integer."""
    ratio = total_time / dt
    nearest = round(ratio)
    if math.isclose(ratio, nearest, rel_tol=1e-9, abs_tol=1e-9):
        return max(1, int(nearest))
    return int(math.ceil(ratio))


def rmse(a, b):
    if len(a) != len(b):
        raise ValueError("sequences must have equal length")
    if not a:
        return 0.0
    return math.sqrt(sum((p - q) ** 2 for p, q in zip(a, b)) / len(a))

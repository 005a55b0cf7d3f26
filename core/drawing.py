import cv2
import numpy as np
from config import (
    CANVAS_SIZE,
    TRUE_COLOR,
    ESTIMATE_COLOR,
    MEASUREMENT_COLOR,
    BACKGROUND_COLOR,
    LINE_THICKNESS,
    MEASUREMENT_RADIUS,
    PROGRESS_EVERY,
)
from utils.math_utils import clamp

def to_pixel(t, position, scale, size=CANVAS_SIZE):
    """Map (time, position) to canvas pixels, origin bottom-left, clamped to the canvas."""
    px = int(round(clamp(t * scale, 0, size - 1)))
    py = int(round(clamp(size - position * scale, 0, size - 1)))
    return px, py

def draw_polyline(frame, points, color):
    if len(points) < 2:
        return
    pts = np.array(points, dtype=np.int32).reshape(-1, 1, 2)
    cv2.polylines(frame, [pts], False, color, LINE_THICKNESS, cv2.LINE_AA)

def render_frame(records, scale, size=CANVAS_SIZE):
    """Draw truth (line), estimate (line) and measurements (dots) for all given records."""
    frame = np.full((size, size, 3), BACKGROUND_COLOR, dtype=np.uint8)

    truth = [to_pixel(r.time, r.true_position, scale, size) for r in records]
    estimate = [to_pixel(r.time, r.estimated_position, scale, size) for r in records]
    draw_polyline(frame, truth, TRUE_COLOR)
    draw_polyline(frame, estimate, ESTIMATE_COLOR)

    for r in records:
        center = to_pixel(r.time, r.measurement, scale, size)
        cv2.circle(frame, center, MEASUREMENT_RADIUS, MEASUREMENT_COLOR, -1)
    return frame

def animate(records, total_time, size=CANVAS_SIZE):
    """Yield one frame per step, each showing the history up to that step."""
    scale = size / total_time
    n = len(records)
    for i in range(n):
        if i % PROGRESS_EVERY == PROGRESS_EVERY - 1:
            print(f"[Render] {i + 1}/{n} frames")
        yield render_frame(records[:i + 1], scale, size)

def write_video(records, total_time, path, fps, size=CANVAS_SIZE):
    out = cv2.VideoWriter(path, cv2.VideoWriter_fourcc(*'mp4v'), fps, (size, size))
    if not out.isOpened():
        raise IOError(f"Cannot open video writer for {path}")
    frames = 0
    try:
        for frame in animate(records, total_time, size):
            out.write(frame)
            frames += 1
    finally:
        out.release()
    return frames

import numpy as np
import pytest

import config
from core import drawing
from core.simulation import SimulationConfig, StepRecord, run


def make_records(n=20):
    return run(SimulationConfig(total_time=n * 0.5, dt=0.5, velocity=1.0,
                                sensor_noise_stddev=0.5, process_noise_variance=0.01,
                                seed=4))


def test_to_pixel_origin_is_bottom_left():
    assert drawing.to_pixel(0.0, 0.0, 50.0, 500) == (0, 499)
    assert drawing.to_pixel(5.0, 5.0, 50.0, 500) == (250, 250)


def test_to_pixel_clamps_to_canvas():
    assert drawing.to_pixel(20.0, -3.0, 50.0, 500) == (499, 499)
    assert drawing.to_pixel(-1.0, 100.0, 50.0, 500) == (0, 0)


def test_render_frame_draws_on_white_canvas():
    records = make_records()
    frame = drawing.render_frame(records, scale=500 / 10.0)
    assert frame.shape == (config.CANVAS_SIZE, config.CANVAS_SIZE, 3)
    assert frame.dtype == np.uint8
    assert (frame != 255).any()
    # far corner stays background
    assert tuple(frame[0, config.CANVAS_SIZE - 1]) == config.BACKGROUND_COLOR


def test_measurements_drawn_on_top():
    records = [StepRecord(2.0, 2.0, 3.0, 2.0, 1.0)]
    frame = drawing.render_frame(records, scale=50.0)
    px, py = drawing.to_pixel(2.0, 3.0, 50.0)
    assert tuple(frame[py, px]) == config.MEASUREMENT_COLOR


def test_animate_yields_one_frame_per_record(capsys):
    records = make_records(20)
    frames = list(drawing.animate(records, total_time=10.0))
    assert len(frames) == 20
    assert not np.array_equal(frames[0], frames[-1])
    out = capsys.readouterr().out
    assert "[Render] 10/20 frames" in out
    assert "[Render] 20/20 frames" in out


class FakeWriter:
    instances = []

    def __init__(self, path, fourcc, fps, size, opened=True):
        self.path = path
        self.fps = fps
        self.size = size
        self.frames = []
        self.released = False
        self.opened = opened
        FakeWriter.instances.append(self)

    def isOpened(self):
        return self.opened

    def write(self, frame):
        self.frames.append(frame)

    def release(self):
        self.released = True


def test_write_video_writes_every_frame(monkeypatch):
    FakeWriter.instances = []
    monkeypatch.setattr(drawing.cv2, "VideoWriter", FakeWriter)
    records = make_records(12)

    written = drawing.write_video(records, 6.0, "out.mp4", fps=10)

    writer = FakeWriter.instances[0]
    assert written == 12
    assert len(writer.frames) == 12
    assert writer.size == (config.CANVAS_SIZE, config.CANVAS_SIZE)
    assert writer.fps == 10
    assert writer.released


def test_write_video_fails_when_writer_cannot_open(monkeypatch):
    monkeypatch.setattr(drawing.cv2, "VideoWriter",
                        lambda *args: FakeWriter(*args, opened=False))
    with pytest.raises(IOError):
        drawing.write_video(make_records(2), 1.0, "out.mp4", fps=10)

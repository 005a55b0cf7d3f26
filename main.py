import numpy as np

import config
from core.simulation import SimulationConfig, ValidationError, run, summarize
from core.drawing import write_video

def build_config():
    """Build the SimulationConfig from the constants in config.py."""
    return SimulationConfig(
        total_time=config.TOTAL_TIME,
        dt=config.DT,
        velocity=config.VELOCITY,
        sensor_noise_stddev=config.SENSOR_NOISE_STDDEV,
        process_noise_variance=config.PROCESS_NOISE_VARIANCE,
        initial_state=config.INITIAL_STATE,
        initial_covariance=np.eye(2) * config.INITIAL_COVARIANCE,
        seed=config.SEED,
    )

def main():
    try:
        sim_config = build_config()
    except ValidationError as e:
        print(f"[Config] Invalid configuration: {e}")
        raise SystemExit(1)

    print(f"[Simulation] Simulating {sim_config.steps} steps "
          f"(dt={sim_config.dt}, seed={sim_config.seed})...")
    records = run(sim_config)

    stats = summarize(records, sim_config.velocity)
    print(f"[Simulation] Completed {stats['steps']} steps")
    print(f"[Simulation] Measurement RMSE: {stats['measurement_rmse']:.4f}")
    print(f"[Simulation] Estimate RMSE:    {stats['estimate_rmse']:.4f}")
    print(f"[Simulation] Final velocity estimate: {records[-1].estimated_velocity:.4f} "
          f"(true {sim_config.velocity}, error {stats['final_velocity_error']:.4f})")

    if config.RENDER_ANIMATION:
        print("[Render] Rendering frames...")
        frames = write_video(records, sim_config.total_time,
                             config.OUTPUT_VIDEO, config.VIDEO_FPS)
        print(f"[Render] Output saved to {config.OUTPUT_VIDEO} ({frames} frames)")

if __name__ == "__main__":
    main()

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tuning:
    """
    Gameplay constants.

    Ratios suffixed `_h` are multiples of viewport height (per second where
    they are speeds/accelerations); ratios suffixed `_pw` / `_ph` are multiples
    of player width / height. Plain pixel values stay fixed across window sizes.
    """

    # Layout
    ground_height_h: float = 0.06
    min_ground_height: float = 18.0
    player_size_h: float = 0.15
    player_x_w: float = 0.05

    # Physics (px/s and px/s², scaled by viewport height)
    gravity_h: float = 75.6
    jump_impulse_h: float = 8.55
    min_jump_impulse_h: float = 1.0
    terminal_velocity_h: float = 150.0
    ceiling_h: float = 0.02
    jump_safety_margin: float = 0.9
    position_precision: int = 2

    # Hitbox, as fractions of the player box
    hitbox_offset_x: float = 0.12
    hitbox_offset_y: float = 0.18
    hitbox_width_scale: float = 0.76
    hitbox_height_scale: float = 0.68

    # Difficulty
    level_difficulty_step: float = 0.15
    score_bucket: float = 500.0
    score_difficulty_step: float = 0.2

    # Generation
    level_base_distance: float = 800.0
    level_distance_per_level: float = 100.0
    endless_distance: float = 1_000_000.0
    spawn_offset_w: float = 0.6
    base_gap: float = 420.0
    gap_shrink: float = 60.0
    gap_jitter: float = 100.0
    min_gap: float = 40.0
    min_gap_pw: float = 1.6
    max_width_pw: float = 2.4
    base_height_ph: float = 1.05
    width_base_ratio: float = 0.6
    width_difficulty: float = 8.0
    width_jitter: float = 18.0
    tall_probability: float = 0.25
    tall_height_ph: float = 2.0
    tall_height_difficulty: float = 10.0
    max_obstacle_height_h: float = 0.6
    min_obstacle_size: float = 1.0

    # Scrolling / scoring
    level_scroll_speed: float = 250.0
    endless_scroll_speed: float = 300.0
    speed_step_score: float = 100.0
    speed_step: float = 5.0
    score_rate: float = 250.0
    cleanup_margin: float = 1000.0

    # Levels
    level_count: int = 50

    # Simulation
    fixed_dt: float = 1.0 / 120.0
    max_steps_per_frame: int = 5
    max_frame_dt: float = 0.1

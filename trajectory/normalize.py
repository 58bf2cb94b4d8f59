"""
Habit normalization: maps raw habit columns onto [0, 1] goodness scores.

Pure column transform. Takes a habits DataFrame, returns it with the
normalized columns appended.
"""

import numpy as np
import pandas as pd

from trajectory.config import TrajectoryConfig


NORMALIZED_COLUMNS = (
    "sleep_score",
    "study_score",
    "screen_score",
    "exercise_score",
    "stress_raw",
    "stress_score",
)


def compute_normalized_scores(df: pd.DataFrame, cfg: TrajectoryConfig) -> pd.DataFrame:
    """Append the five normalized scores plus raw stress in one pass."""
    n = cfg.normalization

    df["sleep_score"] = np.clip((df["sleep_hours"] - n.sleep_floor) / n.sleep_span, 0.0, 1.0)

    # Overachievement allowance: ceiling is study_ceiling, not 1.0
    df["study_score"] = np.clip(df["study_hours"] / n.study_full, 0.0, n.study_ceiling)

    df["screen_score"] = np.clip(1 - df["screen_time"] / n.screen_max, 0.0, 1.0)

    df["exercise_score"] = np.clip(df["exercise_days"] / n.exercise_full, 0.0, 1.0)

    # Left unclamped; the burnout formula consumes it directly
    df["stress_raw"] = (df["stress_level"] - n.stress_min) / n.stress_span
    df["stress_score"] = 1 - df["stress_raw"]

    return df

"""
Outcome scoring: combines normalized habits into the three present-day scores.

Each score is a weighted sum, rounded once after every additive term,
then clamped to its bounds. Requires the normalized columns from
trajectory.normalize.
"""

import numpy as np
import pandas as pd

from trajectory.config import TrajectoryConfig


OUTCOME_COLUMNS = (
    "academic_score",
    "burnout_risk",
    "health_score",
)


def round_half_up(values):
    """Round to nearest integer, .5 ties toward +inf (np.round is banker's)."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


def _finalize(raw: pd.Series, bounds) -> pd.Series:
    lo, hi = bounds
    # Opposing overflowed terms sum to NaN; map it to the floor before the int cast
    values = np.nan_to_num(raw.to_numpy(dtype=np.float64), nan=lo, posinf=hi, neginf=lo)
    return pd.Series(
        np.clip(round_half_up(values), lo, hi).astype(np.int64),
        index=raw.index,
    )


def compute_outcome_scores(df: pd.DataFrame, cfg: TrajectoryConfig) -> pd.DataFrame:
    """Compute academic, burnout and health scores in one pass."""
    aw = cfg.academic
    bw = cfg.burnout
    hw = cfg.health
    b = cfg.bounds

    # -- Academic -------------------------------------------------------------

    academic = (
        aw.base
        + df["study_score"] * aw.study
        + df["sleep_score"] * aw.sleep
        + df["screen_score"] * aw.screen
        + df["stress_score"] * aw.stress
    )
    academic = academic - np.where(
        df["sleep_hours"] < aw.low_sleep_hours, aw.low_sleep_penalty, 0.0
    )
    df["academic_raw"] = academic
    df["academic_score"] = _finalize(academic, b.academic)

    # -- Burnout (higher = worse) --------------------------------------------

    overwork = np.where(
        df["study_hours"] > bw.overwork_hours,
        (df["study_hours"] - bw.overwork_hours) / bw.overwork_step * bw.overwork_weight,
        0.0,
    )
    burnout = (
        bw.base
        + df["stress_raw"] * bw.stress
        + overwork
        + (1 - df["screen_score"]) * bw.screen
        - df["sleep_score"] * bw.sleep_relief
        - df["exercise_score"] * bw.exercise_relief
    )
    df["burnout_raw"] = burnout
    df["burnout_risk"] = _finalize(burnout, b.burnout)

    # -- Health ---------------------------------------------------------------

    health = (
        hw.base
        + df["sleep_score"] * hw.sleep
        + df["exercise_score"] * hw.exercise
        + df["stress_score"] * hw.stress
        + df["screen_score"] * hw.screen
    )
    df["health_raw"] = health
    df["health_score"] = _finalize(health, b.health)

    return df

"""
Pipeline orchestration: load -> normalize -> score -> rank -> project -> report.

This is the only module with I/O (file loading, report formatting).
All analytical logic is delegated to normalize, scoring, impact, projection.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Union

import numpy as np
import pandas as pd

from trajectory.config import HABIT_FIELDS, TrajectoryConfig
from trajectory.impact import compute_biggest_impact
from trajectory.models import HabitSnapshot, OutcomeMetrics
from trajectory.normalize import compute_normalized_scores
from trajectory.projection import project_trajectory
from trajectory.scoring import compute_outcome_scores


logger = logging.getLogger(__name__)

HabitInput = Union[HabitSnapshot, Mapping]


# ---------------------------------------------------------------------------
# Input boundary
# ---------------------------------------------------------------------------

def _coerce(item: HabitInput) -> HabitSnapshot:
    if isinstance(item, HabitSnapshot):
        return item
    if isinstance(item, Mapping):
        return HabitSnapshot.from_dict(item)
    raise ValueError(f"Expected a HabitSnapshot or mapping, got {type(item).__name__}")


def load_habits(filepath: Union[str, Path]) -> List[HabitSnapshot]:
    """Load one habit object or a list of them from a JSON file."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Habits file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    if isinstance(data, Mapping):
        data = [data]

    if not data:
        raise ValueError("Habits file is empty")

    return [_coerce(item) for item in data]


# ---------------------------------------------------------------------------
# Core evaluation (PURE FUNCTION — NO FILE I/O)
# ---------------------------------------------------------------------------

def _habits_frame(snapshots: List[HabitSnapshot]) -> pd.DataFrame:
    df = pd.DataFrame([s.to_dict() for s in snapshots], columns=list(HABIT_FIELDS))
    return df.astype(np.float64)


def _evaluate_df(
    df: pd.DataFrame,
    snapshots: List[HabitSnapshot],
    cfg: TrajectoryConfig,
) -> List[OutcomeMetrics]:
    """
    Core evaluation operating on a habits DataFrame, one row per snapshot.

    Stateless. Never raises on finite input.
    """

    # Stage 1: Normalize
    df = compute_normalized_scores(df, cfg)

    # Stage 2: Present-day scores
    df = compute_outcome_scores(df, cfg)

    # Stage 3: Impact rules (raw habits only)
    df = compute_biggest_impact(df, cfg)

    # Stage 4: Projection, seeded by the clamped present-day scores
    results: List[OutcomeMetrics] = []
    for i, habits in enumerate(snapshots):
        row = df.iloc[i]
        academic = int(row["academic_score"])
        burnout = int(row["burnout_risk"])
        health = int(row["health_score"])

        projection = project_trajectory(academic, burnout, health, habits, cfg)

        results.append(
            OutcomeMetrics(
                academic_score=academic,
                burnout_risk=burnout,
                health_score=health,
                projection=tuple(projection),
                biggest_impact=str(row["biggest_impact"]),
            )
        )

    logger.debug("Evaluated %d habit snapshot(s)", len(results))
    return results


# ---------------------------------------------------------------------------
# Public Entry Points
# ---------------------------------------------------------------------------

def evaluate(
    habits: HabitInput,
    cfg: TrajectoryConfig | None = None,
) -> OutcomeMetrics:
    """
    Evaluate a single habit snapshot.

    Recomputed in full on every call; identical input gives identical output.
    """
    if cfg is None:
        cfg = TrajectoryConfig()

    snapshot = _coerce(habits)
    return _evaluate_df(_habits_frame([snapshot]), [snapshot], cfg)[0]


def evaluate_many(
    records: Iterable[HabitInput],
    cfg: TrajectoryConfig | None = None,
) -> List[OutcomeMetrics]:
    """
    Batch entry point.

    Scores every snapshot in one vectorised DataFrame pass.
    """
    if cfg is None:
        cfg = TrajectoryConfig()

    snapshots = [_coerce(r) for r in records]
    if not snapshots:
        raise ValueError("Input data cannot be empty")

    return _evaluate_df(_habits_frame(snapshots), snapshots, cfg)


def projection_frame(metrics: OutcomeMetrics) -> pd.DataFrame:
    """Projection series as a DataFrame indexed by year, for charting."""
    df = pd.DataFrame(
        [(p.year, p.academic, p.burnout, p.health) for p in metrics.projection],
        columns=["year", "academic", "burnout", "health"],
    )
    return df.set_index("year")


# ---------------------------------------------------------------------------
# Report generation
# ---------------------------------------------------------------------------

def classify_risk(value: float, inverse: bool = False) -> str:
    """
    Dashboard banding.

    Normal scores: Critical below 40, Warning below 70.
    Inverse scores (burnout): Critical above 60, Warning above 40.
    """
    if inverse:
        if value > 60:
            return "Critical"
        if value > 40:
            return "Warning"
        return "Good"

    if value < 40:
        return "Critical"
    if value < 70:
        return "Warning"
    return "Good"


def generate_report(metrics: OutcomeMetrics) -> str:
    """Format the evaluation result as a human-readable text report."""
    lines = [
        "TRAJECTORY STATUS REPORT",
        "=" * 58,
        "",
        f"  Academic Score      : {metrics.academic_score:3d}  [{classify_risk(metrics.academic_score)}]",
        f"  Burnout Risk        : {metrics.burnout_risk:3d}  [{classify_risk(metrics.burnout_risk, inverse=True)}]",
        f"  Health Score        : {metrics.health_score:3d}  [{classify_risk(metrics.health_score)}]",
        f"  Biggest Impact      : {metrics.biggest_impact}",
        "",
        f"  {len(metrics.projection) - 1}-Year Projection:",
        f"    {'Year':6s} {'Academic':>9s} {'Burnout':>9s} {'Health':>9s}",
    ]

    for p in metrics.projection:
        lines.append(f"    {p.year:<6d} {p.academic:9d} {p.burnout:9d} {p.health:9d}")

    final = metrics.projection[-1]
    if classify_risk(final.burnout, inverse=True) == "Critical":
        lines.append("")
        lines.append("  ⚠  BURNOUT WARNING: Projected risk ends in the critical band")

    lines.append("")
    lines.append("=" * 58)
    return "\n".join(lines)

"""
Habit Trajectory Engine v1.0 — Deterministic Habit-to-Outcome Simulator

Maps a five-field habit snapshot (sleep, study, screen time, exercise,
stress) to present-day Academic, Burnout Risk and Health scores, names the
single highest-leverage habit change, and projects all three scores five
years forward. Also tracks gamified progression (XP, levels, attributes).

Architecture:
    config      — All ranges, weights, bounds and rules (single source of truth)
    models      — HabitSnapshot / OutcomeMetrics value types, boundary validation
    normalize   — Raw habits -> [0, 1] goodness scores
    scoring     — Weighted present-day outcome scores
    impact      — First-match rule table naming the biggest impact
    projection  — Yearly forward simulation
    progression — XP, levels, attribute growth
    pipeline    — Orchestration: load -> normalize -> score -> rank -> project -> report

Public API:
    evaluate(habits)          → single snapshot
    evaluate_many(records)    → vectorised batch
    generate_report(metrics)  → formatted report
    apply_activity(stats, …)  → progression update
"""

from trajectory.config import TrajectoryConfig
from trajectory.models import HabitSnapshot, OutcomeMetrics, ProjectionPoint
from trajectory.pipeline import (
    classify_risk,
    evaluate,
    evaluate_many,
    generate_report,
    load_habits,
    projection_frame,
)
from trajectory.progression import (
    UserStats,
    apply_activity,
    power_profile,
    unlocked_badges,
    xp_progress,
)

__version__ = "1.0.0"

__all__ = [
    "TrajectoryConfig",
    "HabitSnapshot",
    "OutcomeMetrics",
    "ProjectionPoint",
    "evaluate",
    "evaluate_many",
    "load_habits",
    "projection_frame",
    "classify_risk",
    "generate_report",
    "UserStats",
    "apply_activity",
    "power_profile",
    "xp_progress",
    "unlocked_badges",
]

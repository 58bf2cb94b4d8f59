"""
Trajectory projection: yearly forward simulation of the three scores.

The habit snapshot is held constant across the horizon. Working values
stay unrounded between years; only the emitted points are rounded.
"""

from datetime import date
from typing import List, Mapping, Union

from trajectory.config import ProjectionParams, TrajectoryConfig
from trajectory.models import HabitSnapshot, ProjectionPoint
from trajectory.scoring import round_half_up


def resolve_base_year(cfg: TrajectoryConfig) -> int:
    """Configured base year, or the current calendar year when unset."""
    if cfg.projection.base_year is not None:
        return int(cfg.projection.base_year)
    return date.today().year


def burnout_factor(burnout: float, p: ProjectionParams) -> float:
    if burnout > p.severe_burnout:
        return p.severe_factor
    if burnout > p.elevated_burnout:
        return p.elevated_factor
    return 1.0


def _clamp(value: float, p: ProjectionParams) -> float:
    return min(max(value, p.floor), p.ceiling)


def _emit(value: float) -> int:
    return int(round_half_up(value))


def project_trajectory(
    academic: float,
    burnout: float,
    health: float,
    habits: Union[HabitSnapshot, Mapping],
    cfg: TrajectoryConfig,
) -> List[ProjectionPoint]:
    """
    Emit one point per year for offsets 0..years, seeded by present-day scores.

    Per year, after emitting:
        academic grows by growth/factor when study and sleep are adequate,
            otherwise decays by decay*factor (factor from current burnout)
        burnout compounds under high stress or short sleep, else recovers
            with regular exercise, else holds
        health declines without exercise or sleep, otherwise improves
    All three are then clamped to [floor, ceiling].
    """
    p = cfg.projection
    if isinstance(habits, Mapping):
        habits = HabitSnapshot.from_dict(habits)

    base_year = resolve_base_year(cfg)

    study_ok = habits.study_hours > p.growth_study_hours and habits.sleep_hours > p.growth_sleep_hours
    compounding = habits.stress_level > p.compound_stress_level or habits.sleep_hours < p.compound_sleep_hours
    recovering = habits.exercise_days > p.recovery_exercise_days
    declining = habits.exercise_days < p.decline_exercise_days or habits.sleep_hours < p.decline_sleep_hours

    cur_academic = float(academic)
    cur_burnout = float(burnout)
    cur_health = float(health)

    points: List[ProjectionPoint] = []
    for offset in range(p.years + 1):
        points.append(
            ProjectionPoint(
                year=base_year + offset,
                academic=_emit(cur_academic),
                burnout=_emit(cur_burnout),
                health=_emit(cur_health),
            )
        )

        factor = burnout_factor(cur_burnout, p)

        if study_ok:
            cur_academic += p.academic_growth / factor
        else:
            cur_academic -= p.academic_decay * factor

        if compounding:
            cur_burnout += p.burnout_compound
        elif recovering:
            cur_burnout -= p.burnout_recovery

        if declining:
            cur_health -= p.health_decline
        else:
            cur_health += p.health_gain

        cur_academic = _clamp(cur_academic, p)
        cur_burnout = _clamp(cur_burnout, p)
        cur_health = _clamp(cur_health, p)

    return points

"""
Centralized configuration for all ranges, weights, bounds, and rules.

Every tunable constant lives here. Nothing in the scoring, impact or
projection modules hardcodes a number that a caller might want to change.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


# ---------------------------------------------------------------------------
# Habit normalization
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NormalizationParams:
    """Ideal ranges used to map raw habits onto [0, 1] goodness scores."""

    # Sleep: 4h -> 0, 10h -> 1
    sleep_floor: float = 4.0
    sleep_span: float = 6.0

    # Study: linear to 25h/week, allowed to overshoot up to 1.1
    study_full: float = 25.0
    study_ceiling: float = 1.1

    # Screen time: 0h -> 1, 10h -> 0
    screen_max: float = 10.0

    # Exercise: 5+ days/week saturates
    exercise_full: float = 5.0

    # Stress: 1 -> 0, 10 -> 1 (raw, not clamped)
    stress_min: float = 1.0
    stress_span: float = 9.0

    def __post_init__(self):
        for name in ("sleep_span", "study_full", "screen_max", "exercise_full", "stress_span"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")


# ---------------------------------------------------------------------------
# Outcome score weights
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AcademicWeights:
    """academic = base + study*w + sleep*w + screen*w + stress*w, minus penalty."""

    base: float = 30.0
    study: float = 40.0
    sleep: float = 20.0
    screen: float = 5.0
    stress: float = 5.0

    # Flat penalty for sleeping under the threshold
    low_sleep_hours: float = 5.0
    low_sleep_penalty: float = 10.0


@dataclass(frozen=True)
class BurnoutWeights:
    """Higher burnout is worse. Stress, overwork and screens add; sleep and exercise subtract."""

    base: float = 20.0
    stress: float = 40.0

    # Overwork: every `overwork_step` hours above threshold adds `overwork_weight`
    overwork_hours: float = 20.0
    overwork_step: float = 10.0
    overwork_weight: float = 15.0

    screen: float = 15.0
    sleep_relief: float = 20.0
    exercise_relief: float = 15.0


@dataclass(frozen=True)
class HealthWeights:
    """health = base + sleep*w + exercise*w + stress*w + screen*w."""

    base: float = 20.0
    sleep: float = 35.0
    exercise: float = 30.0
    stress: float = 10.0
    screen: float = 5.0


@dataclass(frozen=True)
class ScoreBounds:
    """Hard floor/ceiling for the present-day scores."""

    academic: Tuple[int, int] = (10, 100)
    burnout: Tuple[int, int] = (5, 98)
    health: Tuple[int, int] = (10, 100)

    def __post_init__(self):
        for name in ("academic", "burnout", "health"):
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ValueError(f"{name} bounds inverted: ({lo}, {hi})")


# ---------------------------------------------------------------------------
# Trajectory projection
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectionParams:
    """
    Feedback rules for the yearly forward simulation.

    base_year=None resolves to the current calendar year when the
    projection is computed.
    """

    base_year: Optional[int] = None
    years: int = 5

    # Burnout amplifies academic decline and dampens growth
    severe_burnout: float = 70.0
    severe_factor: float = 1.5
    elevated_burnout: float = 50.0
    elevated_factor: float = 1.1

    # Academic: grows when study > X and sleep > Y, else decays
    growth_study_hours: float = 5.0
    growth_sleep_hours: float = 6.0
    academic_growth: float = 2.0
    academic_decay: float = 3.0

    # Burnout: compounds under stress or short sleep, recovers with exercise
    compound_stress_level: float = 6.0
    compound_sleep_hours: float = 6.0
    burnout_compound: float = 2.0
    recovery_exercise_days: float = 3.0
    burnout_recovery: float = 1.0

    # Health: declines without exercise or sleep
    decline_exercise_days: float = 2.0
    decline_sleep_hours: float = 6.0
    health_decline: float = 2.0
    health_gain: float = 1.0

    # Working values are clamped to this range every year
    floor: float = 0.0
    ceiling: float = 100.0

    def __post_init__(self):
        if self.years < 0:
            raise ValueError(f"years must be non-negative, got {self.years}")
        if self.floor > self.ceiling:
            raise ValueError(f"projection bounds inverted: ({self.floor}, {self.ceiling})")


# ---------------------------------------------------------------------------
# Impact rules (declarative, first match wins)
# ---------------------------------------------------------------------------

HABIT_FIELDS = (
    "sleep_hours",
    "study_hours",
    "screen_time",
    "exercise_days",
    "stress_level",
)

COMPARISON_OPS = ("lt", "le", "gt", "ge")


@dataclass(frozen=True)
class ImpactCondition:
    """One comparison against a raw habit field, e.g. sleep_hours < 7."""

    field: str
    op: str
    threshold: float

    def __post_init__(self):
        if self.field not in HABIT_FIELDS:
            raise ValueError(f"Unknown habit field: {self.field!r}")
        if self.op not in COMPARISON_OPS:
            raise ValueError(f"Unknown comparison operator: {self.op!r}")


@dataclass(frozen=True)
class ImpactRule:
    """A labelled rule that matches when every condition holds. No conditions = always."""

    label: str
    conditions: Tuple[ImpactCondition, ...] = ()


DEFAULT_IMPACT_RULES: tuple = (
    ImpactRule(
        label="Increase Sleep",
        conditions=(ImpactCondition("sleep_hours", "lt", 7),),
    ),
    ImpactRule(
        label="More Exercise",
        conditions=(ImpactCondition("exercise_days", "lt", 3),),
    ),
    ImpactRule(
        label="Reduce Stress",
        conditions=(ImpactCondition("stress_level", "gt", 7),),
    ),
    ImpactRule(
        label="Reduce Screen Time",
        conditions=(ImpactCondition("screen_time", "gt", 4),),
    ),
    ImpactRule(
        label="Increase Study Time",
        conditions=(ImpactCondition("study_hours", "lt", 5),),
    ),
    ImpactRule(
        label="Balance Study/Rest",
        conditions=(
            ImpactCondition("study_hours", "gt", 25),
            ImpactCondition("sleep_hours", "lt", 6),
        ),
    ),
    ImpactRule(label="Maintain Habits"),
)


# ---------------------------------------------------------------------------
# Progression (XP, levels, attributes)
# ---------------------------------------------------------------------------

ACTIVITY_TYPES = ("study", "workout", "meditate")


@dataclass(frozen=True)
class StatGain:
    """Attribute increments applied when one activity is completed."""

    intelligence: int = 0
    vitality: int = 0
    strength: int = 0
    discipline: int = 0
    peace: int = 0
    stress_relief: int = 0


def _default_xp() -> Dict[str, int]:
    return {"study": 50, "workout": 60, "meditate": 40}


def _default_gains() -> Dict[str, StatGain]:
    return {
        "study": StatGain(intelligence=5, discipline=2),
        "workout": StatGain(strength=5, vitality=3),
        "meditate": StatGain(peace=5, stress_relief=2),
    }


@dataclass(frozen=True)
class ProgressionParams:
    """XP per activity, level curve, and attribute caps."""

    xp_per_activity: Dict[str, int] = field(default_factory=_default_xp)
    stat_gains: Dict[str, StatGain] = field(default_factory=_default_gains)

    # XP needed to leave level N is N * xp_per_level
    xp_per_level: int = 100

    stat_cap: int = 100
    stress_floor: int = 0
    initial_stress: int = 10

    # Badge unlock thresholds
    scholar_sessions: int = 5
    athlete_workouts: int = 5
    zen_stress: int = 0
    pro_level: int = 5

    def __post_init__(self):
        if self.xp_per_level <= 0:
            raise ValueError(f"xp_per_level must be positive, got {self.xp_per_level}")
        missing = set(ACTIVITY_TYPES) - set(self.xp_per_activity)
        if missing:
            raise ValueError(f"Missing XP for activities: {sorted(missing)}")


# ---------------------------------------------------------------------------
# Top-level config aggregate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TrajectoryConfig:
    """Complete engine configuration. Pass to any public function to override defaults."""

    normalization: NormalizationParams = field(default_factory=NormalizationParams)
    academic: AcademicWeights = field(default_factory=AcademicWeights)
    burnout: BurnoutWeights = field(default_factory=BurnoutWeights)
    health: HealthWeights = field(default_factory=HealthWeights)
    bounds: ScoreBounds = field(default_factory=ScoreBounds)
    projection: ProjectionParams = field(default_factory=ProjectionParams)
    progression: ProgressionParams = field(default_factory=ProgressionParams)
    impact_rules: tuple = DEFAULT_IMPACT_RULES

"""
Gamified progression: XP, levels, and attribute growth from completed activities.

apply_activity never mutates its input; it returns the updated stats and
the activity log entry to persist.
"""

import logging
import time
import uuid
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from trajectory.config import ACTIVITY_TYPES, TrajectoryConfig


logger = logging.getLogger(__name__)

ATTRIBUTES = ("intelligence", "vitality", "strength", "discipline", "peace")

_SESSION_COUNTERS = {
    "study": "total_study_sessions",
    "workout": "total_workouts",
    "meditate": "total_meditations",
}


@dataclass(frozen=True)
class UserStats:
    level: int = 1
    xp: int = 0
    intelligence: int = 0
    vitality: int = 0
    strength: int = 0
    discipline: int = 0
    peace: int = 0
    total_study_sessions: int = 0
    total_workouts: int = 0
    total_meditations: int = 0
    current_stress: int = 10

    @classmethod
    def initial(cls, cfg: Optional[TrajectoryConfig] = None) -> "UserStats":
        """Fresh profile: level 1, no XP, stress starts high."""
        if cfg is None:
            cfg = TrajectoryConfig()
        return cls(current_stress=cfg.progression.initial_stress)


@dataclass(frozen=True)
class ActivityLog:
    id: str
    type: str
    description: str
    timestamp: int  # epoch milliseconds
    xp_earned: int


@dataclass(frozen=True)
class ActivityResult:
    stats: UserStats
    log: ActivityLog
    leveled_up: bool


def xp_to_next_level(level: int, cfg: TrajectoryConfig) -> int:
    return level * cfg.progression.xp_per_level


def apply_activity(
    stats: UserStats,
    activity_type: str,
    description: str,
    cfg: Optional[TrajectoryConfig] = None,
    timestamp: Optional[int] = None,
) -> ActivityResult:
    """Credit one completed study/workout/meditate session."""
    if cfg is None:
        cfg = TrajectoryConfig()
    if activity_type not in ACTIVITY_TYPES:
        raise ValueError(
            f"Unknown activity type {activity_type!r}, expected one of {ACTIVITY_TYPES}"
        )

    pp = cfg.progression
    gain = pp.xp_per_activity[activity_type]

    # -- XP and level ---------------------------------------------------------

    # At most one level per activity, even if stored xp already exceeds the threshold
    level = stats.level
    xp = stats.xp + gain
    threshold = xp_to_next_level(level, cfg)
    leveled_up = xp >= threshold
    if leveled_up:
        xp -= threshold
        level += 1
        logger.info("Level up: %d -> %d", stats.level, level)

    # -- Attributes -----------------------------------------------------------

    updates: Dict[str, int] = {"level": level, "xp": xp}

    sg = pp.stat_gains.get(activity_type)
    if sg is not None:
        for attr in ATTRIBUTES:
            delta = getattr(sg, attr)
            if delta:
                updates[attr] = min(pp.stat_cap, getattr(stats, attr) + delta)
        if sg.stress_relief:
            updates["current_stress"] = max(
                pp.stress_floor, stats.current_stress - sg.stress_relief
            )

    counter = _SESSION_COUNTERS[activity_type]
    updates[counter] = getattr(stats, counter) + 1

    log = ActivityLog(
        id=str(uuid.uuid4()),
        type=activity_type,
        description=description,
        timestamp=int(time.time() * 1000) if timestamp is None else int(timestamp),
        xp_earned=gain,
    )
    logger.debug("Activity %s credited %d XP", activity_type, gain)

    return ActivityResult(
        stats=replace(stats, **updates),
        log=log,
        leveled_up=leveled_up,
    )


def power_profile(stats: UserStats) -> Dict[str, int]:
    """Five attributes keyed by display name, for the radar chart."""
    return {attr.title(): getattr(stats, attr) for attr in ATTRIBUTES}


def xp_progress(stats: UserStats, cfg: Optional[TrajectoryConfig] = None) -> float:
    """Percent of the way to the next level, capped at 100."""
    if cfg is None:
        cfg = TrajectoryConfig()
    return min(100.0, stats.xp / xp_to_next_level(stats.level, cfg) * 100)


def unlocked_badges(stats: UserStats, cfg: Optional[TrajectoryConfig] = None) -> List[str]:
    """
    Badge names earned so far, in display order.

    New Beginnings      — any completed activity
    Jack of All Trades  — at least one of each activity
    Scholar / Athlete   — study sessions / workouts reach their threshold
    Zen Master          — stress at the zen level after meditating
    Pro User            — level reaches pro_level
    """
    if cfg is None:
        cfg = TrajectoryConfig()
    pp = cfg.progression

    studied = stats.total_study_sessions
    trained = stats.total_workouts
    meditated = stats.total_meditations

    checks = (
        ("New Beginnings", studied + trained + meditated > 0),
        ("Jack of All Trades", studied > 0 and trained > 0 and meditated > 0),
        ("Scholar", studied >= pp.scholar_sessions),
        ("Athlete", trained >= pp.athlete_workouts),
        ("Zen Master", stats.current_stress == pp.zen_stress and meditated > 0),
        ("Pro User", stats.level >= pp.pro_level),
    )
    return [name for name, unlocked in checks if unlocked]

"""
Value types crossing the engine boundary.

HabitSnapshot is the only place inputs are validated: once a snapshot
exists, every field is a finite float and the core can run without checks.
"""

import json
import math
from dataclasses import asdict, dataclass, fields
from numbers import Real
from typing import Dict, Mapping, Tuple

from trajectory.config import HABIT_FIELDS


# UI payloads arrive in camelCase
_CAMEL_ALIASES = {
    "sleepHours": "sleep_hours",
    "studyHours": "study_hours",
    "screenTime": "screen_time",
    "exerciseDays": "exercise_days",
    "stressLevel": "stress_level",
}


@dataclass(frozen=True)
class HabitSnapshot:
    """Five-field habit input. Ranges are advisory, not enforced."""

    sleep_hours: float
    study_hours: float
    screen_time: float
    exercise_days: float
    stress_level: float

    def __post_init__(self):
        for name in HABIT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"{name} must be a number, got {value!r}")
            value = float(value)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
            object.__setattr__(self, name, value)

    @classmethod
    def from_dict(cls, data: Mapping) -> "HabitSnapshot":
        """Build from snake_case or camelCase keys. Unknown keys are ignored."""
        values = {}
        for key, value in data.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name in HABIT_FIELDS:
                values[name] = value

        missing = set(HABIT_FIELDS) - set(values)
        if missing:
            raise ValueError(f"Missing required habit fields: {sorted(missing)}")

        return cls(**values)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectionPoint:
    year: int
    academic: int
    burnout: int
    health: int


@dataclass(frozen=True)
class OutcomeMetrics:
    """Present-day scores, the yearly projection, and the top habit to change."""

    academic_score: int
    burnout_risk: int
    health_score: int
    projection: Tuple[ProjectionPoint, ...]
    biggest_impact: str

    def to_dict(self) -> Dict:
        return {
            "academic_score": self.academic_score,
            "burnout_risk": self.burnout_risk,
            "health_score": self.health_score,
            "projection": [asdict(p) for p in self.projection],
            "biggest_impact": self.biggest_impact,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "OutcomeMetrics":
        expected = {f.name for f in fields(cls)}
        missing = expected - set(data)
        if missing:
            raise ValueError(f"Missing metrics fields: {sorted(missing)}")

        return cls(
            academic_score=int(data["academic_score"]),
            burnout_risk=int(data["burnout_risk"]),
            health_score=int(data["health_score"]),
            projection=tuple(
                ProjectionPoint(
                    year=int(p["year"]),
                    academic=int(p["academic"]),
                    burnout=int(p["burnout"]),
                    health=int(p["health"]),
                )
                for p in data["projection"]
            ),
            biggest_impact=str(data["biggest_impact"]),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "OutcomeMetrics":
        return cls.from_dict(json.loads(text))

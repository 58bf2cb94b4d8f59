"""
Impact ranking: names the single habit change with the most leverage.

Rules come from cfg.impact_rules and are evaluated in order. The first
rule whose conditions all hold wins, regardless of how severe a later
rule's deficiency is. Order is part of the contract.
"""

import operator
from typing import Mapping, Union

import numpy as np
import pandas as pd

from trajectory.config import TrajectoryConfig
from trajectory.models import HabitSnapshot


FALLBACK_LABEL = "Maintain Habits"

_OPS = {
    "lt": operator.lt,
    "le": operator.le,
    "gt": operator.gt,
    "ge": operator.ge,
}


def _field(habits, name: str) -> float:
    if isinstance(habits, Mapping):
        return habits[name]
    return getattr(habits, name)


def rank_impact(
    habits: Union[HabitSnapshot, Mapping],
    cfg: TrajectoryConfig,
) -> str:
    """Return the label of the first matching rule for a single snapshot."""
    for rule in cfg.impact_rules:
        if all(
            _OPS[c.op](_field(habits, c.field), c.threshold)
            for c in rule.conditions
        ):
            return rule.label

    return FALLBACK_LABEL


def compute_biggest_impact(df: pd.DataFrame, cfg: TrajectoryConfig) -> pd.DataFrame:
    """
    Vectorised rule scan over every row.

    np.select returns the choice of the first true condition per row,
    which is exactly first-match-wins.
    """
    masks = []
    labels = []

    for rule in cfg.impact_rules:
        mask = np.ones(len(df), dtype=bool)
        for c in rule.conditions:
            mask &= _OPS[c.op](df[c.field], c.threshold).to_numpy(dtype=bool)
        masks.append(mask)
        labels.append(rule.label)

    if masks:
        df["biggest_impact"] = np.select(masks, labels, default=FALLBACK_LABEL)
    else:
        df["biggest_impact"] = FALLBACK_LABEL

    return df

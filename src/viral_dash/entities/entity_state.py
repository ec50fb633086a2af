"""
entity_state.py
---------------
Defines runtime state enumerations for all entity types.
Contains only states that change over time during gameplay.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks the life/death progression of an entity.
    Rivals go straight to DEAD when lasered; there is no way back.
    """
    ALIVE = 0
    DEAD = 1


class HazardPhase(IntEnum):
    """
    Rival hazard attack cycle.

      IDLE    -> cooldown counting down, nothing on the ground
      WARNING -> target marked, no damage yet
      ACTIVE  -> circle damages the player on overlap
    """
    IDLE = 0
    WARNING = 1
    ACTIVE = 2


HAZARD_TRANSITIONS = {
    HazardPhase.IDLE: frozenset({HazardPhase.WARNING}),
    HazardPhase.WARNING: frozenset({HazardPhase.ACTIVE, HazardPhase.IDLE}),
    HazardPhase.ACTIVE: frozenset({HazardPhase.IDLE}),
}


def check_hazard_transition(current: HazardPhase, target: HazardPhase) -> None:
    """Raise ValueError if the hazard cycle cannot move from current to target."""
    if target not in HAZARD_TRANSITIONS[current]:
        raise ValueError(f"Illegal hazard transition {current.name} -> {target.name}")

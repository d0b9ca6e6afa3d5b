from __future__ import annotations

from enum import Enum


class CoachClassification(str, Enum):
    """Role of a coach at a single training (stored in coach_attendance)."""

    MANDATORY = "mandatory"
    ADDITIONAL = "additional"


class AuthEvent(str, Enum):
    """Auth state transitions delivered to session listeners."""

    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"

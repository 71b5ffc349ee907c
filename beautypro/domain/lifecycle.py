from __future__ import annotations

from dataclasses import dataclass

from beautypro.domain.entities.appointment import AppointmentStatus


S = AppointmentStatus

TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    S.SCHEDULED: frozenset({S.CONFIRMED, S.ARRIVED, S.COMPLETED, S.NO_SHOW, S.CANCELLED}),
    S.CONFIRMED: frozenset({S.SCHEDULED, S.ARRIVED, S.COMPLETED, S.NO_SHOW, S.CANCELLED}),
    S.ARRIVED: frozenset({S.COMPLETED, S.NO_SHOW, S.CANCELLED}),
    S.COMPLETED: frozenset(),
    S.NO_SHOW: frozenset(),
    S.CANCELLED: frozenset(),
}

TERMINAL_STATUSES = frozenset(status for status, targets in TRANSITIONS.items() if not targets)

# Order used by the agenda's one-click toggle. Under the strict policy the
# fallback to SCHEDULED is rejected for ARRIVED, which is finished explicitly.
_CYCLE = {
    S.SCHEDULED: S.CONFIRMED,
    S.CONFIRMED: S.COMPLETED,
}


@dataclass(frozen=True)
class TransitionPolicy:
    """
    Decides whether an appointment may move from one status to another.

    The permissive policy (default) accepts every move, including
    leaving COMPLETED. The strict policy only accepts moves listed in
    TRANSITIONS. Re-applying the current status is always accepted.
    """

    strict: bool = False

    def allows(self, current: AppointmentStatus, target: AppointmentStatus) -> bool:
        if not self.strict or current == target:
            return True
        return target in TRANSITIONS[current]


def next_in_cycle(current: AppointmentStatus) -> AppointmentStatus:
    return _CYCLE.get(current, S.SCHEDULED)


def is_terminal(status: AppointmentStatus) -> bool:
    return status in TERMINAL_STATUSES

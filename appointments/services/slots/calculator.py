"""
Slot grid for one day.

Candidates start at open, open + cadence, ... while the whole occupied
interval [m, m + total_slot_time) fits before close.

A candidate is blocked when it overlaps:
✓ the merged break
✓ any blocked range (existing bookings + buffers)
✓ the "now" cutoff (same-day requests only)

Blocked candidates are still emitted (available=False) so callers can
render a complete grid.
"""

from .records import GridSlot, MinuteRange


def generate_slots(
    open_minutes: int,
    close_minutes: int,
    break_interval: MinuteRange | None,
    blocked_ranges: list[MinuteRange],
    cadence: int,
    total_slot_time: int,
    now_cutoff_minutes: int | None = None,
) -> list[GridSlot]:
    """
    Returns:
        Slots in ascending start order. Empty when the service does not
        fit the window.
    """
    if cadence <= 0:
        raise ValueError(f"cadence must be positive, got {cadence}")

    slots: list[GridSlot] = []
    m = open_minutes

    while m + total_slot_time <= close_minutes:
        slot_end = m + total_slot_time
        slots.append(GridSlot(
            start=m,
            end=slot_end,
            available=not _is_blocked(
                m, slot_end, break_interval, blocked_ranges, now_cutoff_minutes
            ),
        ))
        m += cadence

    return slots


def _is_blocked(
    start: int,
    end: int,
    break_interval: MinuteRange | None,
    blocked_ranges: list[MinuteRange],
    now_cutoff_minutes: int | None,
) -> bool:
    if break_interval is not None and break_interval.overlaps(start, end):
        return True

    if any(r.overlaps(start, end) for r in blocked_ranges):
        return True

    if now_cutoff_minutes is not None and start < now_cutoff_minutes:
        return True

    return False

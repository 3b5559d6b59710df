# File: agenda_layout/processors/columns.py
"""
Column assignment module.
Greedy interval-graph coloring of one conflict cluster.
"""

from typing import Iterable, List, Tuple

from agenda_layout.models import Event, PositionedEvent


def assign_columns(cluster: List[Event]) -> List[PositionedEvent]:
    """
    Assign each event of a cluster to the first free column.

    Events are taken in cluster order (start ascending, longer first). A
    column is free when the event it last received has ended by the time
    the current event starts. When no column is free a new one is opened.
    Every event gets the cluster-wide column count.

    Taken in start order, first-fit never opens more columns than the
    largest number of events active at the same instant.

    Args:
        cluster: Events of one conflict cluster, sorted like sort_events()

    Returns:
        PositionedEvent records in cluster order
    """
    if not cluster:
        return []

    column_ends = []
    assignments: List[Tuple[Event, int]] = []

    for event in cluster:
        assigned = None
        for index, column_end in enumerate(column_ends):
            if column_end <= event.start:
                assigned = index
                column_ends[index] = event.end
                break

        if assigned is None:
            assigned = len(column_ends)
            column_ends.append(event.end)

        assignments.append((event, assigned))

    total_columns = len(column_ends)
    return [
        PositionedEvent(event=event, column=column, total_columns=total_columns)
        for event, column in assignments
    ]


def max_simultaneous(events: Iterable[Event]) -> int:
    """
    Largest number of events active at any single instant.

    Ends are processed before starts at equal instants, so back-to-back
    events do not count as simultaneous.
    """
    points = []
    for event in events:
        points.append((event.start, 1))
        points.append((event.end, -1))
    points.sort(key=lambda p: (p[0], p[1]))

    current = peak = 0
    for _, delta in points:
        current += delta
        peak = max(peak, current)
    return peak

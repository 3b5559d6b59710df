# File: agenda_layout/processors/clustering.py
"""
Conflict clustering module.
Partitions a day's events into maximal groups of transitively overlapping events.
"""

from typing import Iterable, List

from agenda_layout.models import Event
from agenda_layout.utils.logger import setup_logger

logger = setup_logger(__name__)


def sort_events(events: Iterable[Event]) -> List[Event]:
    """
    Order events by start ascending, then by end descending.

    The longest event of a group sharing a start time comes first, so it
    anchors column 0. The sort is stable: events with identical start and
    end keep their input order.
    """
    # Two stable passes instead of a negated key: datetimes cannot be negated
    by_end = sorted(events, key=lambda e: e.end, reverse=True)
    return sorted(by_end, key=lambda e: e.start)


def build_conflict_clusters(events: Iterable[Event]) -> List[List[Event]]:
    """
    Group events into conflict clusters with a single sweep.

    Two events share a cluster when a chain of pairwise overlaps connects
    them. An event starting at or after the running maximum end of the
    current cluster opens a new one (half-open intervals: back-to-back
    events are never in the same cluster).

    Args:
        events: Events of one day, in any order

    Returns:
        Clusters in chronological order, each sorted like sort_events()

    Example:
        >>> clusters = build_conflict_clusters([a_9_to_10, b_930_to_11, c_11_to_12])
        >>> [len(c) for c in clusters]
        [2, 1]
    """
    clusters: List[List[Event]] = []
    current: List[Event] = []
    cluster_end = None

    for event in sort_events(events):
        if cluster_end is not None and event.start >= cluster_end:
            clusters.append(current)
            current = [event]
            cluster_end = event.end
        else:
            current.append(event)
            cluster_end = event.end if cluster_end is None else max(cluster_end, event.end)

    if current:
        clusters.append(current)

    logger.debug(f"Built {len(clusters)} conflict clusters")
    return clusters

"""Duplicate resolution for children generated by graph search."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from informed_search.core.data_models import Node
from .frontier import QueueSet
from .statistics import SearchStatistics

logger = logging.getLogger(__name__)


class ChildFate(Enum):
    """What happened to a child offered to the frontier."""
    ACCEPTED = "accepted"
    REPLACED = "replaced"
    DISCARDED = "discarded"


@dataclass(frozen=True)
class ChildOutcome:
    """Result of ``handle_child``.

    ``node`` is the child when it is now on the frontier and None when it
    was thrown away; ``replaced`` is the frontier node it displaced.
    """
    fate: ChildFate
    node: Optional[Node] = None
    replaced: Optional[Node] = None

    @property
    def added(self) -> bool:
        return self.node is not None


def handle_child(frontier: QueueSet,
                 child: Node,
                 statistics: Optional[SearchStatistics] = None) -> ChildOutcome:
    """Decide the fate of a freshly generated child.

    A child whose state is not on the frontier is pushed. If the state is
    already there, the child replaces the existing entry only when its path
    cost is strictly lower; otherwise the child is discarded.
    """
    location = frontier.find(child.state)

    if location is None:
        frontier.push(child)
        logger.debug(f"frontier <= {child.state!r}")
        if statistics is not None:
            statistics.pushed += 1
        return ChildOutcome(ChildFate.ACCEPTED, node=child)

    duplicate = frontier.get(location)
    if child.path_cost < duplicate.path_cost:
        logger.debug(f"{child.state!r}: replace {duplicate.path_cost} with {child.path_cost}")
        frontier.decrease_key(location, child)
        if statistics is not None:
            statistics.decreased += 1
        return ChildOutcome(ChildFate.REPLACED, node=child, replaced=duplicate)

    logger.debug(f"{child.state!r}: keep {duplicate.path_cost} and throw away {child.path_cost}")
    if statistics is not None:
        statistics.discarded += 1
    return ChildOutcome(ChildFate.DISCARDED)

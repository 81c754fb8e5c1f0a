import logging
from collections.abc import Mapping

from bench_king.domain.slots import PrioritizedSlots, SlotCount, SlotType
from bench_king.exceptions import EmptyConfigurationError

logger = logging.getLogger(__name__)


def _restrictiveness(slot: SlotType) -> tuple[int, int]:
    # Shorter display names are the narrower positions (QB, TE, K before
    # RB/WR/TE or OP). Slot id keeps the order total.
    return (len(slot.name), slot.id)


def prioritize(config: Mapping[SlotType, int]) -> PrioritizedSlots:
    """Order a league's starting slots most restrictive first.

    Bench and IR slots, and slots with a non-positive count, are dropped.
    Raises EmptyConfigurationError if nothing is left to fill.
    """
    scoring = [SlotCount(slot=slot, count=count) for slot, count in config.items() if slot.is_scoring and count > 0]
    if not scoring:
        raise EmptyConfigurationError(f"Roster configuration has no scoring slots: {_describe(config)}")

    ordered = tuple(sorted(scoring, key=lambda sc: _restrictiveness(sc.slot)))
    logger.debug("Slot priority: %s", ", ".join(f"{sc.slot.name}x{sc.count}" for sc in ordered))
    return ordered


def _describe(config: Mapping[SlotType, int]) -> str:
    if not config:
        return "(empty)"
    return ", ".join(f"{slot.name}={count}" for slot, count in sorted(config.items()))

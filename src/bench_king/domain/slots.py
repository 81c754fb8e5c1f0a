from dataclasses import dataclass

# ESPN lineup slot ids. Only bench and IR carry meaning for the optimizer;
# the rest are kept for display names.
BENCH_SLOT_ID = 20
IR_SLOT_ID = 21

NON_SCORING_SLOT_IDS: frozenset[int] = frozenset({BENCH_SLOT_ID, IR_SLOT_ID})

SLOT_NAMES: dict[int, str] = {
    0: "QB",
    1: "TQB",
    2: "RB",
    3: "RB/WR",
    4: "WR",
    5: "WR/TE",
    6: "TE",
    7: "OP",
    8: "DT",
    9: "DE",
    10: "LB",
    11: "DL",
    12: "CB",
    13: "S",
    14: "DB",
    15: "DP",
    16: "D/ST",
    17: "K",
    18: "P",
    19: "HC",
    20: "Bench",
    21: "IR",
    23: "RB/WR/TE",
    24: "ER",
    25: "Rookie",
}


@dataclass(frozen=True, order=True)
class SlotType:
    id: int
    name: str

    @property
    def is_scoring(self) -> bool:
        return self.id not in NON_SCORING_SLOT_IDS


def slot_type(slot_id: int) -> SlotType:
    """Resolve an ESPN lineup slot id to a SlotType."""
    return SlotType(id=slot_id, name=SLOT_NAMES.get(slot_id, f"Slot {slot_id}"))


@dataclass(frozen=True)
class SlotCount:
    slot: SlotType
    count: int


type RosterConfiguration = dict[SlotType, int]
type PrioritizedSlots = tuple[SlotCount, ...]

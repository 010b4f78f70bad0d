"""
Node index layout of the six-stage flow graph.

    stage 0   industry connects        [0, n)
    stage 1   unified connects         n
    stage 2-4 industry nodes + 1 drop-off, n + 1 nodes per stage
    stage 5   Approved, Rejected, Not Progressed

Every offset is derived from the industry count `n`.
"""

STAGE_COUNT = 6
DROP_OFF_STAGES = (2, 3, 4)
OUTCOMES = ("Approved", "Rejected", "Not Progressed")


def stage_start(stage: int, n: int) -> int:
    if n < 1:
        raise ValueError(f"industry count must be positive, got {n}")
    if stage == 0:
        return 0
    if stage == 1:
        return n
    if stage in DROP_OFF_STAGES:
        return n + 1 + (stage - 2) * (n + 1)
    if stage == 5:
        return stage_start(4, n) + n + 1
    raise ValueError(f"no stage {stage} (stages are 0..{STAGE_COUNT - 1})")


def drop_off_index(stage: int, n: int) -> int:
    """Drop-off node of `stage`; it collects attrition out of stage - 1."""
    if stage not in DROP_OFF_STAGES:
        raise ValueError(f"stage {stage} has no drop-off node")
    return stage_start(stage, n) + n


def industry_index(stage: int, i: int, n: int) -> int:
    if stage in (1, 5):
        raise ValueError(f"stage {stage} has no per-industry nodes")
    if not 0 <= i < n:
        raise ValueError(f"industry position {i} out of range for {n} industries")
    return stage_start(stage, n) + i


def outcome_index(outcome: str, n: int) -> int:
    return stage_start(5, n) + OUTCOMES.index(outcome)


def node_count(n: int) -> int:
    return stage_start(5, n) + len(OUTCOMES)


def stage_of(index: int, n: int) -> int:
    """Inverse lookup: which stage a node index belongs to."""
    if not 0 <= index < node_count(n):
        raise ValueError(f"node index {index} out of range")
    for stage in reversed(range(STAGE_COUNT)):
        if index >= stage_start(stage, n):
            return stage
    return 0

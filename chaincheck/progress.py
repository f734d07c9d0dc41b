import logging
from typing import Optional

from .checkpoints import ProfileSet, select_profile
from .config import SIGCHECK_VERIFICATION_FACTOR
from .utils import now_ts

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400.0


def guess_verification_progress(
    network,
    target,
    now: Optional[int] = None,
    profiles: Optional[ProfileSet] = None,
    factor: float = SIGCHECK_VERIFICATION_FACTOR,
) -> float:
    """Guess how far verification has come once ``target`` is processed.

    Work is 1.0 per transaction up to the last checkpoint and ``factor`` per
    transaction after it, since those need full signature checks. Work left
    after ``target`` is extrapolated from the profile's transaction rate, so
    a target stamped in the future yields negative remaining work; that is
    left unclamped.
    """
    if target is None:
        return 0.0
    if now is None:
        now = now_ts()

    profile = select_profile(network, profiles)
    cp_tx = profile.transactions_at_last_checkpoint
    per_day = profile.estimated_transactions_per_day

    if target.chain_tx <= cp_tx:
        cheap_before = float(target.chain_tx)
        cheap_after = float(cp_tx - target.chain_tx)
        expensive_after = (now - profile.last_checkpoint_timestamp) / SECONDS_PER_DAY * per_day
        work_before = cheap_before
        work_after = cheap_after + expensive_after * factor
    else:
        cheap_before = float(cp_tx)
        expensive_before = float(target.chain_tx - cp_tx)
        expensive_after = (now - target.time) / SECONDS_PER_DAY * per_day
        work_before = cheap_before + expensive_before * factor
        work_after = expensive_after * factor

    total = work_before + work_after
    if total == 0:
        # nothing verified and nothing left
        return 1.0
    return work_before / total

import logging
from typing import Optional

from .checkpoints import ProfileSet, lookup, select_profile
from .config import is_testnet
from .utils import hash_key

logger = logging.getLogger(__name__)


def check_block(
    network,
    checkpoints_enabled: bool,
    height: int,
    candidate_hash,
    profiles: Optional[ProfileSet] = None,
) -> bool:
    """Return False when ``candidate_hash`` contradicts the checkpoint at ``height``.

    A False result means the block, and any branch built on it, must be
    rejected. Testnet has no checkpoints, and heights without a checkpoint
    are never contradicted. The candidate may be hex text (optionally
    ``0x``-prefixed) or the raw digest bytes in the same byte order.
    """
    if is_testnet(network):
        return True
    if not checkpoints_enabled:
        return True

    expected = lookup(select_profile(network, profiles), height)
    if expected is None:
        return True
    if hash_key(candidate_hash) == expected:
        logger.debug("block %s matches checkpoint at height %d", expected, height)
        return True
    logger.warning(
        "checkpoint mismatch at height %d: expected %s, got %s",
        height, expected, candidate_hash,
    )
    return False

import logging
from typing import Mapping, Optional

from .checkpoints import ProfileSet, entries_descending, max_entry, max_height, select_profile
from .config import is_testnet
from .utils import hash_key

logger = logging.getLogger(__name__)


def _enforced(network, checkpoints_enabled: bool) -> bool:
    return not is_testnet(network) and checkpoints_enabled


def get_total_blocks_estimate(
    network, checkpoints_enabled: bool, profiles: Optional[ProfileSet] = None
) -> int:
    if not _enforced(network, checkpoints_enabled):
        return 0
    return max_height(select_profile(network, profiles))


def get_last_checkpoint(
    network,
    checkpoints_enabled: bool,
    index_by_hash: Mapping,
    profiles: Optional[ProfileSet] = None,
):
    """Deepest checkpoint block present in ``index_by_hash``, or None.

    Keys are matched exactly first; keys in another hash spelling (``0x``
    prefix, upper case, raw digest bytes) are matched after normalizing.
    The caller must keep ``index_by_hash`` unchanged for the duration of the
    call.
    """
    if not _enforced(network, checkpoints_enabled):
        return None
    by_key = None
    for entry in entries_descending(select_profile(network, profiles)):
        if entry.hash in index_by_hash:
            node = index_by_hash[entry.hash]
        else:
            if by_key is None:
                by_key = {}
                for key, value in index_by_hash.items():
                    by_key.setdefault(hash_key(key), value)
            if entry.hash not in by_key:
                continue
            node = by_key[entry.hash]
        logger.debug("last checkpoint in index: height %d %s", entry.height, entry.hash)
        return node
    return None


def get_latest_hardened_checkpoint(network, profiles: Optional[ProfileSet] = None) -> str:
    return max_entry(select_profile(network, profiles)).hash

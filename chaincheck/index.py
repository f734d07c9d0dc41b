from dataclasses import dataclass
from typing import Dict, Iterable

from .utils import normalize_hash


@dataclass(frozen=True)
class BlockIndexNode:
    """Read-only view of one block in the host's chain index.

    ``chain_tx`` is the cumulative number of transactions from genesis up to
    and including this block; ``time`` is the block timestamp.
    """

    height: int
    hash: str
    chain_tx: int
    time: int

    def to_dict(self) -> dict:
        return {
            "height": self.height,
            "hash": self.hash,
            "chain_tx": self.chain_tx,
            "time": self.time,
        }

    @staticmethod
    def from_dict(data: dict) -> "BlockIndexNode":
        return BlockIndexNode(
            height=int(data["height"]),
            hash=normalize_hash(data["hash"]),
            chain_tx=int(data["chain_tx"]),
            time=int(data["time"]),
        )


def build_index(nodes: Iterable[BlockIndexNode]) -> Dict[str, BlockIndexNode]:
    return {node.hash: node for node in nodes}

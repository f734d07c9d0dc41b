import hashlib
import importlib

import pytest

from chaincheck.checkpoints import CheckpointSet, NetworkProfile, ProfileSet
from chaincheck.index import BlockIndexNode


def block_hash(label) -> str:
    return hashlib.sha256(f"block-{label}".encode()).hexdigest()


@pytest.fixture
def load_config_module(monkeypatch):
    import chaincheck.config as config

    def _loader(**env):
        for key, value in env.items():
            monkeypatch.setenv(f"CHAINCHECK_{key.upper()}", value)
        return importlib.reload(config)

    yield _loader
    monkeypatch.undo()
    importlib.reload(config)


@pytest.fixture
def small_profiles():
    main = NetworkProfile(
        checkpoints=CheckpointSet([(0, block_hash(0)), (100, block_hash(100)), (200, block_hash(200))]),
        last_checkpoint_timestamp=1_000_000,
        transactions_at_last_checkpoint=1000,
        estimated_transactions_per_day=86400.0,
    )
    test = NetworkProfile(
        checkpoints=CheckpointSet([(0, block_hash("t0")), (50, block_hash("t50"))]),
        last_checkpoint_timestamp=1_000_000,
        transactions_at_last_checkpoint=0,
        estimated_transactions_per_day=100.0,
    )
    return ProfileSet(main=main, test=test)


@pytest.fixture
def make_node():
    def _make(height, chain_tx=0, time=0, label=None):
        return BlockIndexNode(
            height=height,
            hash=block_hash(height if label is None else label),
            chain_tx=chain_tx,
            time=time,
        )

    return _make


@pytest.fixture
def hash_of():
    return block_hash

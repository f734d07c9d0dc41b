import json
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, NamedTuple, Optional, Tuple

from . import data
from .config import is_testnet
from .utils import normalize_hash

logger = logging.getLogger(__name__)


class CheckpointEntry(NamedTuple):
    height: int
    hash: str


class CheckpointSet:
    """Immutable height -> hash table, kept in ascending height order."""

    __slots__ = ("_entries", "_by_height")

    def __init__(self, entries: Iterable[Tuple[int, str]]):
        ordered = []
        last = -1
        for height, block_hash in entries:
            height = int(height)
            if height < 0:
                raise ValueError(f"negative checkpoint height {height}")
            if height <= last:
                raise ValueError(
                    f"checkpoint heights must be strictly ascending ({height} after {last})"
                )
            ordered.append(CheckpointEntry(height, normalize_hash(block_hash)))
            last = height
        if not ordered:
            raise ValueError("checkpoint set must not be empty")
        self._entries: Tuple[CheckpointEntry, ...] = tuple(ordered)
        self._by_height: Dict[int, str] = {e.height: e.hash for e in ordered}

    def get(self, height: int) -> Optional[str]:
        return self._by_height.get(height)

    @property
    def entries(self) -> Tuple[CheckpointEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CheckpointEntry]:
        return iter(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CheckpointSet):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"CheckpointSet({len(self._entries)} entries, max={self._entries[-1].height})"


@dataclass(frozen=True)
class NetworkProfile:
    checkpoints: CheckpointSet
    last_checkpoint_timestamp: int
    transactions_at_last_checkpoint: int
    estimated_transactions_per_day: float

    def to_dict(self) -> dict:
        return {
            "checkpoints": [[e.height, e.hash] for e in self.checkpoints],
            "last_checkpoint_timestamp": self.last_checkpoint_timestamp,
            "transactions_at_last_checkpoint": self.transactions_at_last_checkpoint,
            "estimated_transactions_per_day": self.estimated_transactions_per_day,
        }

    @staticmethod
    def from_dict(raw: dict) -> "NetworkProfile":
        if not isinstance(raw, dict) or "checkpoints" not in raw:
            raise ValueError("profile must be an object with a 'checkpoints' list")
        try:
            entries = [(int(h), str(v)) for h, v in raw["checkpoints"]]
        except (TypeError, ValueError) as exc:
            raise ValueError("checkpoints must be a list of [height, hash] pairs") from exc
        return NetworkProfile(
            checkpoints=CheckpointSet(entries),
            last_checkpoint_timestamp=int(raw.get("last_checkpoint_timestamp", 0)),
            transactions_at_last_checkpoint=int(raw.get("transactions_at_last_checkpoint", 0)),
            estimated_transactions_per_day=float(raw.get("estimated_transactions_per_day", 0.0)),
        )


@dataclass(frozen=True)
class ProfileSet:
    main: NetworkProfile
    test: NetworkProfile

    def to_dict(self) -> dict:
        return {"main": self.main.to_dict(), "test": self.test.to_dict()}


def load_builtin_profiles() -> ProfileSet:
    main = NetworkProfile(
        checkpoints=CheckpointSet(data.MAIN_CHECKPOINTS),
        **data.MAIN_CALIBRATION,
    )
    test = NetworkProfile(
        checkpoints=CheckpointSet(data.TEST_CHECKPOINTS),
        **data.TEST_CALIBRATION,
    )
    return ProfileSet(main=main, test=test)


def load_profiles_file(path: str, network="main", base: Optional[ProfileSet] = None) -> ProfileSet:
    """Load profiles from a JSON file.

    The file holds either ``{"main": {...}, "test": {...}}`` or a single
    profile, which then replaces ``network``'s profile in ``base`` (the
    built-in profiles by default).
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a JSON object")
    base = base or load_builtin_profiles()
    if "main" in raw or "test" in raw:
        main = NetworkProfile.from_dict(raw["main"]) if "main" in raw else base.main
        test = NetworkProfile.from_dict(raw["test"]) if "test" in raw else base.test
        profiles = ProfileSet(main=main, test=test)
    else:
        profile = NetworkProfile.from_dict(raw)
        if is_testnet(network):
            profiles = ProfileSet(main=base.main, test=profile)
        else:
            profiles = ProfileSet(main=profile, test=base.test)
    logger.info(
        "loaded checkpoint profiles from %s (main=%d, test=%d entries)",
        path, len(profiles.main.checkpoints), len(profiles.test.checkpoints),
    )
    return profiles


_DEFAULT_PROFILES: Optional[ProfileSet] = None


def default_profiles() -> ProfileSet:
    global _DEFAULT_PROFILES
    if _DEFAULT_PROFILES is None:
        _DEFAULT_PROFILES = load_builtin_profiles()
        logger.debug(
            "built-in checkpoint profiles ready (main max height %d)",
            _DEFAULT_PROFILES.main.checkpoints.entries[-1].height,
        )
    return _DEFAULT_PROFILES


def select_profile(network, profiles: Optional[ProfileSet] = None) -> NetworkProfile:
    profiles = profiles or default_profiles()
    if is_testnet(network):
        return profiles.test
    return profiles.main


def lookup(profile: NetworkProfile, height: int) -> Optional[str]:
    return profile.checkpoints.get(height)


def max_entry(profile: NetworkProfile) -> CheckpointEntry:
    return profile.checkpoints.entries[-1]


def max_height(profile: NetworkProfile) -> int:
    return max_entry(profile).height


def entries_descending(profile: NetworkProfile) -> Iterator[CheckpointEntry]:
    return reversed(profile.checkpoints.entries)

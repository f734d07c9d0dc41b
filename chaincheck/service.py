import logging
from typing import Mapping, Optional

from .anchor import get_last_checkpoint, get_latest_hardened_checkpoint, get_total_blocks_estimate
from .checkpoints import (
    NetworkProfile,
    ProfileSet,
    default_profiles,
    load_profiles_file,
    max_height,
    select_profile,
)
from .config import Settings, load_settings
from .progress import guess_verification_progress
from .validator import check_block

logger = logging.getLogger(__name__)


class CheckpointService:
    def __init__(self, settings: Optional[Settings] = None, profiles: Optional[ProfileSet] = None):
        self.settings = settings or load_settings()
        if profiles is None:
            if self.settings.checkpoints_file:
                profiles = load_profiles_file(self.settings.checkpoints_file, self.settings.network)
            else:
                profiles = default_profiles()
        self.profiles = profiles

    @property
    def network(self):
        return self.settings.network

    @property
    def enabled(self) -> bool:
        return self.settings.checkpoints_enabled

    @property
    def profile(self) -> NetworkProfile:
        return select_profile(self.network, self.profiles)

    def check_block(self, height: int, block_hash: str) -> bool:
        return check_block(self.network, self.enabled, height, block_hash, self.profiles)

    def guess_verification_progress(self, target, now: Optional[int] = None) -> float:
        return guess_verification_progress(
            self.network, target, now, self.profiles, self.settings.sigcheck_factor
        )

    def total_blocks_estimate(self) -> int:
        return get_total_blocks_estimate(self.network, self.enabled, self.profiles)

    def last_checkpoint(self, index_by_hash: Mapping):
        return get_last_checkpoint(self.network, self.enabled, index_by_hash, self.profiles)

    def latest_hardened_checkpoint(self) -> str:
        return get_latest_hardened_checkpoint(self.network, self.profiles)

    def metrics(self) -> dict:
        profile = self.profile
        return {
            "network": self.network.value,
            "checkpoints_enabled": self.enabled,
            "checkpoints": len(profile.checkpoints),
            "max_height": max_height(profile),
            "hardened_checkpoint": self.latest_hardened_checkpoint(),
            "total_blocks_estimate": self.total_blocks_estimate(),
            "last_checkpoint_timestamp": profile.last_checkpoint_timestamp,
            "transactions_at_last_checkpoint": profile.transactions_at_last_checkpoint,
            "estimated_transactions_per_day": profile.estimated_transactions_per_day,
            "sigcheck_factor": self.settings.sigcheck_factor,
        }

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

SIGCHECK_VERIFICATION_FACTOR = 5.0


class NetworkMode(str, Enum):
    MAIN = "main"
    TEST = "test"


_NETWORK_ALIASES = {
    "main": NetworkMode.MAIN,
    "mainnet": NetworkMode.MAIN,
    "test": NetworkMode.TEST,
    "testnet": NetworkMode.TEST,
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_network(value) -> NetworkMode:
    if isinstance(value, NetworkMode):
        return value
    value = getattr(value, "value", value)
    mode = _NETWORK_ALIASES.get(str(value).strip().lower())
    if mode is None:
        raise RuntimeError(f"unknown network '{value}' (expected main or test)")
    return mode


def is_testnet(network) -> bool:
    return parse_network(network) is NetworkMode.TEST


NETWORK = parse_network(os.getenv("CHAINCHECK_NETWORK", "main"))
CHECKPOINTS_ENABLED = os.getenv("CHAINCHECK_CHECKPOINTS", "1") != "0"
SIGCHECK_FACTOR = float(
    os.getenv("CHAINCHECK_SIGCHECK_FACTOR", str(SIGCHECK_VERIFICATION_FACTOR))
)
CHECKPOINTS_FILE = os.getenv("CHAINCHECK_CHECKPOINTS_FILE") or None
LOG_LEVEL = os.getenv("CHAINCHECK_LOG_LEVEL", "WARNING").strip().upper()
if LOG_LEVEL not in _LOG_LEVELS:
    LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    network: NetworkMode = NetworkMode.MAIN
    checkpoints_enabled: bool = True
    sigcheck_factor: float = SIGCHECK_VERIFICATION_FACTOR
    checkpoints_file: Optional[str] = None
    log_level: str = "WARNING"

    @property
    def is_testnet(self) -> bool:
        return is_testnet(self.network)


def load_settings(
    network=None,
    checkpoints_enabled: Optional[bool] = None,
    checkpoints_file: Optional[str] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Settings from the CHAINCHECK_* environment, with explicit overrides."""
    return Settings(
        network=parse_network(network) if network is not None else NETWORK,
        checkpoints_enabled=CHECKPOINTS_ENABLED if checkpoints_enabled is None else checkpoints_enabled,
        sigcheck_factor=SIGCHECK_FACTOR,
        checkpoints_file=checkpoints_file or CHECKPOINTS_FILE,
        log_level=(log_level or LOG_LEVEL).upper(),
    )

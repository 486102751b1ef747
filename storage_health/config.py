from typing import Optional
from pydantic import BaseModel, Field
import os
from functools import lru_cache


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


class Settings(BaseModel):
    # smartctl (smartmontools)
    smartctl_path: str = Field(
        default="smartctl",
        description="smartctl binary name or absolute path",
    )
    smartctl_timeout_seconds: Optional[float] = Field(
        default=None,
        description="Per-device timeout for one smartctl call; None waits forever",
    )

    # Device discovery
    dev_dir: str = Field(
        default="/dev",
        description="Directory listed to find block devices",
    )
    sysfs_block_dir: str = Field(
        default="/sys/block",
        description="sysfs directory holding <name>/queue/rotational flags",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level, e.g. DEBUG, INFO, WARNING",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            smartctl_path=os.getenv("SMARTCTL_PATH") or "smartctl",
            smartctl_timeout_seconds=_parse_timeout(os.getenv("SMARTCTL_TIMEOUT")),
            dev_dir=os.getenv("DISK_DEV_DIR") or "/dev",
            sysfs_block_dir=os.getenv("SYSFS_BLOCK_DIR") or "/sys/block",
            log_level=(os.getenv("LOG_LEVEL") or "WARNING").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()

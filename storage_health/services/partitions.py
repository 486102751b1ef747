import logging
from typing import Iterable, List

import psutil

from storage_health.models.disk import MountedFsInfo, PartitionRecord
from storage_health.services.units import bytes_to_gb

logger = logging.getLogger(__name__)


def list_mounted_filesystems() -> List[MountedFsInfo]:
    """
    Take a fresh snapshot of the mounted filesystems via psutil.

    Mounts whose usage cannot be read (stale network mounts, permission
    errors) are left out of the snapshot.
    """
    mounts: List[MountedFsInfo] = []
    for part in psutil.disk_partitions(all=False):
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except OSError as exc:
            logger.debug("Skipping mount %s: %s", part.mountpoint, exc)
            continue
        mounts.append(
            MountedFsInfo(
                device=part.device,
                mount_point=part.mountpoint,
                filesystem_type=part.fstype,
                total_bytes=usage.total,
                available_bytes=usage.free,
            )
        )
    return mounts


def correlate(
    device_base_name: str,
    mounted_filesystems: Iterable[MountedFsInfo],
) -> List[PartitionRecord]:
    """
    Return usage records for every mount whose device name contains
    device_base_name (e.g. "sda" matches "/dev/sda1").

    Sizes are decimal gigabytes. Plain substring matching also accepts
    unrelated names that share the prefix ("sda" in "/dev/sdaa1").
    """
    partitions: List[PartitionRecord] = []
    for fs in mounted_filesystems:
        if device_base_name not in fs.device:
            continue

        total = bytes_to_gb(fs.total_bytes)
        free = bytes_to_gb(fs.available_bytes)
        used = total - free
        used_percent = (used / total) * 100 if total > 0 else 0.0

        partitions.append(
            PartitionRecord(
                mount_point=fs.mount_point,
                filesystem_type=fs.filesystem_type,
                total_gb=total,
                used_gb=used,
                free_gb=free,
                used_percent=used_percent,
            )
        )
    return partitions

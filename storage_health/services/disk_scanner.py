import logging
import os
import re
import subprocess
from typing import List, Optional

from storage_health.config import get_settings
from storage_health.models.disk import DeviceHealthRecord, DeviceKind, MountedFsInfo
from storage_health.services.partitions import correlate, list_mounted_filesystems
from storage_health.services.smart_report import parse_report

logger = logging.getLogger(__name__)

# Base SCSI/SATA disks only: sda, sdb, ... (partitions such as sda1 are skipped)
# NVMe namespaces only: nvme0n1, nvme1n2, ... (not the nvme0 controller,
# nvme-fabrics or partitions such as nvme0n1p1)
_NVME_NAMESPACE_NAME = re.compile(r"nvme\d+n\d+")
_SATA_DISK_NAME = re.compile(r"sd[a-z]")

# smartctl exit status is a bitmask. Bit 0 (command line did not parse) and
# bit 1 (device open failed) mean there is no report; the higher bits flag
# SMART findings and come with a complete report.
_SMARTCTL_NO_REPORT_BITS = 0b11


class ScanError(RuntimeError):
    """Raised when the block device directory cannot be listed at all."""


def _list_device_names(dev_dir: str) -> List[str]:
    try:
        return os.listdir(dev_dir)
    except OSError as exc:
        raise ScanError(f"failed to read {dev_dir}: {exc}") from exc


def is_non_rotational(name: str) -> Optional[bool]:
    """
    Read /sys/block/<name>/queue/rotational.

    Returns True for solid state ("0"), False for spinning disks and None
    if the flag cannot be read.
    """
    settings = get_settings()
    path = os.path.join(settings.sysfs_block_dir, name, "queue", "rotational")
    try:
        with open(path, "r") as f:
            return f.read().strip() == "0"
    except OSError as exc:
        logger.debug("Could not read rotational flag %s: %s", path, exc)
        return None


def classify_device_name(name: str) -> Optional[DeviceKind]:
    """
    Classify a /dev entry by its name.

    NVMe namespaces (nvme0n1) are NVMe; whole SATA disks (sda) are SATA when
    the rotational flag says solid state and HDD otherwise, including when
    the flag is unreadable. Partitions and all other names give None.
    """
    if _NVME_NAMESPACE_NAME.fullmatch(name):
        return DeviceKind.NVME
    if _SATA_DISK_NAME.fullmatch(name):
        return DeviceKind.SATA if is_non_rotational(name) else DeviceKind.HDD
    return None


def run_smartctl(device_path: str) -> Optional[str]:
    """
    Run `smartctl -a <device_path>` and return its stdout.

    Returns None when smartctl cannot be launched, times out, or reports
    that it could not read the device. Output that is not valid UTF-8 is
    decoded with replacement characters.
    """
    settings = get_settings()
    try:
        result = subprocess.run(
            [settings.smartctl_path, "-a", device_path],
            check=False,  # exit status is a bitmask, evaluated below
            capture_output=True,
            timeout=settings.smartctl_timeout_seconds,
        )
    except FileNotFoundError:
        logger.warning("smartctl not found - install smartmontools")
        return None
    except subprocess.TimeoutExpired:
        logger.warning("smartctl timed out for %s", device_path)
        return None
    except OSError as exc:
        logger.warning("Could not run smartctl for %s: %s", device_path, exc)
        return None

    if result.returncode & _SMARTCTL_NO_REPORT_BITS:
        logger.debug(
            "smartctl returned %d for %s, skipping device",
            result.returncode,
            device_path,
        )
        return None

    return result.stdout.decode("utf-8", errors="replace")


def probe_device(
    device_path: str,
    name: str,
    kind: DeviceKind,
    mounted_filesystems: List[MountedFsInfo],
) -> Optional[DeviceHealthRecord]:
    """Build the full record for one device, or None if smartctl gave nothing."""
    raw_text = run_smartctl(device_path)
    if raw_text is None:
        return None

    record = parse_report(raw_text, kind, device_path=device_path)
    return record.model_copy(
        update={"partitions": tuple(correlate(name, mounted_filesystems))}
    )


def scan_disks() -> List[DeviceHealthRecord]:
    """
    Discover NVMe and SATA/HDD devices and collect their health records.

    Devices for which smartctl yields no report are left out. The result is
    sorted by device path. Raises ScanError only if the device directory
    cannot be listed.
    """
    settings = get_settings()
    names = _list_device_names(settings.dev_dir)

    candidates = []
    for name in names:
        kind = classify_device_name(name)
        if kind is not None:
            candidates.append((name, kind))

    if not candidates:
        logger.info("No NVMe or SATA devices found in %s", settings.dev_dir)
        return []

    mounted_filesystems = list_mounted_filesystems()

    records: List[DeviceHealthRecord] = []
    for name, kind in candidates:
        device_path = os.path.join(settings.dev_dir, name)
        record = probe_device(device_path, name, kind, mounted_filesystems)
        if record is None:
            logger.info("No SMART report for %s, skipping", device_path)
            continue
        records.append(record)

    records.sort(key=lambda r: r.device_path)
    return records

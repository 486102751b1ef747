from typing import List

from fastapi import APIRouter, HTTPException

from storage_health.models.disk import DeviceHealthRecord
from storage_health.services import disk_scanner

router = APIRouter()


def _scan() -> List[DeviceHealthRecord]:
    try:
        return disk_scanner.scan_disks()
    except disk_scanner.ScanError as exc:
        raise HTTPException(
            status_code=503,
            detail=str(exc),
        ) from exc


@router.get(
    "/status",
    response_model=List[DeviceHealthRecord],
    summary="Disk health status",
)
def disks_status() -> List[DeviceHealthRecord]:
    """
    Return one health record per NVMe, SATA SSD and HDD device, sorted by
    device path.

    If the device directory cannot be listed, a HTTP 503 Service Unavailable
    is returned. Devices without a usable smartctl report are simply absent.
    """
    return _scan()


@router.get(
    "/{device_name}",
    response_model=DeviceHealthRecord,
    summary="Health of a single disk",
)
def disk_status(device_name: str) -> DeviceHealthRecord:
    """Return the record for one device by base name, e.g. `sda` or `nvme0n1`."""
    for record in _scan():
        if record.device_path.rsplit("/", 1)[-1] == device_name:
            return record
    raise HTTPException(status_code=404, detail=f"No SMART data for {device_name}")

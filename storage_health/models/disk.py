from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class DeviceKind(str, Enum):
    """Classification assigned to a block device at discovery time."""

    NVME = "NVMe"
    SATA = "SATA"
    HDD = "HDD"

    @property
    def protocol(self) -> str:
        return "NVMe" if self is DeviceKind.NVME else "ATA"

    @property
    def device_type(self) -> str:
        return "HDD" if self is DeviceKind.HDD else "SSD"


class AttributeStatus(str, Enum):
    GOOD = "Good"
    WARNING = "Warning"
    CRITICAL = "Critical"


class AttributeRecord(BaseModel):
    """One row of the ATA SMART attribute table, values kept as reported."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Attribute ID, e.g. '5'")
    name: str = Field(..., description="Attribute name, e.g. Reallocated_Sector_Ct")
    current: str = Field(..., description="Normalized current value (VALUE column)")
    worst: str = Field(..., description="Worst normalized value seen (WORST column)")
    threshold: str = Field(..., description="Failure threshold (THRESH column)")
    raw_value: str = Field(..., description="Vendor raw value, verbatim")
    status: AttributeStatus = Field(
        ...,
        description="Good, Warning or Critical, derived from current and threshold",
    )


class PartitionRecord(BaseModel):
    """Usage of one mounted filesystem that belongs to a device."""

    model_config = ConfigDict(frozen=True)

    mount_point: str = Field(..., description="Mount point path, e.g. /home")
    filesystem_type: str = Field(..., description="Filesystem type, e.g. ext4")
    total_gb: float = Field(..., ge=0, description="Total size in decimal GB")
    used_gb: float = Field(..., description="total_gb - free_gb")
    free_gb: float = Field(..., ge=0, description="Space available in decimal GB")
    used_percent: float = Field(
        ...,
        description="used_gb / total_gb * 100, or 0 when total_gb is 0",
    )


class MountedFsInfo(BaseModel):
    """Snapshot of a single mounted filesystem as reported by the OS."""

    device: str = Field(..., description="Platform device name, e.g. /dev/sda1")
    mount_point: str
    filesystem_type: str
    total_bytes: int = Field(..., ge=0)
    available_bytes: int = Field(..., ge=0)


class DeviceHealthRecord(BaseModel):
    """Normalized health report for a single physical storage device."""

    model_config = ConfigDict(frozen=True)

    device_path: str = Field(..., description="Block device path, e.g. /dev/nvme0n1")
    kind_hint: DeviceKind = Field(..., description="NVMe, SATA or HDD")

    model: Optional[str] = None
    serial: Optional[str] = None
    firmware: Optional[str] = None

    capacity_bytes: Optional[int] = Field(default=None, ge=0)
    capacity_display: Optional[str] = Field(
        default=None,
        description="Human readable capacity as reported, e.g. '500 GB'",
    )

    health_percent: Optional[int] = Field(
        default=None,
        ge=0,
        le=100,
        description="Remaining endurance, 100 - 'Percentage Used'",
    )
    temperature_celsius: Optional[int] = None

    data_written_tb: Optional[float] = Field(default=None, ge=0)
    data_read_tb: Optional[float] = Field(default=None, ge=0)

    power_on_hours: Optional[int] = Field(default=None, ge=0)
    power_cycles: Optional[int] = Field(default=None, ge=0)
    unsafe_shutdowns: Optional[int] = Field(default=None, ge=0)
    rotation_rpm: Optional[int] = Field(default=None, ge=0)

    protocol: Optional[str] = Field(default=None, description="NVMe or ATA")
    device_type: Optional[str] = Field(default=None, description="SSD or HDD")

    attributes: Tuple[AttributeRecord, ...] = ()
    partitions: Tuple[PartitionRecord, ...] = ()

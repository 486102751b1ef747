import logging
import re
from typing import Any, Dict, Optional, Union

from storage_health.models.disk import DeviceHealthRecord, DeviceKind
from storage_health.services.patterns import extract_groups, first_match, parse_count
from storage_health.services.smart_attributes import parse_table
from storage_health.services.units import lbas_to_tb, nvme_units_to_tb

logger = logging.getLogger(__name__)


def _ata_raw_value(attribute_name: str) -> "re.Pattern[str]":
    """
    Pattern for the RAW_VALUE column of one ATA attribute-table row.

    Skips the flag token and the six VALUE..WHEN_FAILED columns so the
    normalized values are never mistaken for the counter.
    """
    return re.compile(
        rf"^\s*\d+\s+{re.escape(attribute_name)}\s+0x[0-9a-fA-F]+(?:\s+\S+){{6}}\s+(\d[\d,]*)",
        re.MULTILINE,
    )


# Identity fields: alternatives are tried in order, first match wins.
_MODEL = (
    (r"Model Number:[ \t]+(.+)", str),
    (r"Device Model:[ \t]+(.+)", str),
    (r"^Product:[ \t]+(.+)", str),
)
_SERIAL = ((r"Serial Number:[ \t]+(.+)", str),)
_FIRMWARE = (
    (r"Firmware Version:[ \t]+(.+)", str),
    (r"^Revision:[ \t]+(.+)", str),
)

# "Total NVM Capacity:  500,107,862,016 [500 GB]"
# "User Capacity:       1,000,204,886,016 bytes [1.00 TB]"
_CAPACITY = re.compile(
    r"(?:Total NVM Capacity|Namespace 1 Size/Capacity|User Capacity):\s+"
    r"([\d,.]+)\s+(?:bytes\s+)?\[\s*(\d+(?:[.,]\d+)?)\s+(GB|TB)\s*\]",
    re.MULTILINE,
)

_PERCENTAGE_USED = ((r"Percentage Used:\s+(\d+)%", int),)

_TEMPERATURE = (
    (r"Temperature:\s+(\d+)\s+Celsius", int),
    (_ata_raw_value("Temperature_Celsius"), parse_count),
)

_NVME_DATA_WRITTEN = ((r"Data Units Written:\s+([\d,.]+)", parse_count),)
_NVME_DATA_READ = ((r"Data Units Read:\s+([\d,.]+)", parse_count),)
_ATA_DATA_WRITTEN = ((_ata_raw_value("Total_LBAs_Written"), parse_count),)
_ATA_DATA_READ = ((_ata_raw_value("Total_LBAs_Read"), parse_count),)

_POWER_CYCLES = (
    (r"Power Cycles:\s+([\d,.]+)", parse_count),
    (_ata_raw_value("Power_Cycle_Count"), parse_count),
)
_POWER_ON_HOURS = (
    (r"Power On Hours:\s+([\d,.]+)", parse_count),
    (_ata_raw_value("Power_On_Hours"), parse_count),
)
_UNSAFE_SHUTDOWNS = ((r"Unsafe Shutdowns:\s+([\d,.]+)", parse_count),)
_ROTATION_RATE = ((r"Rotation Rate:\s+(\d+)\s+rpm", int),)


def coerce_kind(kind_hint: Union[DeviceKind, str]) -> DeviceKind:
    """Map a kind hint to DeviceKind; unknown hints are treated as HDD."""
    if isinstance(kind_hint, DeviceKind):
        return kind_hint
    try:
        return DeviceKind(kind_hint)
    except ValueError:
        logger.debug("Unknown kind hint %r, treating device as HDD", kind_hint)
        return DeviceKind.HDD


def _capacity(raw_text: str) -> Dict[str, Any]:
    groups = extract_groups(raw_text, _CAPACITY)
    if not groups:
        return {}
    count, amount, unit = groups
    try:
        capacity_bytes = parse_count(count)
    except ValueError:
        return {}
    return {"capacity_bytes": capacity_bytes, "capacity_display": f"{amount} {unit}"}


def _health_percent(raw_text: str) -> Optional[int]:
    used = first_match(raw_text, _PERCENTAGE_USED)
    if used is None:
        return None
    return max(0, 100 - used)


def parse_report(
    raw_text: str,
    kind_hint: Union[DeviceKind, str],
    device_path: str = "",
) -> DeviceHealthRecord:
    """
    Build a DeviceHealthRecord from the text of `smartctl -a <device>`.

    Never raises for any report text: every field that cannot be found or
    parsed stays None. Data written/read use the counter that matches the
    device's protocol (NVMe data units or ATA LBAs).
    """
    kind = coerce_kind(kind_hint)

    if kind is DeviceKind.NVME:
        written = first_match(raw_text, _NVME_DATA_WRITTEN)
        read = first_match(raw_text, _NVME_DATA_READ)
        to_tb = nvme_units_to_tb
    else:
        written = first_match(raw_text, _ATA_DATA_WRITTEN)
        read = first_match(raw_text, _ATA_DATA_READ)
        to_tb = lbas_to_tb

    fields: Dict[str, Any] = {
        "device_path": device_path,
        "kind_hint": kind,
        "model": first_match(raw_text, _MODEL),
        "serial": first_match(raw_text, _SERIAL),
        "firmware": first_match(raw_text, _FIRMWARE),
        "protocol": kind.protocol,
        "device_type": kind.device_type,
        "health_percent": _health_percent(raw_text),
        "temperature_celsius": first_match(raw_text, _TEMPERATURE),
        "data_written_tb": to_tb(written) if written is not None else None,
        "data_read_tb": to_tb(read) if read is not None else None,
        "power_cycles": first_match(raw_text, _POWER_CYCLES),
        "power_on_hours": first_match(raw_text, _POWER_ON_HOURS),
        "unsafe_shutdowns": first_match(raw_text, _UNSAFE_SHUTDOWNS),
        "rotation_rpm": first_match(raw_text, _ROTATION_RATE),
        "attributes": tuple(parse_table(raw_text)),
    }
    fields.update(_capacity(raw_text))

    return DeviceHealthRecord(**fields)

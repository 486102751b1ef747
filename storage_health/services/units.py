"""Conversions from vendor counters to decimal (base 1000) units."""

NVME_DATA_UNIT_BYTES = 512_000
LBA_BYTES = 512
BYTES_PER_GB = 1_000_000_000
BYTES_PER_TB = 1_000_000_000_000


def nvme_units_to_tb(units: float) -> float:
    """NVMe 'Data Units' are thousands of 512-byte blocks (512,000 bytes)."""
    return units * NVME_DATA_UNIT_BYTES / BYTES_PER_TB


def lbas_to_tb(lbas: float) -> float:
    return lbas * LBA_BYTES / BYTES_PER_TB


def bytes_to_gb(value: float) -> float:
    return value / BYTES_PER_GB

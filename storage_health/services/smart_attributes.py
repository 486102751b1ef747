import re
from typing import List

from storage_health.models.disk import AttributeRecord, AttributeStatus

# ID# ATTRIBUTE_NAME FLAG VALUE WORST THRESH TYPE UPDATED WHEN_FAILED RAW_VALUE
# e.g. "  5 Reallocated_Sector_Ct   0x0033   100   100   010    Pre-fail  Always       -       0"
_ATTRIBUTE_ROW = re.compile(
    r"^\s*(\d+)\s+(\S.*?)\s+(0x[0-9a-fA-F]+)\s+(\d+)\s+(\d+)\s+(\d+)"
    r"\s+\S+\s+\S+\s+\S+\s+(.+)$"
)

# Normalized values this close above the threshold are reported as Warning
_WARNING_MARGIN = 10


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def classify_status(current: str, threshold: str) -> AttributeStatus:
    """
    Classify a SMART attribute from its normalized current value and threshold.

    A threshold of 0 means the vendor enforces none, so the attribute is
    always Good.
    """
    current_val = _to_int(current)
    threshold_val = _to_int(threshold)

    if threshold_val > 0 and current_val <= threshold_val:
        return AttributeStatus.CRITICAL
    if threshold_val > 0 and current_val <= threshold_val + _WARNING_MARGIN:
        return AttributeStatus.WARNING
    return AttributeStatus.GOOD


def parse_table(raw_text: str) -> List[AttributeRecord]:
    """Return every attribute-table row in raw_text, in source order."""
    attributes: List[AttributeRecord] = []
    for line in raw_text.splitlines():
        match = _ATTRIBUTE_ROW.match(line)
        if not match:
            continue

        attr_id, name, _flag, current, worst, threshold, raw_value = match.groups()
        attributes.append(
            AttributeRecord(
                id=attr_id,
                name=name.strip(),
                current=current,
                worst=worst,
                threshold=threshold,
                raw_value=raw_value.strip(),
                status=classify_status(current, threshold),
            )
        )

    return attributes

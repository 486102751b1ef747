import pytest

# Captured `smartctl -a` output, trimmed to the sections the parser reads.

NVME_REPORT = """\
smartctl 7.3 2022-02-28 r5338 [x86_64-linux-6.1.0-18-amd64] (local build)
Copyright (C) 2002-22, Bruce Allen, Christian Franke, www.smartmontools.org

=== START OF INFORMATION SECTION ===
Model Number:                       Samsung SSD 980 PRO 1TB
Serial Number:                      S5GXNF0R123456A
Firmware Version:                   5B2QGXA7
PCI Vendor/Subsystem ID:            0x144d
IEEE OUI Identifier:                0x002538
Total NVM Capacity:                 1,000,204,886,016 [1.00 TB]
Unallocated NVM Capacity:           0
Controller ID:                      6
NVMe Version:                       1.3
Number of Namespaces:               1
Namespace 1 Size/Capacity:          1,000,204,886,016 [1.00 TB]
Namespace 1 Utilization:            412,345,163,776 [412 GB]
Namespace 1 Formatted LBA Size:     512
Local Time is:                      Mon Oct 19 09:12:44 2026 CEST

=== START OF SMART DATA SECTION ===
SMART overall-health self-assessment test result: PASSED

SMART/Health Information (NVMe Log 0x02)
Critical Warning:                   0x00
Temperature:                        41 Celsius
Available Spare:                    100%
Available Spare Threshold:          10%
Percentage Used:                    3%
Data Units Read:                    24,543,211 [12.5 TB]
Data Units Written:                 19,531,250 [10.0 TB]
Host Read Commands:                 301,742,113
Host Write Commands:                412,833,007
Controller Busy Time:               1,024
Power Cycles:                       1,482
Power On Hours:                     6,210
Unsafe Shutdowns:                   57
Media and Data Integrity Errors:    0
Error Information Log Entries:      0
Warning  Comp. Temperature Time:    0
Critical Comp. Temperature Time:    0
Temperature Sensor 1:               41 Celsius
Temperature Sensor 2:               45 Celsius

Error Information (NVMe Log 0x01, 16 of 64 entries)
No Errors Logged
"""

SATA_SSD_REPORT = """\
smartctl 7.3 2022-02-28 r5338 [x86_64-linux-6.1.0-18-amd64] (local build)
Copyright (C) 2002-22, Bruce Allen, Christian Franke, www.smartmontools.org

=== START OF INFORMATION SECTION ===
Model Family:     Samsung based SSDs
Device Model:     Samsung SSD 860 EVO 500GB
Serial Number:    S3Z1NB0K123456X
LU WWN Device Id: 5 002538 e40a1b2c3
Firmware Version: RVT04B6Q
User Capacity:    500,107,862,016 bytes [500 GB]
Sector Size:      512 bytes logical/physical
Rotation Rate:    Solid State Device
Form Factor:      2.5 inches
SMART support is: Available - device has SMART capability.
SMART support is: Enabled

=== START OF READ SMART DATA SECTION ===
SMART overall-health self-assessment test result: PASSED

SMART Attributes Data Structure revision number: 1
Vendor Specific SMART Attributes with Thresholds:
ID# ATTRIBUTE_NAME          FLAG     VALUE WORST THRESH TYPE      UPDATED  WHEN_FAILED RAW_VALUE
  5 Reallocated_Sector_Ct   0x0033   100   100   010    Pre-fail  Always       -       0
  9 Power_On_Hours          0x0032   095   095   000    Old_age   Always       -       21843
 12 Power_Cycle_Count       0x0032   099   099   000    Old_age   Always       -       1187
177 Wear_Leveling_Count     0x0013   015   015   005    Pre-fail  Always       -       1502
183 Runtime_Bad_Block       0x0013   009   009   010    Pre-fail  Always   FAILING_NOW 12
194 Temperature_Celsius     0x0022   064   052   000    Old_age   Always       -       36 (Min/Max 20/52)
241 Total_LBAs_Written      0x0032   099   099   000    Old_age   Always       -       39062500000
242 Total_LBAs_Read         0x0032   099   099   000    Old_age   Always       -       19531250000

SMART Error Log Version: 1
No Errors Logged
"""

HDD_REPORT = """\
=== START OF INFORMATION SECTION ===
Model Family:     Western Digital Red
Device Model:     WDC WD40EFRX-68N32N0
Serial Number:    WD-WCC7K1234567
Firmware Version: 82.00A82
User Capacity:    4,000,787,030,016 bytes [4.00 TB]
Sector Sizes:     512 bytes logical, 4096 bytes physical
Rotation Rate:    5400 rpm

=== START OF READ SMART DATA SECTION ===
ID# ATTRIBUTE_NAME          FLAG     VALUE WORST THRESH TYPE      UPDATED  WHEN_FAILED RAW_VALUE
  1 Raw_Read_Error_Rate     0x002f   200   200   051    Pre-fail  Always       -       0
  3 Spin_Up_Time            0x0027   175   173   021    Pre-fail  Always       -       6225
  9 Power_On_Hours          0x0032   052   052   000    Old_age   Always       -       35125
 12 Power_Cycle_Count       0x0032   100   100   000    Old_age   Always       -       95
194 Temperature_Celsius     0x0022   116   104   000    Old_age   Always       -       34
"""


@pytest.fixture
def nvme_report() -> str:
    return NVME_REPORT


@pytest.fixture
def sata_ssd_report() -> str:
    return SATA_SSD_REPORT


@pytest.fixture
def hdd_report() -> str:
    return HDD_REPORT

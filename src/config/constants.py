"""Weight limits, input ranges, file names and formats for the truck weight system."""

# =============================================================================
# Weight Limits
# =============================================================================

WEIGHT_LIMIT = 2000          # kg, maximum permissible total truck weight
NEAR_LIMIT_FRACTION = 0.9    # fraction of WEIGHT_LIMIT at which a load is "Near Limit"
NEAR_LIMIT_THRESHOLD = WEIGHT_LIMIT * NEAR_LIMIT_FRACTION  # 1800 kg

# =============================================================================
# Input Ranges (inclusive)
# =============================================================================

TRUCKS_PER_BATCH_RANGE = (1, 100)
EMPTY_WEIGHT_RANGE = (0, 10_000)     # kg
BOX_COUNT_RANGE = (0, 1_000)
BOX_WEIGHT_RANGE = (0, 5_000)        # kg
TRUCK_NUMBER_RANGE = (1, 9_999)

# =============================================================================
# Files
# =============================================================================

DATA_FILE = "truck_data.txt"
REPORT_FILE = "truck_report.txt"
CSV_FILE = "truck_export.csv"
PARQUET_FILE = "truck_export.parquet"
BACKUP_FILE = "backup.txt"

DATA_DIR_ENVVAR = "TWMS_DATA_DIR"

# =============================================================================
# Formats
# =============================================================================

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
BACKUP_SEPARATOR = "|"

CSV_COLUMNS = [
    "ID",
    "Driver",
    "Plate",
    "Destination",
    "EmptyWeight",
    "TotalWeight",
    "Status",
    "Timestamp",
    "BoxCount",
]

# Parquet export carries the CSV columns plus derived load figures
PARQUET_COLUMNS = CSV_COLUMNS + ["LoadPercentage", "Overloaded"]

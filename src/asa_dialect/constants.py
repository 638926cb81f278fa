"""
Centralized constants for the SQL Anywhere dialect.

Import from here instead of hardcoding values.
"""

# ===========================================================================
# Identifiers
# ===========================================================================
DEFAULT_SCHEMA = "dbo"          # Owner used when no username is configured
QUOTE_OPEN = "["
QUOTE_CLOSE = "]"

# Owners whose tables are never listed
EXCLUDED_OWNERS = ("rs_systabgroup",)

# ===========================================================================
# Server version
# ===========================================================================
VERSION_QUERY = "SELECT @@version AS ver"

# ===========================================================================
# Schema cache
# ===========================================================================
SCHEMA_CACHE_DURATION_S = 3600
SCHEMA_CACHE_MAXSIZE = 256

# ===========================================================================
# Catalog values
# ===========================================================================
AUTOINCREMENT_DEFAULTS = ("autoincrement", "global autoincrement")
NULL_DEFAULT = "(NULL)"

# Raw defaults meaning "the server fills in the current time"
CURRENT_TIME_DEFAULTS = (
    "current timestamp",
    "current_timestamp",
    "current utc timestamp",
    "current date",
    "current time",
    "timestamp",
    "utc timestamp",
    "now()",
    "getdate()",
)

# Separator used by LIST() in aggregated foreign key rows
LIST_SEPARATOR = ", "

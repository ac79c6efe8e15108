from banal import as_bool
from rigour.env import env_str


# Logging configuration
LOG_JSON = as_bool(env_str("ODSCELL_LOG_JSON", "false"))

# Debug mode
DEBUG = as_bool(env_str("ODSCELL_DEBUG", "false"))

# Return date and time cells as the text rendered by the producing application,
# rather than parsing their machine-readable attributes.
FORMAT_DATES = as_bool(env_str("ODSCELL_FORMAT_DATES", "false"))

# Name of the unescaper applied to string cell content, see odscell.escaper
UNESCAPE = env_str("ODSCELL_UNESCAPE", "ods")

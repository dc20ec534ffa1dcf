import os

DEBUG = os.environ.get("LAY_TOOLS_DEBUG", "0") not in ("", "0", "false", "False")

CURRENT_VERSION = "0.1.0"

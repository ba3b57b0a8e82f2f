from pathlib import Path

# Environment variable that overrides the settings file location
CONFIG_ENV_VAR = "CLISETTINGS_CONFIG"

# Default per-user settings file
DEFAULT_CONFIG_PATH = Path("~/.config/clisettings/config.json").expanduser()

# Setting names with special meaning
ENDPOINT_SETTING = "endpoint"
LABELS_SETTING = "labels"
LOGO_SETTING = "logo"

# Value that switches labels or logo off
OFF = "off"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

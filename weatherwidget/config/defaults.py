"""Built-in defaults used when no config file is present."""

from weatherwidget.config.schema import WidgetConfig

DEFAULT_CONFIG_PATH = "weatherwidget.yaml"

DEFAULT_CONFIG = WidgetConfig()

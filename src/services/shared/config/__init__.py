from .settings import Settings as Settings
from .settings import get_settings as get_settings

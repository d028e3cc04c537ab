from .logger import get_logger
from .grid_utils import validate_grid
from .config_loader import load_config, load_rotate_config

__all__ = ["get_logger", "validate_grid", "load_config", "load_rotate_config"]

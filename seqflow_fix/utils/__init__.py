from .logger import PACKAGE_LOGGER, reset_logger, setup_logger

__all__ = ["PACKAGE_LOGGER", "reset_logger", "setup_logger"]

"""
Centralized Configuration Module

All application constants, logging configuration, and settings.
Import from here instead of hardcoding values.
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from .models import ConsoleVersion

# ============================================================================
# Load default .env at module import time
# ============================================================================
load_dotenv()

# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logging.getLogger(__name__).info(f"Loaded environment from: {env_file}")
        else:
            logging.getLogger(__name__).warning(f"Environment file not found: {env_file}")
    else:
        # Reload default .env
        load_dotenv(override=True)


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    APP_NAME = "bmc-viewer"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Detect a server's remote console and generate its KVM viewer descriptor"

    DESCRIPTOR_EXTENSION = ".jnlp"


class TransportConfig:
    """HTTP transport settings, read when requested so --env-file takes effect"""

    DEFAULT_TIMEOUT = 5

    @classmethod
    def get_timeout(cls) -> float:
        return float(os.getenv("BMC_TIMEOUT", str(cls.DEFAULT_TIMEOUT)))

    @classmethod
    def get_verify_tls(cls) -> bool:
        return os.getenv("BMC_VERIFY_TLS", "false").lower() == "true"


class TargetConfig:
    """Remote console connection settings"""

    DEFAULT_USERNAME = "root"

    @classmethod
    def get_target_settings(cls) -> dict:
        """Get host, credentials and version for the console"""
        return {
            "host": os.getenv("BMC_HOST"),
            "username": os.getenv("BMC_USERNAME", cls.DEFAULT_USERNAME),
            "password": os.getenv("BMC_PASSWORD", ""),
            "version": int(os.getenv("BMC_VERSION", str(ConsoleVersion.UNKNOWN.value)))
        }

    @classmethod
    def is_configured(cls) -> bool:
        """Check if a console host is configured"""
        return bool(os.getenv("BMC_HOST"))


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    # Log Level
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Log Format
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Detailed format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    # File Logging
    LOG_FILE = os.getenv("LOG_FILE")  # Optional
    LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))  # 10MB
    LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))

    @classmethod
    def get_log_level(cls) -> str:
        """Current LOG_LEVEL, so values loaded from --env-file apply"""
        return os.getenv("LOG_LEVEL", cls.LOG_LEVEL).upper()

    @classmethod
    def get_log_file(cls) -> Optional[str]:
        return os.getenv("LOG_FILE", cls.LOG_FILE)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Logs go to stderr so the descriptor printed on stdout stays clean.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, LogConfig.get_log_level(), logging.WARNING)

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )

    if log_file or LogConfig.get_log_file():
        from logging.handlers import RotatingFileHandler

        file_path = log_file or LogConfig.get_log_file()
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    # Suppress noisy loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")


# Initialize logger for this module
logger = logging.getLogger(__name__)


# ============================================================================
# Validation
# ============================================================================

def validate_config():
    """
    Validate configuration on startup.
    Raises ValueError if critical configuration is missing.
    """
    errors = []

    if not TargetConfig.is_configured():
        errors.append("No console host configured (set BMC_HOST or pass --host)")

    try:
        version = TargetConfig.get_target_settings()["version"]
        if version >= 0 and not ConsoleVersion.is_known(version):
            known = ", ".join(str(v.value) for v in ConsoleVersion.known())
            errors.append(f"BMC_VERSION {version} is not one of: {known}")
    except ValueError:
        errors.append(f"BMC_VERSION must be an integer, got {os.getenv('BMC_VERSION')!r}")

    try:
        if TransportConfig.get_timeout() <= 0:
            errors.append("BMC_TIMEOUT must be positive")
    except ValueError:
        errors.append(f"BMC_TIMEOUT must be a number, got {os.getenv('BMC_TIMEOUT')!r}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)

    logger.info(f"Configuration validated for {os.getenv('BMC_HOST')}")


__all__ = [
    'AppConfig',
    'TransportConfig',
    'TargetConfig',
    'LogConfig',
    'load_environment',
    'setup_logging',
    'validate_config',
]

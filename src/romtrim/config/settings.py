"""
Simple configuration system

Dataclass settings persisted as YAML (or JSON) under the user's home
directory. Missing or unreadable files fall back to defaults.
"""
import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..common.constants import FileConstants, ProcessingConstants, ScanConstants
from ..common.enums import ScanMethod, get_enum_values

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class ScanSettings:
    """Boundary detection parameters"""
    chunk_size: int = ScanConstants.CHUNK_SIZE
    aeo_buffer: int = ScanConstants.AEO_BUFFER
    paranoia_buffer: int = ScanConstants.PARANOIA_BUFFER
    aeo_field_offset: int = ScanConstants.AEO_FIELD_OFFSET
    wifi_discrepancy: int = ScanConstants.WIFI_ENABLED_GAME_ADDITIONAL_OFFSET


@dataclass
class ProcessingSettings:
    """Batch processing parameters"""
    extensions: List[str] = field(default_factory=lambda: [FileConstants.DS_ROM_EXTENSION])
    max_workers: int = ProcessingConstants.DEFAULT_MAX_WORKERS
    default_scan_method: str = ScanMethod.TAIL.value


@dataclass
class LoggingSettings:
    """Logging parameters"""
    log_level: str = "WARNING"  # console level, DEBUG, INFO, WARNING, ERROR
    log_to_file: bool = True
    log_file_max_size: int = FileConstants.LOG_MAX_SIZE
    log_backup_count: int = FileConstants.LOG_BACKUP_COUNT


@dataclass
class AppConfig:
    """Application configuration"""
    scan: ScanSettings = field(default_factory=ScanSettings)
    processing: ProcessingSettings = field(default_factory=ProcessingSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    config_version: str = "1.0"
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self):
        if self.created_at is None:
            self.created_at = datetime.now().isoformat()
        self.updated_at = datetime.now().isoformat()

    @classmethod
    def load(cls, config_path: Optional[Union[str, Path]] = None) -> 'AppConfig':
        """Load the configuration file"""
        if config_path is None:
            config_path = cls.get_default_config_path()

        config_path = Path(config_path)

        if not config_path.exists():
            return cls.default()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if config_path.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)

            data = data or {}
            scan_data = data.get('scan', {})
            processing_data = data.get('processing', {})
            logging_data = data.get('logging', {})

            return cls(
                scan=ScanSettings(**scan_data) if scan_data else ScanSettings(),
                processing=ProcessingSettings(**processing_data) if processing_data else ProcessingSettings(),
                logging=LoggingSettings(**logging_data) if logging_data else LoggingSettings(),
                config_version=data.get('config_version', '1.0'),
                created_at=data.get('created_at'),
                updated_at=data.get('updated_at')
            )

        except (OSError, ValueError, TypeError, AttributeError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load configuration from {config_path}: {e}, using defaults")
            return cls.default()

    def save(self, config_path: Optional[Union[str, Path]] = None) -> bool:
        """Save the configuration file"""
        if config_path is None:
            config_path = self.get_default_config_path()

        config_path = Path(config_path)

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)

            self.updated_at = datetime.now().isoformat()
            data = asdict(self)

            with open(config_path, 'w', encoding='utf-8') as f:
                if config_path.suffix.lower() == '.json':
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    yaml.dump(data, f, default_flow_style=False,
                              allow_unicode=True, indent=2)

            return True

        except OSError as e:
            logger.warning(f"Failed to save configuration to {config_path}: {e}")
            return False

    @classmethod
    def default(cls) -> 'AppConfig':
        """Default configuration"""
        return cls()

    @staticmethod
    def get_default_config_path() -> Path:
        """Default configuration file path"""
        return Path.home() / FileConstants.CONFIG_DIR_NAME / FileConstants.DEFAULT_CONFIG_FILE

    def validate(self) -> tuple[bool, list]:
        """Validate configuration values"""
        errors = []

        for name in ('chunk_size', 'aeo_buffer', 'paranoia_buffer'):
            if getattr(self.scan, name) <= 0:
                errors.append(f"scan.{name} must be greater than 0")

        if self.scan.aeo_field_offset < 0:
            errors.append("scan.aeo_field_offset must not be negative")

        if not 1 <= self.processing.max_workers <= ProcessingConstants.MAX_WORKERS_LIMIT:
            errors.append(
                f"processing.max_workers must be between 1 and {ProcessingConstants.MAX_WORKERS_LIMIT}"
            )

        if self.processing.default_scan_method not in get_enum_values(ScanMethod):
            errors.append(f"Invalid scan method: {self.processing.default_scan_method}")

        for extension in self.processing.extensions:
            if not extension.startswith('.'):
                errors.append(f"Extension must start with '.': {extension}")

        if self.logging.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {self.logging.log_level}")

        if self.logging.log_file_max_size <= 0:
            errors.append("logging.log_file_max_size must be greater than 0")

        return len(errors) == 0, errors

    def get_scan_config(self) -> Dict[str, Any]:
        """Scan parameters as keyword arguments for the orchestrator"""
        return asdict(self.scan)


# Global configuration instance
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """Global application configuration"""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig.load()
    return _app_config


def reload_app_config():
    """Reload the configuration"""
    global _app_config
    _app_config = AppConfig.load()


def save_app_config() -> bool:
    """Save the current configuration"""
    if _app_config is not None:
        return _app_config.save()
    return False

"""Configuration loading and validation for ytfinder."""

import os
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
from pathlib import Path
from dotenv import load_dotenv
from rich.logging import RichHandler

# Get the project root directory (parent of src)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Load environment variables from .env file in project root
load_dotenv(PROJECT_ROOT / '.env')

DEFAULT_RETRY_COUNT = 5
DEFAULT_RETRY_DELAY = 0.5
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)


class ConfigError(ValueError):
    """Raised when search configuration is invalid."""
    pass


def _env_number(name: str, convert: Callable, default):
    """Read a numeric environment variable, naming it in the error if malformed."""
    value = os.getenv(name)
    if not value:
        return default
    try:
        return convert(value)
    except ValueError:
        raise ConfigError(f"{name} must be a {convert.__name__}, got {value!r}") from None


def load_config() -> Dict:
    """Load configuration from environment variables.

    Raises:
        ConfigError: If a numeric variable cannot be parsed
    """
    config = {
        # Fetch settings
        'retry_count': _env_number('YT_FINDER_RETRY_COUNT', int, DEFAULT_RETRY_COUNT),
        'retry_delay': _env_number('YT_FINDER_RETRY_DELAY', float, DEFAULT_RETRY_DELAY),
        'timeout': _env_number('YT_FINDER_TIMEOUT', float, DEFAULT_TIMEOUT),
        'user_agent': os.getenv('YT_FINDER_USER_AGENT', DEFAULT_USER_AGENT),

        # Search settings
        'max_results': _env_number('YT_FINDER_MAX_RESULTS', int, None),
        'language': os.getenv('YT_FINDER_LANGUAGE'),
        'region': os.getenv('YT_FINDER_REGION'),

        # Logging
        'log_level': os.getenv('YT_FINDER_LOG_LEVEL', 'INFO'),
        'log_file': os.getenv('YT_FINDER_LOG_FILE'),
    }

    return config


def validate_config(config: Dict) -> List[str]:
    """Validate configuration and return list of errors."""
    errors = []

    retry_count = config.get('retry_count')
    if not isinstance(retry_count, int) or retry_count < 1:
        errors.append(f"retry_count must be a positive integer, got {retry_count!r}")

    retry_delay = config.get('retry_delay')
    if not isinstance(retry_delay, (int, float)) or retry_delay < 0:
        errors.append(f"retry_delay must be a non-negative number, got {retry_delay!r}")

    timeout = config.get('timeout')
    if timeout is not None and (not isinstance(timeout, (int, float)) or timeout <= 0):
        errors.append(f"timeout must be a positive number, got {timeout!r}")

    max_results = config.get('max_results')
    if max_results is not None and (not isinstance(max_results, int) or max_results < 1):
        errors.append(f"max_results must be a positive integer, got {max_results!r}")

    return errors


@dataclass(frozen=True)
class SearchConfig:
    """Settings for a single search call."""

    max_results: Optional[int] = None
    language: Optional[str] = None  # accepted, not sent with the request
    region: Optional[str] = None  # accepted, not sent with the request
    retry_count: int = DEFAULT_RETRY_COUNT
    retry_delay: float = DEFAULT_RETRY_DELAY
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_config(cls, config: Optional[Dict] = None, **overrides) -> 'SearchConfig':
        """Build search settings from a config dict, letting non-None overrides win.

        Raises:
            ConfigError: If the merged settings are invalid
        """
        merged = dict(config if config is not None else load_config())
        merged.update({key: value for key, value in overrides.items() if value is not None})

        config_errors = validate_config(merged)
        if config_errors:
            raise ConfigError("Configuration errors: " + "; ".join(config_errors))

        return cls(
            max_results=merged.get('max_results'),
            language=merged.get('language'),
            region=merged.get('region'),
            retry_count=merged['retry_count'],
            retry_delay=merged['retry_delay'],
            timeout=merged.get('timeout') or DEFAULT_TIMEOUT,
            user_agent=merged.get('user_agent') or DEFAULT_USER_AGENT,
        )


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Set up logging with Rich console output and an optional plain log file.

    Raises:
        ConfigError: If log_level is not one of LOG_LEVELS
    """
    level_name = log_level.upper()
    if level_name not in LOG_LEVELS:
        raise ConfigError(f"log level must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    # Clear any existing handlers
    logging.root.handlers.clear()

    rich_handler = RichHandler(
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False  # Disable markup to avoid conflicts
    )
    handlers: List[logging.Handler] = [rich_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, level_name),
        handlers=handlers,
        format="%(message)s"
    )

    # Suppress noisy third-party loggers
    for logger_name in ('httpx', 'httpcore'):
        logging.getLogger(logger_name).setLevel(logging.WARNING)

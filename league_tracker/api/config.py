"""Configuration module for the League tracker.

This module handles configuration loading from the environment (and an
optional .env file), API key validation, routing constants and logging setup.
"""

import os
import logging
from pathlib import Path
from typing import Dict
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Configuration for API access, caching and lookups.

    Attributes:
        api_key (str): Validated API key for Riot API access
        platform (str): Platform routing value (e.g. na1, euw1)
        session_timeout (float): HTTP timeout in seconds
        cache_ttl (float): Response cache lifetime in seconds, 0 disables
        recent_match_count (int): Matches fetched per lookup
    """

    def __init__(self) -> None:
        """Initialize configuration from the environment.

        Raises:
            ValueError: If no valid API key is found or validation fails
        """
        self.api_key = os.getenv('RIOT_API_KEY')

        self.platform = os.getenv('RIOT_PLATFORM', DEFAULT_PLATFORM).lower()
        self.session_timeout = float(os.getenv('SESSION_TIMEOUT', '10'))
        self.cache_ttl = float(os.getenv('CACHE_TTL', '120'))
        self.recent_match_count = int(os.getenv('RECENT_MATCH_COUNT', '0'))
        self.min_api_key_length = int(os.getenv('MIN_API_KEY_LENGTH', '20'))

        if not self.api_key:
            raise ValueError(
                "No valid API key found. Please set RIOT_API_KEY in your environment or .env file"
            )

        self._validate_api_key()

        # Never log the key itself
        logging.getLogger(__name__).info("Configuration loaded successfully")

    def _validate_api_key(self) -> None:
        """Validate API key format.

        Raises:
            ValueError: If API key format is invalid
        """
        if len(self.api_key) < self.min_api_key_length:
            raise ValueError(f"API key appears too short to be valid (minimum {self.min_api_key_length} characters)")

        if self.api_key.lower() in PLACEHOLDER_KEYS:
            raise ValueError("Please set a real API key")

    @property
    def account_routing(self) -> str:
        """Regional route serving the account (Riot ID) endpoint."""
        return account_routing_for(self.platform)

    @property
    def headers(self) -> Dict[str, str]:
        """Return headers for API requests.

        Returns:
            Dictionary containing request headers with API key
        """
        return {
            "X-Riot-Token": self.api_key,
            "User-Agent": "LeagueTracker/1.0",
            "Accept": "application/json"
        }


DEFAULT_PLATFORM = "na1"

PLACEHOLDER_KEYS = ['your_api_key_here', 'fake_key', 'test_key']

API_HOST = "https://{host}.api.riotgames.com"

# Platform to regional routing mappings
REGIONAL_ROUTING = {
    'na1': 'americas',
    'br1': 'americas',
    'la1': 'americas',
    'la2': 'americas',
    'euw1': 'europe',
    'eun1': 'europe',
    'tr1': 'europe',
    'ru': 'europe',
    'kr': 'asia',
    'jp1': 'asia',
    'oc1': 'sea',
    'ph2': 'sea',
    'sg2': 'sea',
    'th2': 'sea',
    'tw2': 'sea',
    'vn2': 'sea',
}

# account-v1 is not served from sea; those platforms resolve Riot IDs through asia
ACCOUNT_ROUTING = {
    'americas': 'americas',
    'europe': 'europe',
    'asia': 'asia',
    'sea': 'asia',
}

SOLO_QUEUE = "RANKED_SOLO_5x5"
FLEX_QUEUE = "RANKED_FLEX_SR"

QUEUE_NAMES = {
    SOLO_QUEUE: "Solo/Duo",
    FLEX_QUEUE: "Flex",
}

RATE_LIMITED_MESSAGE = "Rate limit exceeded. Please try again later."


def routing_for(platform: str) -> str:
    """Return the regional route for a platform, defaulting to americas."""
    return REGIONAL_ROUTING.get(platform.lower(), 'americas')


def account_routing_for(platform: str) -> str:
    """Return the regional route serving account lookups for a platform."""
    return ACCOUNT_ROUTING[routing_for(platform)]


# Logging configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'league_tracker.log'


class SensitiveDataFilter(logging.Filter):
    """Filter that masks API keys in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str) and 'RGAPI-' in record.getMessage():
            record.msg = '[SENSITIVE DATA FILTERED]'
            record.args = ()
        return True


def setup_logging(level: str = LOG_LEVEL, log_file: str = LOG_FILE) -> logging.Logger:
    """Setup logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path of the log file, appended to

    Returns:
        Configured logger instance
    """
    valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    if level.upper() not in valid_levels:
        level = 'INFO'

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(Path(log_file), mode='a', encoding='utf-8')
        ]
    )

    logger = logging.getLogger()
    for handler in logger.handlers:
        if not any(isinstance(f, SensitiveDataFilter) for f in handler.filters):
            handler.addFilter(SensitiveDataFilter())

    return logging.getLogger(__name__)

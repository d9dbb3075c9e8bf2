"""API module for Riot Games API integration.

This module provides configuration, logging setup and the HTTP client used
to query player data from the Riot Games API.
"""

from .config import Config, setup_logging
from .riot_api import RiotAPIClient, RiotAPIError

__all__ = ['Config', 'setup_logging', 'RiotAPIClient', 'RiotAPIError']

"""UI state module for the League tracker.

This module provides the immutable page state values and the Tracker page
controller.
"""

from .state import AppState, ChampionsState, Page, TrackerState
from .tracker import TrackerController

__all__ = ['AppState', 'ChampionsState', 'Page', 'TrackerState', 'TrackerController']

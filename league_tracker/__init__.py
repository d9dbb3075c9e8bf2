"""League Tracker Package.

A small League of Legends dashboard: a champion browser with search, role
filter and sort, and a player tracker backed by the Riot Games API.
"""

__version__ = "1.0.0"
__author__ = "League Tracker Development Team"

"""
Pin Map API

A map-based content browser: geolocated pins with tags, an optional
region boundary and admin-configurable display settings.
"""

__version__ = "1.0.0"

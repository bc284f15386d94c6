"""
gcp_launcher - layered configuration and provider bootstrap for Google Cloud Platform

Loads the shipped defaults merged with an optional user google.conf and
creates authenticated provider instances from validated credentials.
"""

__version__ = "1.0.0"

from .framework import Launcher
from .plugins.google import GoogleLauncher, GoogleCloudProvider

__all__ = [
    "Launcher",
    "GoogleLauncher",
    "GoogleCloudProvider",
]

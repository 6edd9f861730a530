"""osproj — active-project wrapper around the OpenStack command-line client."""

__version__ = "0.1.0"

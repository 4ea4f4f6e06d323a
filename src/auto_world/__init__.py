"""Auto World: login and vehicle listing submission client."""

__version__ = "0.1.0"

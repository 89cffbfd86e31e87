"""casework — case study content store for the Pinnacle marketing site."""

__version__ = "0.1.0"

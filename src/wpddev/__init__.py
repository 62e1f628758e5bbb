"""wpddev - local WordPress setup wizard on top of DDEV."""

__version__ = "1.0.0"

"""ionkit — resolve which kind of project a workspace is."""

__version__ = "0.1.0"

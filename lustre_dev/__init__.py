"""Development tooling for previewing Lustre applications."""

__version__ = "0.1.0"

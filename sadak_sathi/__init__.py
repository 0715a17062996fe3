"""Sadak Sathi - road and bridge status dashboard for Nepal."""

__version__ = "0.1.0"

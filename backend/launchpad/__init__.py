"""Confidential token and presale launchpad backend."""

__version__ = "1.0.0"

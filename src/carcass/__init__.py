"""Carcass designer - panel layout and space partitioning for furniture carcasses."""

__version__ = "0.1.0"

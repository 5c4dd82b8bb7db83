"""Command-line interface for carcass designs."""

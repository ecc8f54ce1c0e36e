"""Command-line surface of the installer."""

"""Concrete adapters: HTTP download and subprocess execution."""

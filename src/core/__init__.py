"""Installer core: configuration, domain, contracts and services."""

"""Installer application services."""

"""
Installer application.

Serves the setup wizard's language selection step and theme helpers.
"""

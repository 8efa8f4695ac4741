"""Installer and updater for the Town of Us Mira Among Us mod."""

__version__ = "1.2.0"

"""Utility modules for the mod updater."""

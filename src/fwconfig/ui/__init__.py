"""Textual widgets and screens for the configurator."""

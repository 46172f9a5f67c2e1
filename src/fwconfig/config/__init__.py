"""Configuration management for the Friend Watch Configurator."""
# Created: 2026-10-19

from .settings import Settings, load_settings, save_settings

__all__ = ['Settings', 'load_settings', 'save_settings']

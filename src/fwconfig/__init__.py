"""Friend Watch Configurator.

Terminal editor for SwitchFriendWatch settings files.
"""
# Created: 2026-10-19

__version__ = "0.1.0"

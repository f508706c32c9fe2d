"""Shard administration helpers: settings store, data file readers, INI loader, log and commands."""

__version__ = "0.1.0"
__all__ = ["axislog", "commands", "registry", "mulfiles", "inifile", "destination", "window"]
"""Application framework helpers: app info, configuration, logging, localization, directories, IPC, file watching and web requests."""

__version__ = "0.1.0"
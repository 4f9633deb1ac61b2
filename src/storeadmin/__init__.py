"""storeadmin - permission and notification core of the store admin console."""

__version__ = "0.1.0"

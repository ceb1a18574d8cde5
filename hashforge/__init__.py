"""HashForge Lab: an educational hash pipeline sandbox."""

__version__ = "0.1.0"

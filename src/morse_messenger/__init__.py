"""Morse Messenger: consent-gated messaging with Morse-encoded bodies."""

__version__ = "0.1.0"

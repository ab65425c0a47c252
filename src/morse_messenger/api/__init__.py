"""HTTP API for Morse Messenger."""

"""Core primitives: settings, Morse codec, credentials and domain errors."""

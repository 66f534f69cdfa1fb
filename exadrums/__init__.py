"""Sounds, a sound bank, a mixer, WAV headers and sound card settings for an electronic drum module."""

__version__ = "0.9.0"
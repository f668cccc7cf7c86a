"""personal-assistant -- chat with an OpenAI-compatible model through a small HTTP backend."""

__version__ = '0.1.0'

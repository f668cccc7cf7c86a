"""Textual apps — ChatApp is the presentation client."""

from personal_assistant.l4_frameworks_and_drivers.apps.chat import ChatApp

__all__ = ['ChatApp']

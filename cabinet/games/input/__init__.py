"""
Input abstraction layer for cabinet games.

Provides unified input handling that works identically with the pygame
window or scripted event sources.
"""

from cabinet.games.input.input_event import InputEvent
from cabinet.games.input.input_manager import InputManager
from cabinet.games.input.input_state import InputState

__all__ = ['InputEvent', 'InputManager', 'InputState']

"""
Input source implementations.
"""

from cabinet.games.input.sources.base import InputSource, ScriptedInputSource
from cabinet.games.input.sources.pygame_source import PygameInputSource

__all__ = ['InputSource', 'ScriptedInputSource', 'PygameInputSource']

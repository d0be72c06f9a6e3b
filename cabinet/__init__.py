"""
Game cabinet platform.

Shared building blocks for the mini-games under ``games/``:
- simulation: entity records, spawner, stepper, collision resolver, frame clock
- ai: minimax move selection
- games: BaseGame, SimulationGame, input, level loading, drawing helpers
- timers: cancellable one-shot tasks
- storage: best-score persistence
- config, logging: ambient configuration and per-module logging
"""

__version__ = "1.0.0"

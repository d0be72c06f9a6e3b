"""
NinjaRunner - Game info.

Side-scrolling runner, announced in the cabinet menu but not playable yet.
The registry lists it from this module alone; a get_game_mode() factory
will make it playable.
"""

NAME = "Ninja Runner"
DESCRIPTION = "Run, jump and slide across the rooftops. Coming soon!"
VERSION = "0.1.0"
AUTHOR = "Cabinet Team"

COMING_SOON = True

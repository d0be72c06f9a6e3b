"""Cabinet mini-games, discovered by games.registry."""

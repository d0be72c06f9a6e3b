#!/usr/bin/env python3
"""
Development Game Launcher

Runs any registered cabinet game in a pygame window with mouse and
keyboard input.

Uses the game registry for auto-discovery. Game-specific arguments are
dynamically loaded from each game's ARGUMENTS list.

Usage:
    # List available games
    python dev_game.py --list

    # Play a game
    python dev_game.py spaceadventure
    python dev_game.py racingthunder --track 2
    python dev_game.py puzzlemaster --size 4 --seed 7

    # See game-specific options
    python dev_game.py towerdefensepro --help
"""

import argparse
import os
import sys

import pygame

# Ensure project root is on path
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from cabinet.games import GameState
from cabinet.games.input import InputManager
from cabinet.games.input.sources.pygame_source import PygameInputSource
from cabinet.logging import get_logger
from games.registry import get_registry
from models import EventType

log = get_logger('dev_game')

FPS = 60
DEFAULT_FIELD = (800, 600)

# Launcher keys, handled before the game sees them
QUIT_KEY = 'escape'
RESTART_KEY = 'r'


def build_parser(registry, game_slug):
    """Argument parser with the launcher options plus the game's own."""
    available_games = registry.list_games()

    parser = argparse.ArgumentParser(
        description='Development Game Launcher - play cabinet games in a window',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available games: {', '.join(available_games)}

Examples:
  python dev_game.py --list              # List available games
  python dev_game.py snakeclassic        # Play Snake Classic
  python dev_game.py racingthunder --track 1
  python dev_game.py <game> --help       # See game-specific options
        """
    )

    parser.add_argument(
        'game',
        nargs='?',
        choices=available_games,
        help='Game to play'
    )

    parser.add_argument(
        '--list', '-l',
        action='store_true',
        help='List all available games and exit'
    )

    parser.add_argument(
        '--fullscreen', '-f',
        action='store_true',
        help='Run in fullscreen mode (play field centered)'
    )

    if game_slug:
        for arg_def in registry.get_game_arguments(game_slug):
            kwargs = {}
            if 'type' in arg_def:
                kwargs['type'] = arg_def['type']
            if 'default' in arg_def:
                kwargs['default'] = arg_def['default']
            if 'help' in arg_def:
                kwargs['help'] = arg_def['help']
            if 'action' in arg_def:
                kwargs['action'] = arg_def['action']
                kwargs.pop('type', None)  # action and type are mutually exclusive
            if 'choices' in arg_def:
                kwargs['choices'] = arg_def['choices']
            parser.add_argument(arg_def['name'], **kwargs)

    return parser


def print_game_list(registry):
    print("\nAvailable Games")
    print("=" * 50)
    for slug in registry.list_games():
        info = registry.get_game_info(slug)
        if info is None:
            continue
        print(f"\n  {slug}{'' if info.playable else '  (coming soon)'}")
        print(f"    Name: {info.name}")
        print(f"    Description: {info.description}")
        print(f"    Version: {info.version}")

        game_args = registry.get_game_arguments(slug)
        if game_args:
            arg_names = [a['name'] for a in game_args]
            print(f"    Options: {', '.join(arg_names)}")
    print()


def main():
    """Main entry point for the development game launcher."""
    registry = get_registry()

    # Phase 1: Parse just enough to identify the game
    # Use parse_known_args to allow unknown game-specific args through
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument('game', nargs='?', choices=registry.list_games())
    pre_parser.add_argument('--list', '-l', action='store_true')
    pre_args, _ = pre_parser.parse_known_args()

    # Phase 2: Full parser with game-specific arguments
    parser = build_parser(registry, pre_args.game)
    args = parser.parse_args()

    if args.list:
        print_game_list(registry)
        return 0

    if args.game is None:
        parser.print_help()
        return 1

    game_info = registry.get_game_info(args.game)
    if not game_info.playable:
        print(f"{game_info.name} is coming soon - not playable yet.")
        return 1

    skip_args = {'game', 'list', 'fullscreen'}
    game_kwargs = {
        k: v for k, v in vars(args).items()
        if k not in skip_args and v is not None
    }

    try:
        game = registry.create_game(args.game, **game_kwargs)
    except Exception as e:
        log.exception("Failed to create %s: %s", args.game, e)
        return 1

    field_width, field_height = game_info.field_size or DEFAULT_FIELD

    pygame.init()
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((field_width, field_height))
    offset = (
        max(0, (screen.get_width() - field_width) // 2),
        max(0, (screen.get_height() - field_height) // 2),
    )
    field = pygame.Surface((field_width, field_height))

    pygame.display.set_caption(f"{game_info.name} - Game Cabinet")
    print("=" * 60)
    print(f"{game_info.name}")
    print("=" * 60)
    if game_kwargs:
        print("Game options:")
        for k, v in game_kwargs.items():
            print(f"  --{k.replace('_', '-')}: {v}")
    print("Controls: game keys / mouse, R to restart, ESC to quit")
    print("=" * 60)

    input_manager = InputManager(PygameInputSource(offset=offset))

    clock = pygame.time.Clock()
    running = True
    last_state = game.state

    while running:
        dt = clock.tick(FPS) / 1000.0

        input_manager.update(dt)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        game_events = []
        for event in input_manager.get_events():
            if event.event_type == EventType.KEY_DOWN and event.key == QUIT_KEY:
                running = False
            elif event.event_type == EventType.KEY_DOWN and event.key == RESTART_KEY:
                game.reset()
                log.info("Restarted %s", game_info.name)
            else:
                game_events.append(event)

        game.handle_input(game_events)
        game.update(dt)

        field.fill((0, 0, 0))
        game.render(field)
        screen.fill((0, 0, 0))
        screen.blit(field, offset)
        pygame.display.flip()

        state = game.state
        if state != last_state and state.is_terminal:
            print("YOU WIN!" if state == GameState.WON else "GAME OVER!")
            print(f"Final Score: {game.get_score()}  (R to restart, ESC to quit)")
        last_state = state

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())

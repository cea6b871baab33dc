#!/usr/bin/env python3
"""HeartCatch - Standalone entry point.

Catch falling hearts with the basket using the arrow keys (or A/D), the
mouse or a finger. Space starts, R restarts, Escape quits.

Usage:
    love-catch
    love-catch --resolution 1920x1080 --lives 5
    love-catch --spawn-floor 200 --seed 42
"""
import argparse
import os
import sys
from typing import List, Optional

import pygame

# Add project root to path
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from models import Resolution
from games.HeartCatch import config
from games.HeartCatch.game_mode import HeartCatchMode
from lovecatch.games.input import InputManager
from lovecatch.games.input.sources import PygameInputSource
from lovecatch.logging import get_logger

log = get_logger('main')

# Launcher arguments that are not passed through to the game
_LAUNCHER_ARGS = {'resolution', 'fullscreen'}


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser from the game's declared arguments."""
    parser = argparse.ArgumentParser(
        description=f"{HeartCatchMode.NAME} - {HeartCatchMode.DESCRIPTION}",
    )
    parser.add_argument(
        '--resolution', '-r',
        type=Resolution.parse,
        default=Resolution(width=config.SCREEN_WIDTH, height=config.SCREEN_HEIGHT),
        help=f'Window resolution as WIDTHxHEIGHT (default: {config.SCREEN_WIDTH}x{config.SCREEN_HEIGHT})'
    )
    parser.add_argument(
        '--fullscreen', '-f',
        action='store_true',
        help='Run in fullscreen mode'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f"%(prog)s {HeartCatchMode.VERSION}"
    )

    for arg_def in HeartCatchMode.get_arguments():
        kwargs = {k: v for k, v in arg_def.items() if k != 'name'}
        if 'action' in kwargs:
            kwargs.pop('type', None)  # action and type are mutually exclusive
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def game_kwargs(args: argparse.Namespace) -> dict:
    """Game constructor arguments from parsed CLI arguments."""
    return {k: v for k, v in vars(args).items() if k not in _LAUNCHER_ARGS}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    pygame.init()
    flags = pygame.RESIZABLE if config.RESIZABLE else 0
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((args.resolution.width, args.resolution.height), flags)
    pygame.display.set_caption(HeartCatchMode.NAME)
    width, height = screen.get_size()
    log.info("display %dx%d", width, height)

    try:
        game = HeartCatchMode(width=width, height=height, **game_kwargs(args))
        source = PygameInputSource(width, height)
        input_manager = InputManager(source)
        clock = pygame.time.Clock()

        running = True
        while running:
            dt = clock.tick(config.FPS) / 1000.0
            input_manager.update(dt)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    game.reset()
                elif event.type == pygame.VIDEORESIZE:
                    width, height = event.w, event.h
                    if not args.fullscreen:
                        screen = pygame.display.set_mode((width, height), flags)
                    game.resize(width, height)
                    source.set_screen_size(width, height)
                elif event.type == pygame.WINDOWFOCUSLOST:
                    game.release_input()
                    source.release()

            game.handle_input(input_manager.get_events())
            game.update(dt)
            game.render(screen)
            pygame.display.flip()
    except Exception:
        log.exception("game loop failed")
        raise
    finally:
        pygame.quit()

    log.info("session over: %d games, best %d%%", game.games_played, game.best_score)
    return 0


if __name__ == "__main__":
    sys.exit(main())

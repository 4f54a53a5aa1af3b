#!/usr/bin/env python3
"""NeonBreak - Standalone Entry Point.

Usage:
    neonbreak
    neonbreak --config mygame.yaml
    neonbreak --width 800 --height 500 --skin flat
    python -m neonbreak.main --log-level DEBUG
"""

import argparse
import sys
from typing import List, Optional

import pygame

from .config import ConfigError, load_config
from .game_mode import BreakoutGame
from .highscore import HighScoreStore
from .input import InputTracker, KeyboardInputSource
from .logging import (
    close_all_sinks,
    configure_logging,
    create_sink_for_environment,
    get_logger,
    register_sink,
)

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Command line options."""
    parser = argparse.ArgumentParser(description="NeonBreak - Breakout with levels")

    # Display options
    parser.add_argument('--width', type=int, default=None, help='Screen width')
    parser.add_argument('--height', type=int, default=None, help='Screen height')
    parser.add_argument('--fps', type=int, default=None, help='Frames per second')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')

    # Game options
    parser.add_argument('--config', type=str, default=None,
                        help='YAML file with game settings')
    parser.add_argument('--highscore-file', type=str, default=None,
                        help='Where the best score is kept')
    parser.add_argument('--skin', type=str, default='neon',
                        choices=sorted(BreakoutGame.SKINS),
                        help='Visual skin')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Default log level')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run NeonBreak standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        config = load_config(
            args.config,
            overrides={'width': args.width, 'height': args.height, 'fps': args.fps},
        )
    except ConfigError as e:
        log.error("%s", e)
        return 2

    register_sink('session', create_sink_for_environment('session'))

    pygame.init()
    pygame.font.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((config.width, config.height),
                                         pygame.FULLSCREEN | pygame.SCALED)
    else:
        screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption(BreakoutGame.NAME)

    game = BreakoutGame(
        config=config,
        high_scores=HighScoreStore(args.highscore_file),
        skin=args.skin,
    )
    tracker = InputTracker(KeyboardInputSource())

    clock = pygame.time.Clock()
    running = True

    print("\n" + "=" * 50)
    print("NEONBREAK")
    print("=" * 50)
    print("Controls:")
    print("  - Left/Right arrows move the paddle")
    print("  - Click Restart (or press R / Enter) after game over")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    try:
        while running:
            clock.tick(config.fps)

            for event in pygame.event.get():
                if tracker.handle_event(event):
                    continue
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.WINDOWFOCUSLOST:
                    tracker.clear()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in (pygame.K_r, pygame.K_RETURN) and game.restart_visible:
                        game.init()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.handle_click(event.pos)

            game.step(tracker.state())

            game.render(screen)
            pygame.display.flip()
    finally:
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())

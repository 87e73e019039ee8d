import argparse
import logging
import sys

import pygame

from blockfall_config import CONFIG, DIFFICULTIES
from blockfall_game import Game
from blockfall_highscore import JsonHighScoreStore
from blockfall_input import command_for
from blockfall_overlay import Overlay, Menu, draw_banner
from blockfall_render import RenderAssets, compute_dims

log = logging.getLogger("blockfall")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Blockfall falling-block puzzle")
    p.add_argument("--level", type=int, help="speed level 1-10 (default: 1)")
    p.add_argument("--interval-ms", type=int, help="fixed drop interval in ms, floor 50")
    p.add_argument("--no-ghost", action="store_true", help="hide the landing preview")
    p.add_argument("--difficulty", choices=sorted(DIFFICULTIES), help="skip the menu and start a preset")
    p.add_argument("--seed", type=int, help="seed for the piece bag")
    p.add_argument("--highscore-file", help=f"default: {CONFIG['HIGHSCORE_FILE']}")
    p.add_argument("--log-level", default=CONFIG["LOG_LEVEL"], help="logging level (default: WARNING)")
    return p.parse_args(argv)


def apply_args(args):
    if args.level is not None: CONFIG["SPEED_LEVEL"] = args.level
    if args.interval_ms is not None: CONFIG["FALL_INTERVAL_MS"] = args.interval_ms
    if args.no_ghost: CONFIG["SHOW_GHOST"] = False
    if args.seed is not None: CONFIG["BAG_SEED"] = args.seed
    if args.highscore_file: CONFIG["HIGHSCORE_FILE"] = args.highscore_file
    CONFIG["LOG_LEVEL"] = args.log_level.upper()


def start(game, difficulty=None):
    if difficulty:
        game.apply_difficulty(difficulty)
        CONFIG["SPEED_LEVEL"] = game.speed.level
        CONFIG["SHOW_GHOST"] = game.show_ghost
    else:
        game.new_game()
    if CONFIG["FALL_INTERVAL_MS"]:
        game.set_fall_interval_ms(CONFIG["FALL_INTERVAL_MS"])


def main(argv=None):
    args = parse_args(argv)
    apply_args(args)
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    try:
        screen = pygame.display.set_mode((dims.total_w, dims.total_h), pygame.DOUBLEBUF, vsync=1)
    except TypeError:
        screen = pygame.display.set_mode((dims.total_w, dims.total_h), pygame.DOUBLEBUF)
    pygame.display.set_caption("Blockfall")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    game = Game(store=JsonHighScoreStore(),
                on_game_over=lambda s: log.info("game over with %d points", s),
                on_lines_cleared=lambda n: render.start_flash())
    overlay = Overlay(game)
    menu = Menu()

    if args.difficulty:
        start(game, args.difficulty)

    while True:
        dt = clock.tick(CONFIG["TARGET_FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type != pygame.KEYDOWN:
                continue
            if not game.started:
                choice = menu.handle(e)
                if choice: start(game, choice)
                continue
            if e.key == pygame.K_F1:
                overlay.toggle(); continue
            if overlay.active:
                overlay.handle(e); continue
            if e.key == pygame.K_r:
                start(game); continue
            if e.key == pygame.K_m:
                game.back_to_menu(); continue
            if e.key == pygame.K_g:
                CONFIG["SHOW_GHOST"] = game.toggle_ghost(); continue
            cmd = command_for(e.key, game.paused)
            if cmd is not None:
                game.dispatch(cmd)

        if not overlay.active:
            game.tick(dt)

        snap = game.snapshot()
        render.draw_frame(screen, snap)
        render.draw_flash(screen, dt)
        if not snap.started:
            menu.draw(screen, font, big_font, dims.total_w, dims.total_h, snap.high_score)
        elif snap.game_over:
            draw_banner(screen, big_font, font, dims.board_x * 2 + dims.board_w, dims.total_h,
                        "Game Over", f"Score {snap.score} • R to restart • M for menu")
        elif snap.paused:
            draw_banner(screen, big_font, font, dims.board_x * 2 + dims.board_w, dims.total_h,
                        "Paused", "P to resume")
        overlay.draw(screen, font, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()

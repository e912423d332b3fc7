# main.py
import argparse
import logging
from typing import List, Optional

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, Config, Difficulty
from .food import FoodPlacer
from .render import draw_frame
from .session import GameSession
from .sound import NullSoundSink, PygameSoundSink
from .store import MemoryScoreStore, ScoreStore

logger = logging.getLogger(__name__)

FPS = 60


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake.")
    parser.add_argument(
        "--difficulty",
        type=str,
        default=Difficulty.NORMAL.name.lower(),
        choices=[d.name.lower() for d in Difficulty],
        help="Starting difficulty (can be changed between games with keys 1-4).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--scores",
        type=str,
        default=None,
        help="High score file (default: $SNAKEGAME_SCORES or ~/.snakegame/scores.json).",
    )
    parser.add_argument("--no-persist", action="store_true", help="Keep the high score in memory only.")
    parser.add_argument("--mute", action="store_true", help="Start with sound off.")
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    parser.add_argument("--log-file", default=None, help="Optional log file path.")
    parser.add_argument("--quiet", action="store_true", help="Silence console logs.")
    return parser.parse_args(argv)


def _setup_logging(*, level: str, log_file: Optional[str], quiet: bool) -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger_root = logging.getLogger()
    logger_root.handlers.clear()
    logger_root.setLevel(numeric_level)
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        logger_root.addHandler(file_handler)
    if not quiet:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(numeric_level)
        stream_handler.setFormatter(fmt)
        logger_root.addHandler(stream_handler)


def build_session(args: argparse.Namespace, sound=None) -> GameSession:
    cfg = Config(difficulty=Difficulty.from_name(args.difficulty))
    if args.no_persist:
        store = MemoryScoreStore()
    else:
        store = ScoreStore(args.scores)
    session = GameSession(
        cfg=cfg,
        store=store,
        sound=sound if sound is not None else NullSoundSink(),
        placer=FoodPlacer.seeded(args.seed, cfg.board_size),
        time_source=pygame.time.get_ticks,
    )
    if args.mute:
        session.toggle_sound()
    return session


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    _setup_logging(level=args.log_level, log_file=args.log_file, quiet=args.quiet)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    session = build_session(args, sound=PygameSoundSink())

    try:
        while not session.quit_requested:
            # 1) input; Space never reaches anything but the session
            for event in pygame.event.get():
                intent = session.mapper.map_event(event)
                if intent is not None:
                    session.submit(intent)

            # 2) update; movement gated by the tick clock
            session.poll()

            # 3) render
            draw_frame(screen, font, session.snapshot())
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        logger.info("Bye. Best score: %d", session.high_score)
        pygame.quit()


if __name__ == "__main__":
    main()

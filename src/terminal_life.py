import argparse
import sys
import time

from game_of_life import DELAY_MS, GameOfLife

LIVE_CELL = "#"
DEAD_CELL = "."
CLEAR_SCREEN = "\033[H\033[J"  # cursor home, then clear
TITLE = "Game of Life - Current Generation:"
SEPARATOR = "-" * 32


def render_frame(board, generation):
    lines = [CLEAR_SCREEN + TITLE, SEPARATOR]
    for row in board:
        lines.append(''.join(f"{LIVE_CELL if c else DEAD_CELL} " for c in row))
    lines.append(SEPARATOR)
    lines.append(f"Generation: {generation}")
    return '\n'.join(lines) + '\n'


def display(board, generation, stream=None):
    """Print the grid to the console, overwriting the previous frame."""
    stream = stream or sys.stdout
    stream.write(render_frame(board, generation))
    stream.flush()


def run(game, generations=None, delay_ms=DELAY_MS, stream=None, sleep=time.sleep):
    """Render, evolve and pause until `generations` frames are shown (forever if None)."""
    if generations is not None and generations < 0:
        raise ValueError(f"generations must be non-negative, got {generations}")
    if delay_ms < 0:
        raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")

    shown = 0
    while generations is None or shown < generations:
        display(game.grid, game.generation, stream)
        game.step()
        shown += 1
        sleep(delay_ms / 1000)
    return game.generation


def _parse_args(argv=None):
    p = argparse.ArgumentParser(description="Conway's Game of Life on a 16x16 terminal board")
    p.add_argument("--generations", type=int, default=None,
                   help="stop after this many generations (default: run forever)")
    p.add_argument("--delay-ms", type=int, default=DELAY_MS,
                   help="pause between generations in milliseconds")
    return p.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)
    game = GameOfLife()
    try:
        run(game, generations=args.generations, delay_ms=args.delay_ms)
    except KeyboardInterrupt:
        print(f"\n👋 Interrupted at generation {game.generation} ({game.count_alive()} live cells).")
    return 0


if __name__ == "__main__":
    sys.exit(main())

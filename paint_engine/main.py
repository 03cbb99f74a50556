import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'paint_engine' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Paint Engine: stepped flood fill and one-stroke puzzle demos")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Flood Fill Command
    flood_parser = subparsers.add_parser("flood", help="Open the stepped flood fill demo")
    flood_parser.add_argument("--width", type=int, default=8, help="Grid Width")
    flood_parser.add_argument("--height", type=int, default=8, help="Grid Height")
    flood_parser.add_argument("--interval", type=float, default=0.15, help="Seconds per step (0.02 - 0.80)")
    flood_parser.add_argument("--seed", type=int, default=None, help="Random Seed (region colours)")
    flood_parser.add_argument("--record", action="store_true", help="Record the session to video")

    # Puzzle Command
    puzzle_parser = subparsers.add_parser("puzzle", help="Play the one-stroke sliding puzzle")
    add_board_args(puzzle_parser)
    puzzle_parser.add_argument("--record", action="store_true", help="Record the session to video")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate boards headless and print them")
    add_board_args(gen_parser)
    gen_parser.add_argument("--count", type=int, default=1, help="Number of boards")
    gen_parser.add_argument("--solve", action="store_true", help="Also print the unique solution")

    return parser

def add_board_args(parser: argparse.ArgumentParser):
    parser.add_argument("--width", type=int, default=6, help="Board Width")
    parser.add_argument("--height", type=int, default=6, help="Board Height")
    parser.add_argument("--cover", type=float, default=0.72, help="Minimum non-wall ratio (0.0 - 1.0]")
    parser.add_argument("--tries", type=int, default=1_000_000, help="Maximum generation attempts")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")

def puzzle_config(args):
    from paint_engine.config import PuzzleConfig
    return PuzzleConfig(width=args.width, height=args.height, min_cover_ratio=args.cover,
                        max_reseed_tries=args.tries, seed=args.seed)

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("paint_engine")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")
    from paint_engine.core.errors import GenerationExhausted

    try:
        if args.command == "flood":
            from paint_engine.config import FloodFillConfig
            from paint_engine.core.session import FloodFillSession
            from paint_engine.viz.flood_renderer import FloodFillRenderer

            config = FloodFillConfig(width=args.width, height=args.height,
                                     step_interval=args.interval, seed=args.seed)
            session = FloodFillSession(config)
            renderer = FloodFillRenderer(session, record=args.record)
            if args.record:
                logger.info(f"Recording video to {renderer.recorder.output_file}")
            renderer.init_window()
            renderer.run_loop()

        elif args.command == "puzzle":
            from paint_engine.core.session import PuzzleSession
            from paint_engine.viz.puzzle_renderer import PuzzleRenderer

            session = PuzzleSession(puzzle_config(args))
            logger.info(f"Generating {args.width}x{args.height} board (cover >= {args.cover})...")
            session.regenerate()
            renderer = PuzzleRenderer(session, record=args.record)
            if args.record:
                logger.info(f"Recording video to {renderer.recorder.output_file}")
            renderer.init_window()
            renderer.run_loop()

        elif args.command == "generate":
            from paint_engine.core.grid import Grid
            from paint_engine.algo.factory import BoardFactory
            from paint_engine.algo.verifier import UniquenessVerifier

            config = puzzle_config(args)
            factory = BoardFactory(config.width, config.height, seed=config.seed, stuck_limit=config.stuck_limit)
            for i in range(args.count):
                t0 = time.time()
                board = factory.generate(config.min_cover_ratio, config.max_reseed_tries)
                elapsed = time.time() - t0
                print(f"Board {i + 1}: {factory.attempts} attempts, {elapsed:.4f}s, "
                      f"{board.non_wall_count}/{board.width * board.height} open")
                for row in board.to_rows():
                    print(f"  {row}")
                if args.solve:
                    verifier = UniquenessVerifier(board.to_rows())
                    verifier.count_solutions()
                    print("  Solution: " + " ".join(Grid.DIRECTION_NAMES[d] for d in verifier.solution))

    except GenerationExhausted as e:
        logger.error(f"Board generation failed: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    return 0

if __name__ == "__main__":
    sys.exit(main())

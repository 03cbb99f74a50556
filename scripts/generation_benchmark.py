import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from paint_engine.core.grid import Grid
from paint_engine.algo.factory import BoardFactory
from paint_engine.algo.explorer import SteppedDFSExplorer

def benchmark_generation(width: int, height: int, cover: float, boards: int = 5, seed: int = 42):
    print(f"\n--- Generating {boards} boards {width}x{height} (cover >= {cover}) ---")
    factory = BoardFactory(width, height, seed=seed)

    total_attempts = 0
    total_cover_rejects = 0
    total_unique_rejects = 0
    start = time.time()
    for _ in range(boards):
        factory.generate(min_cover_ratio=cover, max_tries=1_000_000)
        total_attempts += factory.attempts
        total_cover_rejects += factory.rejected_cover
        total_unique_rejects += factory.rejected_unique
    elapsed = time.time() - start

    print(f"Time: {elapsed:.4f}s ({elapsed / boards:.4f}s per board)")
    print(f"Attempts: {total_attempts} ({total_attempts / boards:.1f} per board)")
    print(f"Rejected (coverage): {total_cover_rejects}")
    print(f"Rejected (not unique): {total_unique_rejects}")

def benchmark_explorer(width: int, height: int):
    print(f"\n--- Exploring open {width}x{height} grid ---")
    explorer = SteppedDFSExplorer(Grid(width, height), seed=42)
    start = time.time()
    steps = explorer.run_to_completion()
    elapsed = time.time() - start
    print(f"Steps: {steps} in {elapsed:.4f}s ({steps / elapsed:,.0f} steps/sec)")

def run_suite():
    for w, h, cover in [(4, 4, 0.6), (5, 5, 0.7), (6, 6, 0.72)]:
        benchmark_generation(w, h, cover)

    for size in (8, 64, 256):
        benchmark_explorer(size, size)

if __name__ == "__main__":
    run_suite()

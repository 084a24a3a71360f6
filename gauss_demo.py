import argparse
import logging
import sys
import time

import numpy as np

from gauss import N, solve

logger = logging.getLogger("gauss")


def close_logging():
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level=logging.INFO, log_file=None):
    logger.setLevel(level)
    # avoid duplicate output when main() runs more than once
    close_logging()
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def format_vector(vec):
    return "[" + ", ".join(f"{v:8.4f}" for v in vec) + "]"


def example_system():
    # tridiagonal matrix with 2 on the diagonal and 1 beside it
    a = 2.0 * np.eye(N) + np.eye(N, k=1) + np.eye(N, k=-1)
    b = np.arange(1, N + 1, dtype=np.float64)
    return a, b


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=f"{N}x{N} Gaussian elimination demo")
    parser.add_argument("--repeat", type=int, default=1, help="Number of timed solves (>=1)")
    parser.add_argument("--verbose", action="store_true", help="Log residual diagnostics")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    args = parser.parse_args(argv)
    if args.repeat < 1:
        parser.error("--repeat must be at least 1")
    return args


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)
    try:
        return run(args.repeat)
    finally:
        close_logging()


def run(repeat=1):
    a0, b0 = example_system()
    print(f"--- {N}x{N} Matrix Solver (Gaussian Elimination) ---")
    elapsed = 0.0
    for _ in range(repeat):
        a, b = a0.copy(), b0.copy()
        start = time.perf_counter()
        ok = solve(a, b)
        elapsed += time.perf_counter() - start
        if not ok:
            print("Error: Matrix is singular or near-singular. No unique solution found.")
            return 1
    print("Matrix solved successfully!")
    print("Solution vector x:")
    print(format_vector(b))
    print(f"Time taken: {1000.0 * elapsed / repeat:.6f} ms")
    logger.debug("max|A @ x - b| = %.3e", np.max(np.abs(a0 @ b - b0)))
    logger.debug("matches numpy: %s", np.allclose(b, np.linalg.solve(a0, b0)))
    return 0


if __name__ == "__main__":
    sys.exit(main())

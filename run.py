#!/usr/bin/env python3
"""
Fibonacci Digit Search Entry Point

Finds the first Fibonacci index whose value reaches the configured digit
count (LARGE_NUMBERS_TARGET_DIGITS, 1000 by default).
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from large_numbers.config import get_config
from large_numbers.diagnostics import run_self_check
from large_numbers.fibonacci import find_first_index_with_digits
from large_numbers.logging_config import setup_logging


def main() -> int:
    config = get_config()
    setup_logging(config.log_level, log_format=config.log_format, log_file=config.log_file)

    if config.self_check_on_start:
        run_self_check()

    result = find_first_index_with_digits(
        config.target_digits,
        start_index=config.start_index,
        progress_interval=config.progress_log_interval,
    )
    print(f"Final Index: {result.index} - {result.digit_count} digits")
    print(f"Duration: {result.duration_seconds:.6f} s")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nSearch interrupted")
        sys.exit(130)
    except Exception as e:
        print(f"❌ Error: {e}")
        sys.exit(1)

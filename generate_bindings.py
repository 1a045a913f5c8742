#!/usr/bin/env python3
"""
Generate TypeScript bindings for compiled contract artifacts.

Usage:
    python3 generate_bindings.py
    python3 generate_bindings.py build/contracts -o src/typings
    python3 generate_bindings.py "artifacts/**/*.json" --force --verbose
"""

import argparse
import sys

from abibind import Options, generate
from abibind.cache import JSONCache
from abibind.core.config import configure_logging, load_settings
from abibind.core.errors import BindingGenerationError


def main(argv=None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Generate typed ethers bindings from contract artifacts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Bindings for every artifact under build/contracts
    python3 generate_bindings.py build/contracts -o src/typings

    # Regenerate everything, ignoring the cache
    python3 generate_bindings.py --force

    # Defaults can also come from the environment or a .env file
    export ABIBIND_PATTERN="artifacts/**/*.json"
    export ABIBIND_OUT_DIR=src/typings
        """
    )

    parser.add_argument("pattern", nargs="?", default=settings["pattern"],
                        help="Artifact glob pattern or directory (default: %(default)s)")
    parser.add_argument("-o", "--out", default=settings["out_dir"],
                        help="Output directory for generated files (default: %(default)s)")
    parser.add_argument("--force", action="store_true", help="Ignore the cache and regenerate every binding")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else settings["log_level"])

    cache = JSONCache(args.out)
    if args.force:
        cache.clear()

    try:
        summary = generate(Options(pattern=args.pattern, out_dir=args.out), cache=cache)
    except BindingGenerationError as e:
        print(f"❌ Error: {e}")
        return 1

    summary.print_summary()
    return 0


if __name__ == "__main__":
    sys.exit(main())

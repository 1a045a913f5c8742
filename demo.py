#!/usr/bin/env python3
"""
abibind Demo - Generate bindings for the sample artifacts in examples/artifacts.
"""

import sys

from abibind import Options, generate
from abibind.core.config import configure_logging
from abibind.core.errors import BindingGenerationError


def main():
    print("╔" + "=" * 78 + "╗")
    print("║" + " " * 24 + "abibind - Bindings Demo" + " " * 31 + "║")
    print("╚" + "=" * 78 + "╝")
    print()
    print("Generating bindings for examples/artifacts into examples/typings...")
    print()

    configure_logging("INFO")

    try:
        summary = generate(Options(pattern="examples/artifacts", out_dir="examples/typings"))
    except BindingGenerationError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)

    summary.print_summary()

    if summary.generated:
        print("\nExample usage of the generated binding:\n")
        print('  import { Escrow } from "./typings";')
        print("  const escrow = await Escrow.deploy(signer, arbiter, deadline);")
        print("  const [info, createdAt] = await escrow.getDeposit(1);")

    sys.exit(0)


if __name__ == "__main__":
    main()

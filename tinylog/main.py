# SPDX-License-Identifier: Apache-2.0
"""Entry point for tinylog CLI."""

from tinylog.cli.app import app, main

__all__ = ["app", "main"]

if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Print the comment thread of a post."""

import sys

from remarks.interface.cli import main

if __name__ == "__main__":
    sys.exit(main())

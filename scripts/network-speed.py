#!/usr/bin/env python3

import sys

from netspeed.cli import main

sys.stdout.reconfigure(line_buffering=True)  # type: ignore

if __name__ == "__main__":
    main()

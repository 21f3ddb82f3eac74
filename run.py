#!/usr/bin/env python3
"""Run the election demonstration."""

import sys

from cli.demo import main

sys.exit(main())

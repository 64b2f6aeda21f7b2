# src/shiprate/__main__.py
"""Allow `python -m shiprate`."""
import sys

from shiprate.app import main

sys.exit(main())

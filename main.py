#!/usr/bin/env python3
"""
Mine - Main entry point.

Usage:
    python main.py [--width N] [--height N] [--mines N] [--seed N]
    python main.py HEIGHT WIDTH MINES
    python main.py --prompt
"""
import sys
from pathlib import Path

# Allow running from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from mine.cli import main


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Setup FSD Project

Bootstraps a Vite + React project with Tailwind CSS, Zustand, React Query
and a Feature-Sliced Design folder layout.

Usage:
    python scripts/setup_project.py            # prompt for the project name
    python scripts/setup_project.py myapp
    python scripts/setup_project.py .          # install into the current folder
"""

import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env")

from fsd_starter.cli import main


if __name__ == "__main__":
    sys.exit(main())

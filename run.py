"""
Babylon Preset - Main Entry Point
Run this script to dump one or more .bab presets
"""

import sys
import os

# Add the project root to the path
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from babylon.cli import main

if __name__ == '__main__':
    sys.exit(main())

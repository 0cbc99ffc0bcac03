#!/usr/bin/env python3
"""Convert a folder of SVG files into a single CSS file with inline images."""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg2css.cli import main


if __name__ == "__main__":
    sys.exit(main())

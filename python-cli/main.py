#!/usr/bin/env python3
"""
SecurePass Command Line Launcher

Runs the CLI straight from a source checkout without installing the
package. Installed copies use the `securepass` console script instead.

Usage:
    python python-cli/main.py hash --password Test_Password
"""

import os
import sys

# Add python-core to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "python-core"))

from securepass.cli import main


if __name__ == "__main__":
    main()

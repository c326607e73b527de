"""
Development runner for the demos.
Runs the order form GUI, or the console menu with --console, without installation.
"""

import os
import sys

# Add src directory to Python path for local development
sys.path.insert(0, os.path.abspath("src"))

if __name__ == "__main__":
    if "--console" in sys.argv[1:]:
        from demo.bacon_or_spam import main
    else:
        from gui.main import main

    raise SystemExit(main())

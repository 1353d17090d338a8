"""
Run detect-cycles as a module.

Usage:
    python -m detect_cycles <file>
"""

from detect_cycles.cli import main

if __name__ == "__main__":
    main()

"""
Stockroom - Main Entry Point

Run with: python -m stockroom [COMMAND] [OPTIONS]
"""

from .cli import main

if __name__ == "__main__":
    main()

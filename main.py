#!/usr/bin/env python3
"""MyFitness — entry point.

Run with:
    python main.py
    python -m myfitness
"""

from myfitness.__main__ import main


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Main entry point for the moviekit demo.
"""

from examples.movie_demo import main

if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
SongPad Hugging Face Spaces App
Main entry point for the deployed lyric editor
"""

from songpad.app.app import main


if __name__ == "__main__":
    main()

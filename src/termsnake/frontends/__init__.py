"""Input/render frontends for the game loop.

Import the one you need from its module: the window frontend pulls in
pygame, the terminal one only curses.
"""

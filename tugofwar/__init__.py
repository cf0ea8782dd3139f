"""A tug-of-war game played by a referee, player processes and a pygame display over named pipes."""

__version__ = "0.1.0"
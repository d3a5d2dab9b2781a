"""
gameshell
---------
Minimal pygame game shell: boot, loading, main menu, gameplay and game over.
"""

__version__ = "0.1.0"

"""Cross-platform interactive screenshot CLI.

Captures the full screen (a chosen display) or a window using the
native tools of macOS, Windows or Linux, saves it where the user picks,
and opens it in the default image viewer.
"""

__version__ = "1.0.0"

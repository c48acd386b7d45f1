"""
Smart Row Highlighter - conditional row highlighting for board items.
"""

__version__ = "1.0.0"

"""
Format, build and test Sui Move projects, with structured compiler diagnostics.
"""

__version__ = "0.1.0"

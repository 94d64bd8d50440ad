"""
Dialog code hook for a slot-filling conversational bot.
"""

__version__ = "1.1.0"

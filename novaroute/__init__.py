"""
novaroute - intent routing for a writing assistant's chat box.
"""

__version__ = "0.1.0"
__logo__ = "🧭"

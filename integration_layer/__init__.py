"""Universal Integration Layer - cross-platform user profiles and insights"""

__version__ = "1.0.0"

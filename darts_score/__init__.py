"""
Darts score - turn/round scoring aid for darts sessions.
"""
__version__ = "0.1.0"

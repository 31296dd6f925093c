"""
Utilities

Constants and exceptions shared by every layer.
"""

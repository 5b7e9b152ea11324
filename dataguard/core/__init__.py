"""
Validation and sanitization engine.
"""

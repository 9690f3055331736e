"""
Independently deployable functions.
"""

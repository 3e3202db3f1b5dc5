"""
Command-line entry points for the Deep Playground data layer.
"""

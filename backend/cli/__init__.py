"""
Command line tools for the Snake server.
"""

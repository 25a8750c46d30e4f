"""
Command line interface for the studygen toolkit.
"""

"""
Calculator services: operations, tool catalog and dispatcher.
"""

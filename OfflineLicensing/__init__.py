"""
Offline Licensing project.

Configuration and logging for offline license verification.
"""

"""DoMotive Test Suite

This package contains all tests for DoMotive, the mood log and mood-aware
task suggester.
"""

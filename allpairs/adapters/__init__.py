"""Adapters layer - Concrete implementations of the ports.

Adapters connect the core to files, numpy and the console.
"""

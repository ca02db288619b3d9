"""Shared Kernel module.

Components explicitly shared across bounded contexts. Currently this is
the key-value store port that the Users context persists through and the
Redis infrastructure implements.
"""

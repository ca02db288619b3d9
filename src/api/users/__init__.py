"""Users bounded context.

Creates and lists user records kept as flat id -> username pairs in the
key-value store.
"""

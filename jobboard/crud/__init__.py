"""
Persistence functions, one per access pattern.

Reads return None (or an empty list) when nothing matches. Writes commit and
refresh; they raise only when the store rejects the write (unique index,
record schema validation) or fails outright. Error translation is left to
the service layer.
"""

"""Core type definitions for roomgrid."""

type Copy[T] = T
"""Type alias indicating a value is a copy that won't auto-persist.

When you see `Copy[T]` in a return type, the returned value is a deep copy.
Mutations to this copy do NOT affect the map. To persist changes, schedule an
action through `MapData.execute()` or one of the facade's toggle/set requests.
"""

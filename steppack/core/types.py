"""Well-known event type names recorded by graphics traces."""

CONTEXT_CREATED = "wtf.webgl#createContext"
CONTEXT_SET_ACTIVE = "wtf.webgl#setContext"
FRAME_START = "wtf.timing#frameStart"
FRAME_END = "wtf.timing#frameEnd"

# Returned by type lookups for names that were never registered.
UNKNOWN_TYPE_ID = -1

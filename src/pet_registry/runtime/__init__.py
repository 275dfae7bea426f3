"""Runtime configuration, context and schema bootstrap."""

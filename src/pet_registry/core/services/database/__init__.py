"""Database engine, sessions and schema management."""

"""User store implementations (SQLAlchemy and in-memory)."""

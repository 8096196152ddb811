"""Host adapters (plain classes, SQLAlchemy declarative models)."""

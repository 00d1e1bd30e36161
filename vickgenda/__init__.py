"""Teacher's agenda toolkit: academic and productivity models, SQLite stores, text display helpers and a focus timer."""

__version__ = "0.1.0"
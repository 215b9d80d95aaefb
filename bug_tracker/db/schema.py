# bug_tracker/db/schema.py

from sqlalchemy import MetaData, Table, Column, Integer, Text

metadata = MetaData()

# id only keeps insertion order; it never leaves the store
bugs = Table(
    "bugs",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False),
)

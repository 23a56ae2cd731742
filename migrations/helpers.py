from __future__ import annotations

from typing import Callable, Iterable

from sqlalchemy import Column, DateTime, MetaData, Table, func


TableBuilder = Callable[[MetaData], Table]


def timestamps() -> list[Column]:
    return [
        Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
        Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    ]


def deleted_at() -> Column:
    return Column("deleted_at", DateTime(timezone=True), nullable=True)


def create_table(conn, build: TableBuilder, *, referents: Iterable[str] = ()) -> Table:
    """
    Create the table produced by `build`.

    Tables named in `referents` are reflected into the same MetaData first so
    foreign keys can be rendered; a referent that does not exist yet raises
    `sqlalchemy.exc.NoSuchTableError`.
    """
    metadata = MetaData()
    for name in referents:
        Table(name, metadata, autoload_with=conn)
    table = build(metadata)
    table.create(bind=conn)
    return table


def drop_table(conn, build: TableBuilder) -> None:
    build(MetaData()).drop(bind=conn)

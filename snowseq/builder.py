"""Statement builder for sequence objects."""

from dataclasses import dataclass

from .escaping import escape_string


@dataclass
class SequenceBuilder:
    """Holds the attributes of a sequence and renders SQL statements for it.

    The ``with_*`` setters change the builder in place and return it so calls
    can be chained. They are not safe to call from several threads on the
    same builder. Every render method is a pure function of the current
    attributes and never touches a database.
    """

    name: str
    database: str
    schema: str
    increment: int = 1
    start: int = 1
    comment: str = ""

    def with_comment(self, comment: str) -> "SequenceBuilder":
        self.comment = comment
        return self

    def with_increment(self, increment: int) -> "SequenceBuilder":
        self.increment = increment
        return self

    def with_start(self, start: int) -> "SequenceBuilder":
        self.start = start
        return self

    def qualified_name(self) -> str:
        """Return the quoted ``"database"."schema"."name"`` path."""
        return f'"{self.database}"."{self.schema}"."{self.name}"'

    def create(self) -> str:
        """Return the CREATE statement.

        START and INCREMENT are only emitted when they differ from the
        store's default of 1.
        """
        parts = [f"CREATE SEQUENCE {self.qualified_name()}"]
        if self.start != 1:
            parts.append(f" START = {self.start}")
        if self.increment != 1:
            parts.append(f" INCREMENT = {self.increment}")
        if self.comment:
            parts.append(f" COMMENT = '{escape_string(self.comment)}'")
        return "".join(parts)

    def drop(self) -> str:
        return f"DROP SEQUENCE {self.qualified_name()}"

    def show(self) -> str:
        """Return a SHOW statement matching this sequence within its schema."""
        # The name goes into the LIKE pattern as-is; quotes, % and _ are not escaped.
        return (
            f"SHOW SEQUENCES LIKE '{self.name}' "
            f'IN SCHEMA "{self.database}"."{self.schema}"'
        )

    def remove_comment(self) -> str:
        return f"ALTER SEQUENCE {self.qualified_name()} UNSET COMMENT"

    def change_comment(self, comment: str) -> str:
        return (
            f"ALTER SEQUENCE {self.qualified_name()} "
            f"SET COMMENT = '{escape_string(comment)}'"
        )

    def next_value(self) -> str:
        """Return a SELECT that draws the next value from the sequence."""
        return f"SELECT {self.qualified_name()}.nextval"

    def rename(self, new_name: str) -> str:
        """Return an ALTER statement renaming the sequence in place."""
        return (
            f"ALTER SEQUENCE {self.qualified_name()} "
            f'RENAME TO "{self.database}"."{self.schema}"."{new_name}"'
        )


def sequence(name: str, database: str, schema: str) -> SequenceBuilder:
    """Create a builder with start and increment of 1 and no comment."""
    return SequenceBuilder(name=name, database=database, schema=schema)

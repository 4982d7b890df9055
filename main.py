#!/usr/bin/env python3
"""snowseq - SQL statement builder for sequence objects."""

import argparse
import logging
import sys

import psycopg
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from snowseq import (
    ConfigError,
    Database,
    SequenceBuilder,
    SequenceError,
    SequenceRecord,
    generate_report,
    resolve_connection_string,
    sequence,
)

console = Console()
logger = logging.getLogger("snowseq")


def print_sequence_table(records: list[SequenceRecord]) -> None:
    """Display the sequence listing as a table."""
    table = Table(
        title="Sequences",
        show_header=True,
        header_style="bold",
        show_lines=True,
    )
    table.add_column("Sequence", style="cyan", no_wrap=True)
    table.add_column("Next", justify="right", no_wrap=True)
    table.add_column("Interval", justify="right", no_wrap=True)
    table.add_column("Owner", no_wrap=True)
    table.add_column("Created", no_wrap=True)
    table.add_column("Comment", overflow="fold")

    for record in records:
        table.add_row(
            escape(record.key),
            escape(record.next_value or ""),
            escape(record.interval or ""),
            escape(record.owner or ""),
            escape(record.created_on or ""),
            escape(record.comment or ""),
        )

    console.print(table)


def render_statement(args: argparse.Namespace) -> str:
    """Build the statement requested by a statement subcommand."""
    builder: SequenceBuilder = sequence(args.name, args.database, args.schema)

    if args.command == "create":
        return (
            builder.with_start(args.start)
            .with_increment(args.increment)
            .with_comment(args.comment)
            .create()
        )
    elif args.command == "drop":
        return builder.drop()
    elif args.command == "show":
        return builder.show()
    elif args.command == "rename":
        return builder.rename(args.new_name)
    elif args.command == "comment":
        return builder.change_comment(args.text)
    elif args.command == "uncomment":
        return builder.remove_comment()
    elif args.command == "nextval":
        return builder.next_value()
    raise ValueError(f"unknown command {args.command!r}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Render and run SQL statements for sequence objects.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s create ORDERS_SEQ ANALYTICS PUBLIC --start 100 --comment "order ids"
    %(prog)s --dsn "host=db.example.com dbname=analytics" nextval ORDERS_SEQ ANALYTICS PUBLIC --execute
    %(prog)s --config snowseq.ini list --plain
        """,
    )
    parser.add_argument("--dsn", help="Connection string for the store")
    parser.add_argument(
        "--config",
        help="INI file with a [database] section (host, port, dbname, user, password)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug output, including every executed statement",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    target = argparse.ArgumentParser(add_help=False)
    target.add_argument("name", help="Sequence name")
    target.add_argument("database", help="Database containing the sequence")
    target.add_argument("schema", help="Schema containing the sequence")
    target.add_argument(
        "--execute",
        action="store_true",
        default=False,
        help="Run the statement against the store instead of only printing it",
    )

    create = subparsers.add_parser(
        "create", parents=[target], help="CREATE SEQUENCE statement"
    )
    create.add_argument("--start", type=int, default=1, help="Initial value")
    create.add_argument("--increment", type=int, default=1, help="Step size")
    create.add_argument("--comment", default="", help="Sequence comment")

    subparsers.add_parser("drop", parents=[target], help="DROP SEQUENCE statement")
    subparsers.add_parser(
        "show", parents=[target], help="SHOW SEQUENCES statement for one sequence"
    )
    rename = subparsers.add_parser(
        "rename", parents=[target], help="ALTER SEQUENCE ... RENAME TO statement"
    )
    rename.add_argument("new_name", help="New sequence name in the same schema")
    comment = subparsers.add_parser(
        "comment", parents=[target], help="ALTER SEQUENCE ... SET COMMENT statement"
    )
    comment.add_argument("text", help="New comment")
    subparsers.add_parser(
        "uncomment", parents=[target], help="ALTER SEQUENCE ... UNSET COMMENT statement"
    )
    subparsers.add_parser(
        "nextval", parents=[target], help="SELECT ... nextval statement"
    )

    listing = subparsers.add_parser("list", help="List all sequences")
    listing.add_argument(
        "--plain",
        action="store_true",
        default=False,
        help="Output a plain text report instead of a table",
    )

    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for snowseq."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "list":
            connection_string = resolve_connection_string(args.dsn, args.config)
            db = Database.from_connection_string(connection_string)
            if args.plain:
                print(generate_report(db.sequences))
            else:
                print_sequence_table(db.sequences)
            return 0

        statement = render_statement(args)
        print(statement)

        if args.execute:
            connection_string = resolve_connection_string(args.dsn, args.config)
            rows = Database(connection_string=connection_string).execute(statement)
            for row in rows:
                console.print(row)
            logger.info("executed %s", args.command)
    except (SequenceError, ConfigError, psycopg.Error) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Plain-text report for sequence listings."""

from .db import SequenceRecord


def _value(value: str | None) -> str:
    return "-" if value is None else value


def format_sequence(record: SequenceRecord, indent: str = "  ") -> list[str]:
    """Format a single sequence record."""
    lines = [f"{indent}{record.key}"]
    lines.append(f"{indent}    next value: {_value(record.next_value)}")
    lines.append(f"{indent}    interval:   {_value(record.interval)}")
    lines.append(f"{indent}    owner:      {_value(record.owner)}")
    lines.append(f"{indent}    created on: {_value(record.created_on)}")
    if record.comment:
        lines.append(f"{indent}    comment:    {record.comment}")
    return lines


def generate_report(records: list[SequenceRecord]) -> str:
    """Generate a human-readable listing of sequences in store order."""
    lines = [
        "Sequence Report",
        "=" * 60,
    ]

    if not records:
        lines.append("")
        lines.append("No sequences found.")
        return "\n".join(lines)

    for record in records:
        lines.extend(format_sequence(record))

    lines.append("")
    lines.append("=" * 60)
    lines.append(f"  Total sequences: {len(records)}")

    return "\n".join(lines)

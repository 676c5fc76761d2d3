"""Table column schema model."""

from typing import Any

from pydantic import BaseModel


class ColumnInfo(BaseModel):
    """One column of a table as reported by ``DESCRIBE``."""

    name: str
    type: str
    nullable: bool = False
    default: Any = None
    extra: str = ""

    @classmethod
    def from_describe_row(cls, row: dict[str, Any]) -> "ColumnInfo":
        """Build from a ``DESCRIBE`` row with Field/Type/Null/Default/Extra keys."""
        return cls(
            name=row["Field"],
            type=str(row["Type"]),
            nullable=str(row.get("Null") or "").upper() == "YES",
            default=row.get("Default"),
            extra=str(row.get("Extra") or ""),
        )

    @property
    def auto_increment(self) -> bool:
        """Whether the database generates this column's value."""
        return "auto_increment" in self.extra.lower()

    @property
    def required(self) -> bool:
        """Whether a record write must supply this column."""
        return not (self.nullable or self.default is not None or self.auto_increment)

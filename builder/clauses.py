"""
==================================
Statement data and clause fragments.
==================================

A Statement is the immutable value threaded through a builder chain. Each
clause step appends a rendered fragment and yields a new Statement; the
previous one is never modified, so a partially built chain can be branched
freely.

Fragments:
- from_clause:     " FROM <table>"
- join_clause:     " <TYPE> JOIN <table> ON <on>"
- where_clause:    " WHERE <condition>"
- order_by_clause: " ORDER BY <columns>"
- limit_clause:    " LIMIT <n>"
- columns_clause:  " (<columns>)"
- values_clause:   " VALUES (<values>)"
- set_clause:      " SET <assignments>"
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable, Mapping, Union

from builder.values import (
    render_assignments,
    render_column_list,
    render_values,
)


class StatementKind(str, Enum):
    """Kind of statement under construction, fixed at creation."""
    
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class JoinType(str, Enum):
    """Join keyword placed before JOIN; PLAIN renders as an empty string."""
    
    PLAIN = ""
    LEFT = "LEFT"
    LEFT_OUTER = "LEFT OUTER"
    RIGHT = "RIGHT"
    RIGHT_OUTER = "RIGHT OUTER"
    FULL = "FULL"
    FULL_OUTER = "FULL OUTER"
    SELF = "SELF"
    CROSS = "CROSS"
    INNER = "INNER"


@dataclass(frozen=True)
class Statement:
    """Accumulated statement text plus the connection it will run on.
    
    Attributes:
        kind: Statement kind
        text: Statement text built so far
        connection: Gateway connection handle, carried through unchanged
    """
    
    kind: StatementKind
    text: str
    connection: Any = None
    
    def append(self, fragment: str) -> "Statement":
        """Return a new Statement with fragment appended to the text."""
        return replace(self, text=self.text + fragment)


def select_statement(connection: Any, columns: Union[str, Iterable[str]]) -> Statement:
    """
    Start a SELECT statement.
    
    Args:
        connection: Gateway connection the statement will run on
        columns: Column sequence, or a string used verbatim (e.g. '*')
        
    Returns:
        Statement with text 'SELECT <columns>'
    """
    return Statement(StatementKind.SELECT, f"SELECT {render_column_list(columns)}", connection)


def insert_statement(connection: Any, table: str) -> Statement:
    """Start an INSERT statement: 'INSERT INTO <table>'."""
    return Statement(StatementKind.INSERT, f"INSERT INTO {table}", connection)


def update_statement(connection: Any, table: str) -> Statement:
    """Start an UPDATE statement: 'UPDATE <table>'."""
    return Statement(StatementKind.UPDATE, f"UPDATE {table}", connection)


def delete_statement(connection: Any, table: str) -> Statement:
    """Start a DELETE statement: 'DELETE FROM <table>'."""
    return Statement(StatementKind.DELETE, f"DELETE FROM {table}", connection)


def from_clause(table: str) -> str:
    """Render ' FROM <table>'."""
    return f" FROM {table}"


def join_clause(join_type: JoinType, table: str, on: str) -> str:
    """
    Render a JOIN fragment.
    
    The join keyword is substituted literally, so a plain join renders as
    '  JOIN <table> ON <on>' (two leading spaces).
    
    Args:
        join_type: JoinType member or its keyword string
        table: Table to join, optionally with an alias
        on: Raw join condition
        
    Returns:
        SQL JOIN fragment
    """
    return f" {JoinType(join_type).value} JOIN {table} ON {on}"


def where_clause(condition: str) -> str:
    """Render ' WHERE <condition>'; the condition is not parsed or validated."""
    return f" WHERE {condition}"


def order_by_clause(columns: Union[str, Iterable[str]]) -> str:
    """Render ' ORDER BY <columns>', joining a sequence with ', '."""
    return f" ORDER BY {render_column_list(columns)}"


def limit_clause(limit: Any) -> str:
    """Render ' LIMIT <n>'."""
    return f" LIMIT {limit}"


def columns_clause(columns: Union[str, Iterable[str]]) -> str:
    """Render the INSERT column list ' (<columns>)'."""
    return f" ({render_column_list(columns)})"


def values_clause(values: Union[str, Iterable[Any]]) -> str:
    """
    Render ' VALUES (<values>)'.
    
    Args:
        values: Sequence rendered with render_values, or a pre-rendered string
        
    Returns:
        SQL VALUES fragment
    """
    return f" VALUES ({render_values(values)})"


def set_clause(assignments: Union[str, Mapping, Iterable[str]]) -> str:
    """
    Render ' SET <assignments>'.
    
    Args:
        assignments: Mapping rendered as key=value pairs, a sequence of
            'col=val' strings, or a pre-built string
            
    Returns:
        SQL SET fragment
    """
    return f" SET {render_assignments(assignments)}"

"""
=========================
Value rendering for DML.
=========================

Turns Python values into the literal text that is interpolated into VALUES
lists and SET assignments.

Rendering rules:
- bytes / bytearray / memoryview: hexadecimal literal X'<hex>'
- bool: TRUE / FALSE (SET assignments only)
- str: wrapped in double quotes, embedded quotes are NOT escaped
- None: NULL
- anything else: str(value); a bool in a VALUES list therefore renders as
  Python's True / False, which MySQL and PostgreSQL both accept

Values are interpolated, not bound. Nothing here makes caller input safe to
embed in SQL.

Example:
    >>> render_values([1, 'x', None, b'\\xde\\xad'])
    '1, "x", NULL, X\\'dead\\''
    >>> render_assignments({'active': True, 'name': 'Bob'})
    'active=TRUE, name="Bob"'
"""

from collections.abc import Mapping
from typing import Any, Iterable, Union

BINARY_TYPES = (bytes, bytearray, memoryview)


def render_value(value: Any, booleans: bool = False) -> str:
    """
    Render a single value as a SQL literal.
    
    Args:
        value: Value to render
        booleans: Render bools as TRUE/FALSE (used for SET assignments)
        
    Returns:
        Literal text for the value
    """
    if isinstance(value, BINARY_TYPES):
        return f"X'{bytes(value).hex()}'"
    if booleans and isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, str):
        return f'"{value}"'
    if value is None:
        return "NULL"
    return str(value)


def render_column_list(columns: Union[str, Iterable[str]]) -> str:
    """Join a column sequence with ', '; a string is used verbatim."""
    if isinstance(columns, str):
        return columns
    return ", ".join(str(column) for column in columns)


def render_values(values: Union[str, Iterable[Any]]) -> str:
    """Render a VALUES list; a string is assumed to be pre-rendered."""
    if isinstance(values, str):
        return values
    return ", ".join(render_value(value) for value in values)


def render_assignments(assignments: Union[str, Mapping, Iterable[str]]) -> str:
    """
    Render the body of a SET clause.
    
    Args:
        assignments: Mapping of column -> value, rendered as key=value pairs
            in iteration order; a sequence of pre-built 'col=val' strings,
            joined with ', '; or a string used verbatim
            
    Returns:
        Assignment list text
    """
    if isinstance(assignments, str):
        return assignments
    if isinstance(assignments, Mapping):
        return ", ".join(
            f"{key}={render_value(value, booleans=True)}"
            for key, value in assignments.items()
        )
    return ", ".join(str(assignment) for assignment in assignments)

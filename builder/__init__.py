"""
==========================================
Fluent statement builder over a database.
==========================================

Statements are built by chaining clause methods on immutable state objects;
each state offers only the clauses that may legally follow it.

Modules:
    - values.py: literal rendering for VALUES lists and SET assignments
    - clauses.py: Statement value, statement kinds, join types, clause fragments
    - states.py: one class per builder state, plus the four entry points
    - database.py: Database, the connected entry point

Example:
    >>> from builder import Database
    >>> 
    >>> db = Database('localhost', 'root', 'secret', 'shop')
    >>> db.update('users').set({'active': True, 'name': 'Bob'}).where('id=5').execute()
    >>> db.select('*').from_('orders').where('id=1').limit(10).execute()
"""

__version__ = "1.0.0"
__all__ = [
    'Database',
    'Statement', 'StatementKind', 'JoinType',
    'render_value', 'render_values', 'render_assignments', 'render_column_list',
    'select', 'insert', 'update', 'delete'
]

from .clauses import JoinType, Statement, StatementKind
from .database import Database
from .states import delete, insert, select, update
from .values import (
    render_assignments,
    render_column_list,
    render_value,
    render_values,
)

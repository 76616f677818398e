"""
======================
Builder state classes.
======================

Each class is one state of the statement grammar and defines only the
operations that may legally follow it. Calling a clause that is not allowed
at that point fails with AttributeError before any SQL is produced.

State graph:

    SELECT  SelectColumns -from_-> SelectFrom -join-> SelectJoined
            SelectFrom/SelectJoined -where-> SelectFiltered
            SelectFrom/SelectFiltered -order_by-> SelectOrdered
    INSERT  InsertInto -columns-> InsertColumns -values-> InsertValues
            InsertInto -object-> InsertValues
    UPDATE  UpdateTable -join-> UpdateJoined
            UpdateTable/UpdateJoined -set-> UpdateSet -where-> Filtered
    DELETE  DeleteFrom -join-> DeleteJoined
            DeleteFrom/DeleteJoined -where-> Filtered

    limit() leads to Limited from every state that offers it; Limited only
    offers execute().

Example:
    >>> state = select(conn, '*').from_('orders').where('id=1').limit(10)
    >>> result = state.execute()
"""

from typing import Any, Iterable, Mapping, Type, Union

from builder.clauses import (
    JoinType,
    Statement,
    StatementKind,
    columns_clause,
    delete_statement,
    from_clause,
    insert_statement,
    join_clause,
    limit_clause,
    order_by_clause,
    select_statement,
    set_clause,
    update_statement,
    values_clause,
    where_clause,
)
from utils.database_utils import ResultSet, execute_statement


class _State:
    """Holds the Statement reached so far."""
    
    __slots__ = ('_statement',)
    
    def __init__(self, statement: Statement):
        self._statement = statement
    
    def _advance(self, fragment: str, state_class: Type["_State"]) -> "_State":
        return state_class(self._statement.append(fragment))
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self._statement.kind.value})"


class _Executable(_State):
    __slots__ = ()
    
    def execute(self) -> ResultSet:
        """
        Send the statement to the database.
        
        Returns:
            ResultSet from the connection gateway
            
        Raises:
            StatementExecutionError: Propagated unchanged from the gateway
        """
        return execute_statement(self._statement.connection, self._statement.text)


class _Limitable(_State):
    __slots__ = ()
    
    def limit(self, limit: int) -> "Limited":
        """Append LIMIT; only execute() may follow."""
        return self._advance(limit_clause(limit), Limited)


class _Filterable(_State):
    __slots__ = ()
    
    def where(self, condition: str) -> Union["SelectFiltered", "Filtered"]:
        """Append WHERE with a raw, unvalidated condition."""
        return self._advance(where_clause(condition), _FILTERED_STATES[self._statement.kind])


class _Orderable(_State):
    __slots__ = ()
    
    def order_by(self, columns: Union[str, Iterable[str]]) -> "SelectOrdered":
        return self._advance(order_by_clause(columns), SelectOrdered)


class _Assignable(_State):
    __slots__ = ()
    
    def set(self, assignments: Union[str, Mapping, Iterable[str]]) -> "UpdateSet":
        """
        Append SET.
        
        Args:
            assignments: Mapping of column -> value, a sequence of
                'col=val' strings, or a pre-built string
        """
        return self._advance(set_clause(assignments), UpdateSet)


_JoinResult = Union["SelectJoined", "UpdateJoined", "DeleteJoined"]


class _Joinable(_State):
    """Join operations; the state reached depends on the statement kind."""
    
    __slots__ = ()
    
    def _join(self, join_type: JoinType, table: str, on: str) -> _JoinResult:
        return self._advance(join_clause(join_type, table, on), _JOINED_STATES[self._statement.kind])
    
    def join(self, table: str, on: str) -> _JoinResult:
        """
        Append a JOIN fragment.
        
        Args:
            table: Table to join, optionally with an alias
            on: Raw join condition
            
        Returns:
            SelectJoined, UpdateJoined or DeleteJoined, matching the statement kind
        """
        return self._join(JoinType.PLAIN, table, on)
    
    def left_join(self, table: str, on: str) -> _JoinResult:
        return self._join(JoinType.LEFT, table, on)
    
    def left_outer_join(self, table: str, on: str) -> _JoinResult:
        return self._join(JoinType.LEFT_OUTER, table, on)
    
    def right_join(self, table: str, on: str) -> _JoinResult:
        return self._join(JoinType.RIGHT, table, on)
    
    def right_outer_join(self, table: str, on: str) -> _JoinResult:
        return self._join(JoinType.RIGHT_OUTER, table, on)
    
    def full_join(self, table: str, on: str) -> _JoinResult:
        return self._join(JoinType.FULL, table, on)
    
    def full_outer_join(self, table: str, on: str) -> _JoinResult:
        return self._join(JoinType.FULL_OUTER, table, on)
    
    def self_join(self, table: str, on: str) -> _JoinResult:
        return self._join(JoinType.SELF, table, on)
    
    def cross_join(self, table: str, on: str) -> _JoinResult:
        return self._join(JoinType.CROSS, table, on)
    
    def inner_join(self, table: str, on: str) -> _JoinResult:
        return self._join(JoinType.INNER, table, on)


# ===============
# Shared states
# ===============

class Limited(_Executable):
    """After LIMIT: nothing but execute()."""
    __slots__ = ()


class Filtered(_Limitable, _Executable):
    """UPDATE or DELETE after WHERE."""
    __slots__ = ()


# ===============
# SELECT
# ===============

class SelectColumns(_Limitable):
    """SELECT <columns>."""
    
    __slots__ = ()
    
    def from_(self, table: str) -> "SelectFrom":
        """Append FROM. Named from_ because 'from' is a Python keyword."""
        return self._advance(from_clause(table), SelectFrom)


class SelectFrom(_Joinable, _Filterable, _Orderable, _Limitable, _Executable):
    __slots__ = ()


class SelectJoined(_Joinable, _Filterable, _Limitable, _Executable):
    __slots__ = ()


class SelectFiltered(_Orderable, _Limitable, _Executable):
    __slots__ = ()


class SelectOrdered(_Limitable, _Executable):
    __slots__ = ()


# ===============
# INSERT
# ===============

class InsertInto(_State):
    """INSERT INTO <table>."""
    
    __slots__ = ()
    
    def columns(self, columns: Union[str, Iterable[str]]) -> "InsertColumns":
        return self._advance(columns_clause(columns), InsertColumns)
    
    def object(self, row: Mapping[str, Any]) -> "InsertValues":
        """
        Insert one row given as a mapping.
        
        Equivalent to columns(keys).values(values) in the mapping's own order.
        """
        return self.columns(list(row.keys())).values(list(row.values()))


class InsertColumns(_State):
    __slots__ = ()
    
    def values(self, values: Union[str, Iterable[Any]]) -> "InsertValues":
        return self._advance(values_clause(values), InsertValues)


class InsertValues(_Executable):
    """Complete INSERT; only execute() remains."""
    __slots__ = ()


# ===============
# UPDATE
# ===============

class UpdateTable(_Joinable, _Assignable):
    """UPDATE <table>."""
    __slots__ = ()


class UpdateJoined(_Joinable, _Assignable):
    __slots__ = ()


class UpdateSet(_Filterable, _Limitable, _Executable):
    __slots__ = ()


# ===============
# DELETE
# ===============

class DeleteFrom(_Joinable, _Filterable, _Limitable):
    """DELETE FROM <table>; not executable until filtered, joined or limited."""
    __slots__ = ()


class DeleteJoined(_Joinable, _Filterable, _Limitable, _Executable):
    __slots__ = ()


_JOINED_STATES = {
    StatementKind.SELECT: SelectJoined,
    StatementKind.UPDATE: UpdateJoined,
    StatementKind.DELETE: DeleteJoined,
}

_FILTERED_STATES = {
    StatementKind.SELECT: SelectFiltered,
    StatementKind.UPDATE: Filtered,
    StatementKind.DELETE: Filtered,
}


# ===============
# Entry points
# ===============

def select(connection: Any, columns: Union[str, Iterable[str]]) -> SelectColumns:
    return SelectColumns(select_statement(connection, columns))


def insert(connection: Any, table: str) -> InsertInto:
    return InsertInto(insert_statement(connection, table))


def update(connection: Any, table: str) -> UpdateTable:
    return UpdateTable(update_statement(connection, table))


def delete(connection: Any, table: str) -> DeleteFrom:
    return DeleteFrom(delete_statement(connection, table))

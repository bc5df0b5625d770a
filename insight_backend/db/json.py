"""SQL-side JSON object construction, compiled per dialect."""

from __future__ import annotations

from typing import Any

from sqlalchemy import literal_column
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement

from .types import JSONDocument


class json_object(FunctionElement):
    """``json_object(k1, v1, k2, v2, ...)`` on SQLite, ``jsonb_build_object`` on Postgres."""

    type = JSONDocument()
    name = "json_object"
    inherit_cache = True


@compiles(json_object)
def _compile_json_object(element, compiler, **kw):
    return "json_object(%s)" % compiler.process(element.clauses, **kw)


@compiles(json_object, "postgresql")
def _compile_jsonb_build_object(element, compiler, **kw):
    return "jsonb_build_object(%s)" % compiler.process(element.clauses, **kw)


def build_json_object(**fields: Any) -> json_object:
    """Fold column expressions into a single JSON object expression.

    Keys are rendered inline; they are code constants, never user input.
    """
    args: list[Any] = []
    for key, value in fields.items():
        args.append(literal_column(f"'{key}'"))
        args.append(value)
    return json_object(*args)

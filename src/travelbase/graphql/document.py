"""
Minimal GraphQL document builder.

A document is a tree of ``Field`` nodes. Arguments are rendered inline as
GraphQL literals; mutations pass their payload through declared ``Variable``s
instead. Everything here is immutable so selection sets can be shared as
module-level constants.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple, Union

from travelbase.common.time import format_date

Selection = Union[str, "Field"]


@dataclass(frozen=True)
class VariableRef:
    """Reference to a declared variable inside an argument list (``$input``)."""
    name: str


@dataclass(frozen=True)
class Variable:
    name: str
    type_name: str
    required: bool = False

    def render(self) -> str:
        return f"${self.name}: {self.type_name}{'!' if self.required else ''}"

    @property
    def ref(self) -> VariableRef:
        return VariableRef(self.name)


@dataclass(frozen=True)
class Field:
    name: str
    selections: Tuple[Selection, ...] = ()
    arguments: Tuple[Tuple[str, Any], ...] = ()

    @classmethod
    def of(cls, name: str, *selections: Selection, **arguments: Any) -> "Field":
        """Build a field, dropping absent arguments so they are never sent as null."""
        args = tuple((k, v) for k, v in arguments.items() if not is_absent(v))
        return cls(name=name, selections=tuple(selections), arguments=args)

    def render(self, indent: int = 0) -> str:
        pad = "  " * indent
        head = pad + self.name
        if self.arguments:
            head += "(" + ", ".join(f"{k}: {render_value(v)}" for k, v in self.arguments) + ")"
        if not self.selections:
            return head
        lines = [head + " {"]
        for sel in self.selections:
            if isinstance(sel, Field):
                lines.append(sel.render(indent + 1))
            else:
                lines.append("  " * (indent + 1) + sel)
        lines.append(pad + "}")
        return "\n".join(lines)


@dataclass(frozen=True)
class Operation:
    """A ready-to-send document plus its variables."""
    kind: str  # "query" | "mutation"
    name: str
    root: Field
    variable_definitions: Tuple[Variable, ...] = ()
    variables: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # read-only view
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    @property
    def document(self) -> str:
        head = f"{self.kind} {self.name}"
        if self.variable_definitions:
            head += "(" + ", ".join(v.render() for v in self.variable_definitions) + ")"
        return head + " {\n" + self.root.render(1) + "\n}\n"

    def payload(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"query": self.document, "operationName": self.name}
        if self.variables:
            body["variables"] = dict(self.variables)
        return body


def is_absent(value: Any) -> bool:
    # None, "" and [] all mean "not supplied"; 0 and False are real values
    if value is None:
        return True
    if isinstance(value, (str, list, tuple)) and len(value) == 0:
        return True
    return False


def render_value(value: Any) -> str:
    if isinstance(value, VariableRef):
        return f"${value.name}"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, (date, datetime)):
        return json.dumps(format_date(value))
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, Mapping):
        return "{" + ", ".join(f"{k}: {render_value(v)}" for k, v in value.items()) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(render_value(v) for v in value) + "]"
    raise TypeError(f"Cannot render {type(value).__name__} as a GraphQL literal")


import json
from pathlib import Path
from typing import Iterator, List

from graphql import parse
from graphql.language import FieldNode, OperationDefinitionNode

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def load_fixture_json(name: str) -> dict:
    return json.loads(load_fixture(name))


class FakeTransport:
    """Stands in for GraphQLTransport: records operations, replays canned bodies."""

    def __init__(self, *bodies: str) -> None:
        self.bodies: List[str] = list(bodies)
        self.operations = []
        self.closed = False

    def execute(self, operation) -> str:
        self.operations.append(operation)
        return self.bodies.pop(0)

    def close(self) -> None:
        self.closed = True


def root_field(document: str) -> FieldNode:
    ast = parse(document)
    op = ast.definitions[0]
    assert isinstance(op, OperationDefinitionNode)
    return op.selection_set.selections[0]


def selected_paths(node: FieldNode, prefix: str = "") -> Iterator[str]:
    if node.selection_set is None:
        return
    for sel in node.selection_set.selections:
        path = prefix + sel.name.value
        yield path
        yield from selected_paths(sel, path + ".")


def arguments(node: FieldNode) -> dict:
    return {arg.name.value: arg.value for arg in node.arguments}

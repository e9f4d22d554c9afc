from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

from mad_navigation_cli.models import (
    ClassDeclaration,
    CompilationUnit,
    ListElement,
    ListLiteral,
    MethodDeclaration,
    NamedArgument,
    Span,
)

_LANGUAGE = "dart"

_CLASS_TYPES = frozenset({"class_definition", "class_declaration"})
_COMMENT_TYPES = frozenset({"comment", "documentation_comment"})
_IDENTIFIER_TYPES = frozenset({"identifier", "type_identifier"})
_SIGNATURE_KINDS = {
    "function_signature": "method",
    "getter_signature": "getter",
    "setter_signature": "setter",
}
_MEMBER_HOLDERS = frozenset({"method_signature", "declaration"})


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")


def _span(start: Node, end: Node | None = None) -> Span:
    return Span(start_byte=start.start_byte, end_byte=(end if end is not None else start).end_byte)


def _named(node: Node) -> list[Node]:
    return [child for child in node.named_children if child.type not in _COMMENT_TYPES]


def _first_child(node: Node, types: frozenset[str] | set[str]) -> Node | None:
    for child in node.children:
        if child.type in types:
            return child
    return None


def _field_or_child(node: Node, field: str, types: frozenset[str] | set[str]) -> Node | None:
    child = node.child_by_field_name(field)
    if child is not None:
        return child
    return _first_child(node, types)


def _find_descendant(node: Node, types: frozenset[str] | set[str], max_depth: int) -> Node | None:
    """Breadth-first search for the first descendant of one of ``types``."""
    level = list(node.children)
    for _ in range(max_depth):
        for child in level:
            if child.type in types:
                return child
        level = [grandchild for child in level for grandchild in child.children]
    return None


def _comma_groups(children: list[Node]) -> tuple[list[list[Node]], bool]:
    """Split sibling nodes at ``,`` tokens.

    Returns the groups and whether the sequence ends with a trailing comma.
    Expressions such as ``Foo(x)`` are not wrapped by the grammar, so one
    element may span several siblings.
    """
    groups: list[list[Node]] = []
    current: list[Node] = []
    trailing = False
    for child in children:
        if child.type in _COMMENT_TYPES:
            continue
        if child.type == ",":
            if current:
                groups.append(current)
            current = []
            trailing = True
            continue
        if child.is_named:
            current.append(child)
            trailing = False
    if current:
        groups.append(current)
    return groups, trailing


# ---------------------------------------------------------------------------
# Node -> model conversion
# ---------------------------------------------------------------------------


def _superclass(node: Node, source: bytes) -> tuple[str | None, str | None]:
    """Return ``(written_type, bare_name)`` of an ``extends`` clause, e.g. ``("NavPage<Never>", "NavPage")``."""
    parts = [child for child in _named(node) if child.type != "mixins"]
    if not parts:
        return None, None
    written = source[parts[0].start_byte : parts[-1].end_byte].decode("utf-8")
    names = [child for child in parts if child.type in _IDENTIFIER_TYPES]
    name = _text(names[-1], source) if names else written.split("<", 1)[0].strip()
    return written, name


def _interfaces(node: Node, source: bytes) -> list[str]:
    groups, _ = _comma_groups(node.children)
    names: list[str] = []
    for group in groups:
        identifiers = [child for child in group if child.type in _IDENTIFIER_TYPES]
        if not identifiers:
            found = _find_descendant(group[0], _IDENTIFIER_TYPES, max_depth=2)
            identifiers = [found] if found is not None else []
        if identifiers:
            names.append(_text(identifiers[-1], source))
    return names


def _list_literal(node: Node, source: bytes) -> ListLiteral:
    children = node.children
    open_index = next((i for i, child in enumerate(children) if child.type == "["), -1)
    close_index = next((i for i in range(len(children) - 1, -1, -1) if children[i].type == "]"), len(children))
    right_bracket = children[close_index].start_byte if close_index < len(children) else node.end_byte

    groups, trailing = _comma_groups(children[open_index + 1 : close_index])
    return ListLiteral(
        span=_span(node),
        right_bracket=right_bracket,
        elements=[_list_element(group, source) for group in groups],
        has_trailing_comma=trailing,
    )


def _list_element(nodes: list[Node], source: bytes) -> ListElement:
    span = _span(nodes[0], nodes[-1])
    # An invocation of a plain identifier is an identifier followed by one
    # argument selector: ``PageMapper(routes: [...])``.
    if len(nodes) != 2 or nodes[0].type != "identifier" or nodes[1].type != "selector":
        return ListElement(span=span)
    arguments = _find_descendant(nodes[1], {"arguments"}, max_depth=2)
    if arguments is None:
        return ListElement(span=span)
    return ListElement(
        span=span,
        callee=_text(nodes[0], source),
        named_arguments=_named_arguments(arguments, source),
    )


def _named_arguments(arguments: Node, source: bytes) -> list[NamedArgument]:
    result: list[NamedArgument] = []
    for argument in _named(arguments):
        if argument.type != "named_argument":
            continue
        label = _first_child(argument, {"label"})
        name_node = _first_child(label, _IDENTIFIER_TYPES) if label is not None else None
        if name_node is None:
            continue
        values = [child for child in _named(argument) if child.type != "label"]
        value = None
        if len(values) == 1 and values[0].type == "list_literal":
            value = _list_literal(values[0], source)
        result.append(NamedArgument(name=_text(name_node, source), span=_span(argument), value=value))
    return result


def _method(name: str, kind: str, body: Node | None, source: bytes) -> MethodDeclaration:
    if body is None:
        return MethodDeclaration(name=name, kind=kind)

    nodes = _named(body)
    if any(node.type == "block" for node in nodes):
        return MethodDeclaration(name=name, kind=kind, body_kind="block")

    if len(nodes) == 1:
        expression = nodes[0]
        returned_list = _list_literal(expression, source) if expression.type == "list_literal" else None
        return MethodDeclaration(
            name=name,
            kind=kind,
            body_kind="expression",
            expression_type=expression.type,
            returned_list=returned_list,
        )
    return MethodDeclaration(name=name, kind=kind, body_kind="expression", expression_type="compound")


def _signature(node: Node, source: bytes) -> tuple[str, str] | None:
    if node.type not in _MEMBER_HOLDERS:
        return None
    signature = _find_descendant(node, frozenset(_SIGNATURE_KINDS), max_depth=2)
    if signature is None:
        return None
    name_node = _field_or_child(signature, "name", {"identifier"})
    if name_node is None:
        return None
    return _text(name_node, source), _SIGNATURE_KINDS[signature.type]


def _members(body: Node, source: bytes) -> list[MethodDeclaration]:
    members: list[MethodDeclaration] = []
    pending: tuple[str, str] | None = None
    for child in body.children:
        if child.type in _COMMENT_TYPES:
            continue
        if child.type == "function_body":
            if pending is not None:
                members.append(_method(*pending, child, source))
                pending = None
            continue
        # Anything else ends a body-less member (abstract method, ``;``).
        if pending is not None:
            members.append(_method(*pending, None, source))
            pending = None
        pending = _signature(child, source)
    if pending is not None:
        members.append(_method(*pending, None, source))
    return members


def _class_to_model(node: Node, source: bytes) -> ClassDeclaration | None:
    body = _field_or_child(node, "body", {"class_body"})
    name_node = _field_or_child(node, "name", _IDENTIFIER_TYPES)
    if body is None or name_node is None:
        # Mixin application classes (``class A = B with C;``) have no body.
        return None

    closing = next((child for child in reversed(body.children) if child.type == "}"), None)
    superclass_node = _first_child(node, {"superclass"})
    interfaces_node = _first_child(node, {"interfaces"})
    superclass, superclass_name = (
        _superclass(superclass_node, source) if superclass_node is not None else (None, None)
    )

    return ClassDeclaration(
        name=_text(name_node, source),
        span=_span(node),
        superclass=superclass,
        superclass_name=superclass_name,
        interfaces=_interfaces(interfaces_node, source) if interfaces_node is not None else [],
        closing_brace=closing.start_byte if closing is not None else body.end_byte,
        members=_members(body, source),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class TreeSitterDartParser:
    """``SyntaxParser`` backed by the tree-sitter Dart grammar."""

    def __init__(self, parser: Parser | None = None) -> None:
        self._parser = parser if parser is not None else get_parser(_LANGUAGE)

    def parse(self, source: bytes) -> CompilationUnit:
        tree = self._parser.parse(source)
        declarations = []
        for node in tree.root_node.named_children:
            if node.type not in _CLASS_TYPES:
                continue
            declaration = _class_to_model(node, source)
            if declaration is not None:
                declarations.append(declaration)
        return CompilationUnit(declarations=declarations)


def parse_dart_source(source: bytes | str) -> CompilationUnit:
    if isinstance(source, str):
        source = source.encode("utf-8")
    return TreeSitterDartParser().parse(source)

"""Structural search over parsed Dart files.

Matching is syntactic: superclass and interface names are compared as they
are written in the file. Imports and inheritance chains are not resolved, so
an unrelated class that happens to share a name matches as well.
"""

from collections.abc import Callable, Iterable

from mad_navigation_cli.core.dart_ast import TreeSitterDartParser
from mad_navigation_cli.core.ports.syntax import SyntaxParser
from mad_navigation_cli.models import ClassDeclaration, ListLiteral

ClassWhere = Callable[[ClassDeclaration], bool]


def extends_contains(text: str) -> ClassWhere:
    """Match classes whose written superclass (type arguments included) contains ``text``."""

    def _where(declaration: ClassDeclaration) -> bool:
        return declaration.superclass is not None and text in declaration.superclass

    return _where


def extends_one_of(names: Iterable[str]) -> ClassWhere:
    """Match classes whose superclass name is exactly one of ``names``."""
    allowed = frozenset(names)

    def _where(declaration: ClassDeclaration) -> bool:
        return declaration.superclass_name in allowed

    return _where


def implements_any(names: Iterable[str]) -> ClassWhere:
    allowed = frozenset(names)

    def _where(declaration: ClassDeclaration) -> bool:
        return any(interface in allowed for interface in declaration.interfaces)

    return _where


def find_last_matching_class(
    source: bytes | str,
    where: ClassWhere,
    parser: SyntaxParser | None = None,
) -> ClassDeclaration | None:
    """Return the last top-level class in ``source`` satisfying ``where``.

    An empty file and a file without matches both return ``None``.
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    unit = (parser if parser is not None else TreeSitterDartParser()).parse(source)

    last: ClassDeclaration | None = None
    for declaration in unit.declarations:
        if where(declaration):
            last = declaration
    return last


def find_named_method_return_list(declaration: ClassDeclaration, method_name: str) -> ListLiteral | None:
    """Return the list literal returned by ``method_name`` when its body is ``=> [...]``.

    Returns ``None`` when the member is missing, has a block body, or returns
    anything other than a list literal.
    """
    method = declaration.member(method_name)
    if method is None or method.body_kind != "expression":
        return None
    return method.returned_list

"""Splice rendered fragments into Dart sources.

Every function takes the full file content as bytes and returns the new
content. Exactly one fragment is inserted at one offset; all bytes before and
after it are kept as they are.
"""

import logging
from dataclasses import dataclass

from mad_navigation_cli.core.locator import (
    ClassWhere,
    extends_contains,
    extends_one_of,
    find_last_matching_class,
    find_named_method_return_list,
    implements_any,
)
from mad_navigation_cli.core.ports.syntax import SyntaxParser
from mad_navigation_cli.exceptions import (
    MapperNotFoundError,
    RouteInsertionError,
    RoutersMethodInvalidError,
    ServiceInsertionError,
)
from mad_navigation_cli.models import ListLiteral

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationNames:
    """Names of the mad_navigation types and labels the generator anchors on."""

    service_name: str = "MadNavigationService"
    tab_service_name: str = "MadTabNavigationService"
    route_mapper_name: str = "MadRouteMapper"
    routers_method: str = "routers"
    routes_argument: str = "routes"
    impl_suffix: str = "Impl"

    @property
    def service_interfaces(self) -> tuple[str, str]:
        return self.service_name, self.tab_service_name

    @property
    def service_impl_classes(self) -> tuple[str, str]:
        return f"{self.service_name}{self.impl_suffix}", f"{self.tab_service_name}{self.impl_suffix}"


DEFAULT_NAMES = NavigationNames()


def splice(content: bytes, offset: int, fragment: str | bytes) -> bytes:
    if not 0 <= offset <= len(content):
        raise ValueError(f"Offset {offset} outside of content (length {len(content)})")
    if isinstance(fragment, str):
        fragment = fragment.encode("utf-8")
    return content[:offset] + fragment + content[offset:]


def insert_route_class(
    content: bytes,
    rendered_template: str,
    base_class: str,
    path: str,
    parser: SyntaxParser | None = None,
) -> bytes:
    """Insert a route class after the last class extending ``base_class``, separated by a blank line."""
    declaration = find_last_matching_class(content, extends_contains(base_class), parser)
    if declaration is None:
        raise RouteInsertionError(path)

    offset = declaration.span.end_byte
    logger.debug("Inserting route class after %s at byte %d of %s", declaration.name, offset, path)
    return splice(content, offset, f"\n\n{rendered_template}")


def insert_class_member(
    content: bytes,
    rendered_template: str,
    where: ClassWhere,
    path: str,
    parser: SyntaxParser | None = None,
) -> bytes:
    """Insert a member right before the closing brace of the last class matching ``where``."""
    declaration = find_last_matching_class(content, where, parser)
    if declaration is None:
        raise ServiceInsertionError(path)

    offset = declaration.closing_brace
    logger.debug("Inserting member into %s at byte %d of %s", declaration.name, offset, path)
    return splice(content, offset, f"\n{rendered_template}\n")


def insert_service_method(
    content: bytes,
    rendered_template: str,
    path: str,
    names: NavigationNames = DEFAULT_NAMES,
    parser: SyntaxParser | None = None,
) -> bytes:
    """Insert an abstract method into the class implementing a navigation service interface."""
    return insert_class_member(content, rendered_template, implements_any(names.service_interfaces), path, parser)


def insert_service_impl_method(
    content: bytes,
    rendered_template: str,
    path: str,
    names: NavigationNames = DEFAULT_NAMES,
    parser: SyntaxParser | None = None,
) -> bytes:
    """Insert a concrete method into the class extending a ``<Service>Impl`` base."""
    return insert_class_member(content, rendered_template, extends_one_of(names.service_impl_classes), path, parser)


def _append_to_list(content: bytes, target: ListLiteral, fragment: str) -> bytes:
    """Append ``fragment`` as the last element of ``target``.

    A list ending in a trailing comma, or an empty one, gets ``<fragment>\\n``
    right before ``]``. When the last element has no trailing comma the
    fragment is spliced after that element as ``, <fragment>`` instead of
    before ``]``, so ``[A()]`` becomes ``[A(), <fragment>]`` rather than the
    invalid ``[A()<fragment>]``.
    """
    if target.elements and not target.has_trailing_comma:
        return splice(content, target.elements[-1].span.end_byte, f", {fragment}")
    return splice(content, target.right_bracket, f"{fragment}\n")


def insert_mapper(
    content: bytes,
    full_new_mapper_template: str,
    rendered_template: str,
    type_name: str,
    path: str,
    names: NavigationNames = DEFAULT_NAMES,
    parser: SyntaxParser | None = None,
) -> bytes:
    """Register a route builder in the route mapper.

    When the ``routers`` list already holds a ``<type_name>...(routes: [...])``
    call, ``rendered_template`` is appended to that inner list. Otherwise
    ``full_new_mapper_template`` is appended to the ``routers`` list itself.
    """
    declaration = find_last_matching_class(content, extends_contains(names.route_mapper_name), parser)
    if declaration is None:
        raise MapperNotFoundError(path)

    routers = find_named_method_return_list(declaration, names.routers_method)
    if routers is None:
        raise RoutersMethodInvalidError(path)

    for element in routers.elements:
        if element.callee is None or not element.callee.startswith(type_name):
            continue
        for argument in element.named_arguments:
            if argument.name != names.routes_argument or argument.value is None:
                continue
            logger.debug("Appending builder to %s.%s in %s", element.callee, argument.name, path)
            return _append_to_list(content, argument.value, rendered_template)

    logger.debug("No %s mapper in %s, appending a new section", type_name, path)
    return _append_to_list(content, routers, full_new_mapper_template)

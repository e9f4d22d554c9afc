"""String templates for the generated Dart fragments.

Each function returns a rendered fragment that the insertion engine splices
into an existing file verbatim. Templates stay minimal to keep diffs in the
target project readable.
"""

from jinja2 import Environment, StrictUndefined

from mad_navigation_cli.models import RouteMeta

# Generating Dart, not HTML.
_env = Environment(autoescape=False, undefined=StrictUndefined, keep_trailing_newline=True)  # noqa: S701

_ROUTE_CLASS = _env.from_string(
    "class {{ type_name }}{{ name }} extends {{ base_class }}<{{ generic }}> {\n"
    "  {{ type_name }}{{ name }}() : super('{{ route_identifier }}');\n"
    "}"
)

_METHOD_NAME = _env.from_string("open{{ type_name }}{{ name }}")

_ABSTRACT_SERVICE_METHOD = _env.from_string("  Future<{{ return_type }}> {{ method_name }}();")

_SERVICE_METHOD = _env.from_string(
    "  @override\n"
    "  Future<{{ return_type }}> {{ method_name }}() => "
    "{% if is_in_tab %}pushToCurrentTab{% else %}pushToRoot{% endif %}({{ type_name }}{{ name }}());"
)

_MAPPER_ENTRY = _env.from_string("MadRouteBuilder<{{ type_name }}{{ name }}>((_) => {{ ui_component }}),")

_NEW_MAPPER = _env.from_string(
    "{{ type_name }}Mapper(\n"
    "      routes: <MadRouteBuilder<{{ base_class }}<dynamic>>>[\n"
    "        {{ entry }}\n"
    "      ],\n"
    "    ),"
)


def route_class(meta: RouteMeta, route_name: str) -> str:
    """Render the route class declaration.

    ``Page`` + ``Settings`` renders::

        class PageSettings extends NavPage<Never> {
          PageSettings() : super('settings');
        }
    """
    return _ROUTE_CLASS.render(
        type_name=meta.type_name,
        name=route_name,
        base_class=meta.base_class,
        generic=meta.generic,
        route_identifier=meta.route_identifier(route_name),
    )


def method_name(meta: RouteMeta, route_name: str) -> str:
    return _METHOD_NAME.render(type_name=meta.type_name, name=route_name)


def abstract_service_method(meta: RouteMeta, method_name: str) -> str:
    """Render the abstract service signature, e.g. ``Future<void> openPageSettings();``."""
    return _ABSTRACT_SERVICE_METHOD.render(return_type=meta.method_return_type, method_name=method_name)


def service_method(meta: RouteMeta, method_name: str, route_name: str) -> str:
    """Render the concrete service method.

    Routes shown inside a tab push with ``pushToCurrentTab``; all others with
    ``pushToRoot``.
    """
    return _SERVICE_METHOD.render(
        return_type=meta.method_return_type,
        method_name=method_name,
        is_in_tab=meta.is_in_tab,
        type_name=meta.type_name,
        name=route_name,
    )


def mapper_entry(meta: RouteMeta, route_name: str, ui_component: str | None = None) -> str:
    """Render one ``MadRouteBuilder`` entry for an existing mapper's routes list.

    ``ui_component`` is inserted verbatim. When omitted the builder body is
    empty and the generated Dart does not compile.
    """
    return _MAPPER_ENTRY.render(type_name=meta.type_name, name=route_name, ui_component=ui_component or "")


def new_mapper(meta: RouteMeta, route_name: str, ui_component: str | None = None) -> str:
    """Render a whole ``<Type>Mapper(routes: [...])`` section holding one entry."""
    return _NEW_MAPPER.render(
        type_name=meta.type_name,
        base_class=meta.base_class,
        entry=mapper_entry(meta, route_name, ui_component),
    )

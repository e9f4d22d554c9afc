import logging

from mad_navigation_cli.core import templates
from mad_navigation_cli.core.files import read_source, update_file
from mad_navigation_cli.core.insertion import (
    DEFAULT_NAMES,
    NavigationNames,
    insert_mapper,
    insert_route_class,
    insert_service_impl_method,
    insert_service_method,
)
from mad_navigation_cli.core.ports.syntax import SyntaxParser
from mad_navigation_cli.exceptions import ConfigError
from mad_navigation_cli.models import AddRouteConfig, RouteMeta

logger = logging.getLogger(__name__)


class AddRoute:
    """Insert one route into the routes, mapper and service files named by ``config``.

    Each step reads its file, computes a single splice and writes the file
    back. Steps are independent: a failure in a later step leaves earlier
    files updated.
    """

    def __init__(
        self,
        route_name: str,
        config: AddRouteConfig,
        meta: RouteMeta,
        names: NavigationNames = DEFAULT_NAMES,
        parser: SyntaxParser | None = None,
    ) -> None:
        self.route_name = route_name
        self.config = config
        self.meta = meta
        self.names = names
        self._parser = parser

    def add_route_class(self, rendered_template: str, base_class: str) -> None:
        path = self.config.routes_path
        content = insert_route_class(read_source(path), rendered_template, base_class, path, self._parser)
        update_file(path, content)

    def add_mapper(self, full_new_mapper_template: str, rendered_template: str) -> None:
        path = self.config.route_mapper_path
        content = insert_mapper(
            read_source(path),
            full_new_mapper_template,
            rendered_template,
            self.meta.type_name,
            path,
            self.names,
            self._parser,
        )
        update_file(path, content)

    def add_to_service(self, rendered_service_template: str, rendered_service_impl_template: str) -> None:
        service_path = self.config.service_path
        impl_path = self.config.service_impl_path
        if not service_path or not impl_path:
            raise ConfigError("servicePath and serviceImplPath are required to update navigation services")

        content = insert_service_method(
            read_source(service_path), rendered_service_template, service_path, self.names, self._parser
        )
        update_file(service_path, content)

        content = insert_service_impl_method(
            read_source(impl_path), rendered_service_impl_template, impl_path, self.names, self._parser
        )
        update_file(impl_path, content)

    def run(self, ui_component: str | None = None) -> None:
        """Render every fragment and apply the whole pipeline.

        Order: route class, services (when ``addToService`` is set), mapper.
        """
        meta, route_name = self.meta, self.route_name
        if not ui_component:
            logger.warning("No UI component given; the generated MadRouteBuilder for %s will be empty", route_name)

        self.add_route_class(templates.route_class(meta, route_name), meta.base_class)

        if self.config.add_to_service:
            method = templates.method_name(meta, route_name)
            self.add_to_service(
                templates.abstract_service_method(meta, method),
                templates.service_method(meta, method, route_name),
            )

        self.add_mapper(
            templates.new_mapper(meta, route_name, ui_component),
            templates.mapper_entry(meta, route_name, ui_component),
        )


def run_add_route(
    config: AddRouteConfig,
    meta: RouteMeta,
    route_name: str,
    ui_component: str | None = None,
) -> None:
    logger.debug("Adding %s route %s", meta.type_name, route_name)
    AddRoute(route_name=route_name, config=config, meta=meta).run(ui_component=ui_component)

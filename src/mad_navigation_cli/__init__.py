from mad_navigation_cli.core.add_route import AddRoute, run_add_route
from mad_navigation_cli.core.config import load_config
from mad_navigation_cli.core.insertion import NavigationNames
from mad_navigation_cli.core.route_meta import BOTTOM_SHEET, DIALOG, PAGE, ROUTE_METAS, TAB_HOLDER
from mad_navigation_cli.exceptions import (
    AddRouteError,
    ConfigError,
    MapperNotFoundError,
    RouteInsertionError,
    RoutersMethodInvalidError,
    ServiceInsertionError,
)
from mad_navigation_cli.models import AddRouteConfig, RouteMeta

__version__ = "0.1.0"

__all__ = [
    "BOTTOM_SHEET",
    "DIALOG",
    "PAGE",
    "ROUTE_METAS",
    "TAB_HOLDER",
    "AddRoute",
    "AddRouteConfig",
    "AddRouteError",
    "ConfigError",
    "MapperNotFoundError",
    "NavigationNames",
    "RouteInsertionError",
    "RouteMeta",
    "RoutersMethodInvalidError",
    "ServiceInsertionError",
    "__version__",
    "load_config",
    "run_add_route",
]

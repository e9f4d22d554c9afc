"""Errors raised while adding a route.

All insertion errors derive from :class:`AddRouteError` so callers can catch
them as one kind and report ``str(error)`` to the user.
"""


class AddRouteError(Exception):
    """Base class for failures while splicing generated code into a file."""

    message_template = "Can't update {path}"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(self.message_template.format(path=path))


class RouteInsertionError(AddRouteError):
    """No class extending the expected base class exists in the routes file."""

    message_template = "Can't insert new page in {path}"


class MapperNotFoundError(AddRouteError):
    """No class extending the route mapper base class exists in the mapper file."""

    message_template = "Can't find or insert page mapper in {path}"


class RoutersMethodInvalidError(AddRouteError):
    """The mapper's routers member is missing or does not return a list literal."""

    message_template = "Invalid 'routers' method body structure in {path}"


class ServiceInsertionError(AddRouteError):
    """No navigation service class (abstract or impl) exists in the file."""

    message_template = "Can't insert new method in {path}"


class ConfigError(Exception):
    """The configuration file is missing, malformed or inconsistent."""

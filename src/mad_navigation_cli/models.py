from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from mad_navigation_cli.core.naming import to_kebab_case

_DEFAULT_GENERIC = "Never"


class RouteMeta(BaseModel):
    """Describes one kind of navigable destination (page, dialog, ...)."""

    model_config = ConfigDict(frozen=True)

    type_name: str = ""
    base_class: str
    generic: str = _DEFAULT_GENERIC
    is_in_tab: bool = False

    @property
    def method_return_type(self) -> str:
        """``void`` for the default generic, otherwise the nullable generic."""
        return "void" if self.generic == _DEFAULT_GENERIC else f"{self.generic}?"

    def route_identifier(self, raw: str) -> str:
        """Kebab-case identifier used as the route path, e.g. ``user-profile``."""
        return to_kebab_case(raw)


class AddRouteConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    routes_path: str = Field(validation_alias=AliasChoices("routesPath", "routes_path"))
    route_mapper_path: str = Field(validation_alias=AliasChoices("routeMapperPath", "route_mapper_path"))
    service_path: str | None = Field(default=None, validation_alias=AliasChoices("servicePath", "service_path"))
    service_impl_path: str | None = Field(
        default=None, validation_alias=AliasChoices("serviceImplPath", "service_impl_path")
    )
    add_to_service: bool = Field(validation_alias=AliasChoices("addToService", "add_to_service"))

    @model_validator(mode="after")
    def _require_service_paths(self) -> "AddRouteConfig":
        if self.add_to_service and not (self.service_path and self.service_impl_path):
            raise ValueError("servicePath and serviceImplPath are required when addToService is true")
        return self


# ---------------------------------------------------------------------------
# Syntax-tree capability models
# ---------------------------------------------------------------------------


class Span(BaseModel):
    start_byte: int
    end_byte: int


class ListLiteral(BaseModel):
    span: Span
    right_bracket: int
    elements: list["ListElement"] = []
    has_trailing_comma: bool = False


class NamedArgument(BaseModel):
    name: str
    span: Span
    value: ListLiteral | None = None


class ListElement(BaseModel):
    """One element of a list literal.

    ``callee`` is set only when the element is an invocation of a plain
    identifier, e.g. ``PageMapper(routes: [...])``.
    """

    span: Span
    callee: str | None = None
    named_arguments: list[NamedArgument] = []


class MethodDeclaration(BaseModel):
    name: str
    kind: str  # "method" | "getter" | "setter"
    body_kind: str | None = None  # "expression" | "block" | None for abstract members
    expression_type: str | None = None
    returned_list: ListLiteral | None = None


class ClassDeclaration(BaseModel):
    name: str
    span: Span
    superclass: str | None = None
    superclass_name: str | None = None
    interfaces: list[str] = []
    closing_brace: int
    members: list[MethodDeclaration] = []

    def member(self, name: str) -> MethodDeclaration | None:
        for method in self.members:
            if method.name == name:
                return method
        return None


class CompilationUnit(BaseModel):
    declarations: list[ClassDeclaration] = []


ListLiteral.model_rebuild()  # necessary for recursive types
NamedArgument.model_rebuild()
ListElement.model_rebuild()

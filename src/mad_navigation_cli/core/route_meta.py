from mad_navigation_cli.models import RouteMeta

PAGE = RouteMeta(type_name="Page", base_class="NavPage")
BOTTOM_SHEET = RouteMeta(type_name="BottomSheet", base_class="NavBottomSheet")
DIALOG = RouteMeta(type_name="Dialog", base_class="NavDialog")
TAB_HOLDER = RouteMeta(type_name="TabHolder", base_class="NavTabHolder", is_in_tab=True)

# Keys match the CLI route-kind flags.
ROUTE_METAS: dict[str, RouteMeta] = {
    "page": PAGE,
    "bottomSheet": BOTTOM_SHEET,
    "dialog": DIALOG,
    "tabHolder": TAB_HOLDER,
}


def resolve_route_meta(kind: str, generic: str | None = None) -> RouteMeta:
    """Return the predefined descriptor for ``kind``, optionally with a result type."""
    try:
        meta = ROUTE_METAS[kind]
    except KeyError:
        raise ValueError(f"Unsupported route kind '{kind}'. Supported: {sorted(ROUTE_METAS)}") from None
    if generic:
        return meta.model_copy(update={"generic": generic})
    return meta

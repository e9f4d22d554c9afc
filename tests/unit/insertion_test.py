"""Unit tests for splicing fragments into Dart sources."""

import pytest

from mad_navigation_cli.core import templates
from mad_navigation_cli.core.insertion import (
    NavigationNames,
    insert_mapper,
    insert_route_class,
    insert_service_impl_method,
    insert_service_method,
    splice,
)
from mad_navigation_cli.core.route_meta import DIALOG, PAGE
from mad_navigation_cli.exceptions import (
    MapperNotFoundError,
    RouteInsertionError,
    RoutersMethodInvalidError,
    ServiceInsertionError,
)

_PATH = "lib/navigation/file.dart"


def _remove_once(patched: bytes, fragment: bytes) -> bytes:
    index = patched.index(fragment)
    return patched[:index] + patched[index + len(fragment) :]


class TestSplice:
    def test_inserts_at_offset(self) -> None:
        assert splice(b"abcd", 2, "XY") == b"abXYcd"

    def test_accepts_both_ends(self) -> None:
        assert splice(b"ab", 0, b"_") == b"_ab"
        assert splice(b"ab", 2, b"_") == b"ab_"

    @pytest.mark.parametrize("offset", [-1, 3])
    def test_rejects_out_of_range_offset(self, offset: int) -> None:
        with pytest.raises(ValueError, match="outside of content"):
            splice(b"ab", offset, "x")


class TestInsertRouteClass:
    def test_inserts_after_last_matching_class(self, routes_source: str) -> None:
        original = routes_source.encode()
        rendered = templates.route_class(PAGE, "Settings")

        patched = insert_route_class(original, rendered, PAGE.base_class, _PATH)

        home_end = original.index(b"}\n", original.index(b"class PageHome")) + 1
        expected = original[:home_end] + f"\n\n{rendered}".encode() + original[home_end:]
        assert patched == expected
        assert b"class PageSettings extends NavPage<Never> {" in patched

    def test_removing_fragment_restores_original(self, routes_source: str) -> None:
        original = routes_source.encode()
        rendered = templates.route_class(PAGE, "Settings")

        patched = insert_route_class(original, rendered, PAGE.base_class, _PATH)

        assert _remove_once(patched, f"\n\n{rendered}".encode()) == original

    def test_raises_when_base_class_missing(self, routes_source: str) -> None:
        with pytest.raises(RouteInsertionError, match="Can't insert new page in lib/navigation/file.dart") as exc:
            insert_route_class(routes_source.encode(), "class X {}", "NavBottomSheet", _PATH)
        assert exc.value.path == _PATH

    def test_raises_for_empty_file(self) -> None:
        with pytest.raises(RouteInsertionError):
            insert_route_class(b"", "class X {}", "NavPage", _PATH)


class TestInsertServiceMethods:
    def test_abstract_method_goes_before_closing_brace(self, service_source: str) -> None:
        original = service_source.encode()
        rendered = templates.abstract_service_method(PAGE, "openPageSettings")

        patched = insert_service_method(original, rendered, _PATH)

        assert patched.decode().endswith(
            "  Future<bool?> openDialogConfirm();\n\n  Future<void> openPageSettings();\n}\n"
        )
        assert b"  Future<void> openPageHome();\n" in patched
        assert _remove_once(patched, f"\n{rendered}\n".encode()) == original

    def test_impl_method_goes_before_closing_brace(self, service_impl_source: str) -> None:
        original = service_impl_source.encode()
        rendered = templates.service_method(PAGE, "openPageSettings", "Settings")

        patched = insert_service_impl_method(original, rendered, _PATH)

        closing = original.rindex(b"}")
        assert patched == original[:closing] + f"\n{rendered}\n".encode() + original[closing:]

    def test_abstract_service_missing(self, routes_source: str) -> None:
        with pytest.raises(ServiceInsertionError, match="Can't insert new method in"):
            insert_service_method(routes_source.encode(), "  void x();", _PATH)

    def test_impl_requires_exact_impl_superclass(self) -> None:
        source = b"class A extends MadNavigationServiceImplementation {}\n"
        with pytest.raises(ServiceInsertionError):
            insert_service_impl_method(source, "  void x() {}", _PATH)

    def test_custom_service_names(self) -> None:
        source = b"abstract class Nav implements MyService {\n}\n"
        names = NavigationNames(service_name="MyService", tab_service_name="MyTabService")

        patched = insert_service_method(source, "  void x();", _PATH, names)

        assert patched == b"abstract class Nav implements MyService {\n\n  void x();\n}\n"


class TestInsertMapper:
    def test_appends_to_existing_mapper_routes(self, mapper_source: str) -> None:
        original = mapper_source.encode()
        entry = templates.mapper_entry(PAGE, "Settings", "SettingsPage()")
        section = templates.new_mapper(PAGE, "Settings", "SettingsPage()")

        patched = insert_mapper(original, section, entry, PAGE.type_name, _PATH)

        inner_bracket = original.index(b"]", original.index(b"routes:"))
        assert patched == original[:inner_bracket] + f"{entry}\n".encode() + original[inner_bracket:]
        assert patched.count(b"PageMapper(") == 1

    def test_appends_new_section_for_unknown_type(self, mapper_source: str) -> None:
        original = mapper_source.encode()
        entry = templates.mapper_entry(DIALOG, "Confirm", "ConfirmDialog()")
        section = templates.new_mapper(DIALOG, "Confirm", "ConfirmDialog()")

        patched = insert_mapper(original, section, entry, DIALOG.type_name, _PATH)

        outer_bracket = original.rindex(b"]")
        assert patched == original[:outer_bracket] + f"{section}\n".encode() + original[outer_bracket:]
        assert patched.count(b"PageMapper(") == 1
        assert patched.count(b"DialogMapper(") == 1

    def test_appends_after_last_element_without_trailing_comma(self) -> None:
        source = b"""\
class AppRouteMapper extends MadRouteMapper {
  List<MadRouteMapperBase> get routers => [PageMapper(routes: [MadRouteBuilder<PageHome>((_) => HomePage())])];
}
"""
        entry = templates.mapper_entry(PAGE, "Settings", "SettingsPage()")

        patched = insert_mapper(source, "unused", entry, PAGE.type_name, _PATH)

        assert b"HomePage()), MadRouteBuilder<PageSettings>((_) => SettingsPage()),])];" in patched
        assert _remove_once(patched, f", {entry}".encode()) == source

    def test_appends_to_empty_routers_list(self) -> None:
        source = b"class AppRouteMapper extends MadRouteMapper {\n  List<Object> get routers => [];\n}\n"

        patched = insert_mapper(source, "PageMapper(routes: [])", "entry", PAGE.type_name, _PATH)

        assert patched == (
            b"class AppRouteMapper extends MadRouteMapper {\n"
            b"  List<Object> get routers => [PageMapper(routes: [])\n];\n"
            b"}\n"
        )

    def test_mapper_class_missing(self, routes_source: str) -> None:
        with pytest.raises(MapperNotFoundError, match="Can't find or insert page mapper in"):
            insert_mapper(routes_source.encode(), "s", "e", PAGE.type_name, _PATH)

    def test_routers_with_block_body(self) -> None:
        source = b"""\
class AppRouteMapper extends MadRouteMapper {
  List<MadRouteMapperBase> get routers {
    return [PageMapper(routes: [])];
  }
}
"""
        with pytest.raises(RoutersMethodInvalidError, match="Invalid 'routers' method body structure in"):
            insert_mapper(source, "s", "e", PAGE.type_name, _PATH)

    def test_routers_returning_non_list(self) -> None:
        source = b"class AppRouteMapper extends MadRouteMapper {\n  List<Object> get routers => _routers;\n}\n"
        with pytest.raises(RoutersMethodInvalidError):
            insert_mapper(source, "s", "e", PAGE.type_name, _PATH)

    def test_routers_missing(self) -> None:
        source = b"class AppRouteMapper extends MadRouteMapper {\n  List<Object> get pages => [];\n}\n"
        with pytest.raises(RoutersMethodInvalidError):
            insert_mapper(source, "s", "e", PAGE.type_name, _PATH)

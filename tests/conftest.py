"""Shared fixtures and helpers for tests."""

import json
from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from mad_navigation_cli.models import AddRouteConfig

_TESTS_ROOT = Path(__file__).parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_TESTS_ROOT)
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Dart sources shaped like a mad_navigation project
# ---------------------------------------------------------------------------

ROUTES_SOURCE = """\
import 'package:mad_navigation/mad_navigation.dart';

class PageHome extends NavPage<Never> {
  PageHome() : super('home');
}

class DialogConfirm extends NavDialog<bool> {
  DialogConfirm() : super('confirm');
}
"""

MAPPER_SOURCE = """\
import 'package:flutter/widgets.dart';
import 'package:mad_navigation/mad_navigation.dart';

class AppRouteMapper extends MadRouteMapper {
  @override
  List<MadRouteMapperBase> get routers => [
        PageMapper(
          routes: [
            MadRouteBuilder<PageHome>((_) => const HomePage()),
          ],
        ),
      ];
}
"""

SERVICE_SOURCE = """\
import 'package:mad_navigation/mad_navigation.dart';

abstract class AppNavigationService implements MadTabNavigationService {
  Future<void> openPageHome();

  Future<bool?> openDialogConfirm();
}
"""

SERVICE_IMPL_SOURCE = """\
import 'package:mad_navigation/mad_navigation.dart';

class AppNavigationServiceImpl extends MadTabNavigationServiceImpl implements AppNavigationService {
  @override
  Future<void> openPageHome() => pushToRoot(PageHome());

  @override
  Future<bool?> openDialogConfirm() => pushToRoot(DialogConfirm());
}
"""


@pytest.fixture
def dart_parser() -> Parser:
    """Return a tree-sitter parser for Dart."""
    return get_parser("dart")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Write a minimal navigation setup and its config into ``tmp_path``."""
    nav = tmp_path / "lib" / "navigation"
    nav.mkdir(parents=True)
    (nav / "routes.dart").write_text(ROUTES_SOURCE, encoding="utf-8")
    (nav / "route_mapper.dart").write_text(MAPPER_SOURCE, encoding="utf-8")
    (nav / "navigation_service.dart").write_text(SERVICE_SOURCE, encoding="utf-8")
    (nav / "navigation_service_impl.dart").write_text(SERVICE_IMPL_SOURCE, encoding="utf-8")
    config = {
        "routesPath": str(nav / "routes.dart"),
        "routeMapperPath": str(nav / "route_mapper.dart"),
        "servicePath": str(nav / "navigation_service.dart"),
        "serviceImplPath": str(nav / "navigation_service_impl.dart"),
        "addToService": True,
    }
    (tmp_path / "mad_navigation.json").write_text(json.dumps(config), encoding="utf-8")
    return tmp_path


@pytest.fixture
def project_config(project_dir: Path) -> AddRouteConfig:
    raw = (project_dir / "mad_navigation.json").read_text(encoding="utf-8")
    return AddRouteConfig.model_validate_json(raw)


@pytest.fixture
def routes_source() -> str:
    return ROUTES_SOURCE


@pytest.fixture
def mapper_source() -> str:
    return MAPPER_SOURCE


@pytest.fixture
def service_source() -> str:
    return SERVICE_SOURCE


@pytest.fixture
def service_impl_source() -> str:
    return SERVICE_IMPL_SOURCE

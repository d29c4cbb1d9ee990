"""Architectural boundary tests using pytest-archon.

These tests verify the layering of the departure board:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters don't depend on application services
- The CLI runs without the web adapters
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library, pydantic and themselves."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("rejse_departures.domain.models*")
        .should_not_import("rejse_departures.adapters*")
        .should_not_import("rejse_departures.application*")
        .should_not_import("rejse_departures.domain.ports*")
        .may_import("rejse_departures.domain.models*")
        .check("rejse_departures")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports should not import adapters or application services."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("rejse_departures.domain.ports*")
        .should_not_import("rejse_departures.adapters*")
        .should_not_import("rejse_departures.application*")
        .may_import("rejse_departures.domain*")
        .check("rejse_departures")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should reach the journey planner only through ports."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("rejse_departures.application*")
        .should_not_import("rejse_departures.adapters*")
        .may_import("rejse_departures.domain*")
        .may_import("rejse_departures.application*")
        .check("rejse_departures")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("rejse_departures.adapters*")
        .should_not_import("rejse_departures.application*")
        .may_import("rejse_departures.domain*")
        .may_import("rejse_departures.adapters*")
        .check("rejse_departures", only_direct_imports=True)
    )


def test_cli_dont_import_web_adapters() -> None:
    """CLI should not import web adapters so it runs without the HTTP server stack."""
    (
        archrule("CLI independence", comment="CLI should not depend on web adapters")
        .match("rejse_departures.cli")
        .should_not_import("rejse_departures.adapters.web*")
        .may_import("rejse_departures.domain*")
        .may_import("rejse_departures.application*")
        .may_import("rejse_departures.adapters*")
        .check("rejse_departures")
    )

"""Architecture tests using pytest-archon.

These tests enforce DDD architectural boundaries between layers
within each bounded context, and between the contexts themselves.
"""

import pytest
from pytest_archon import archrule

BOUNDED_CONTEXTS = ["tenancy", "session", "cart", "catalog", "bootstrap"]


@pytest.mark.parametrize("context", BOUNDED_CONTEXTS)
class TestDomainLayerBoundaries:
    """Tests that the domain layer has no forbidden dependencies."""

    def test_domain_does_not_import_infrastructure(self, context):
        """Domain layer should not know about HTTP clients or HTML."""
        (
            archrule(f"{context}_domain_no_infrastructure")
            .match(f"{context}.domain*")
            .should_not_import(f"{context}.infrastructure*", "infrastructure*")
            .check(context)
        )

    def test_domain_does_not_import_application(self, context):
        """Domain objects should be usable without application services."""
        (
            archrule(f"{context}_domain_no_application")
            .match(f"{context}.domain*")
            .should_not_import(f"{context}.application*")
            .check(context)
        )

    def test_domain_does_not_import_frameworks(self, context):
        """Domain objects should be framework-agnostic."""
        (
            archrule(f"{context}_domain_no_frameworks")
            .match(f"{context}.domain*")
            .should_not_import("fastapi*", "starlette*", "httpx*")
            .check(context)
        )


@pytest.mark.parametrize("context", BOUNDED_CONTEXTS)
class TestPortsLayerBoundaries:
    """Tests that the ports layer has no forbidden dependencies."""

    def test_ports_does_not_import_infrastructure(self, context):
        """Ports define interfaces, not implementations."""
        (
            archrule(f"{context}_ports_no_infrastructure")
            .match(f"{context}.ports*")
            .should_not_import(f"{context}.infrastructure*")
            .check(context)
        )

    def test_ports_does_not_import_application(self, context):
        """Ports are used by the application layer, not the other way around."""
        (
            archrule(f"{context}_ports_no_application")
            .match(f"{context}.ports*")
            .should_not_import(f"{context}.application*")
            .check(context)
        )


@pytest.mark.parametrize("context", BOUNDED_CONTEXTS)
class TestApplicationLayerBoundaries:
    """Tests that the application layer depends on ports, not adapters."""

    def test_application_does_not_import_infrastructure(self, context):
        """Application services receive adapters through their ports."""
        (
            archrule(f"{context}_application_no_infrastructure")
            .match(f"{context}.application*")
            .should_not_import(f"{context}.infrastructure*")
            .check(context)
        )

    def test_application_does_not_import_presentation(self, context):
        """Application services must not know about HTTP routes."""
        (
            archrule(f"{context}_application_no_presentation")
            .match(f"{context}.application*")
            .should_not_import(f"{context}.presentation*", "fastapi*")
            .check(context)
        )


class TestContextIsolation:
    """Tests that contexts only meet where the composition roots join them."""

    @pytest.mark.parametrize(
        ("context", "forbidden"),
        [
            ("tenancy", ["session*", "cart*", "catalog*", "bootstrap*"]),
            ("session", ["tenancy*", "cart*", "catalog*", "bootstrap*"]),
            ("cart", ["tenancy*", "session*", "catalog*", "bootstrap*"]),
            ("catalog", ["tenancy*", "session*", "cart*", "bootstrap*"]),
        ],
    )
    def test_leaf_contexts_are_independent(self, context, forbidden):
        """Only the bootstrap context composes the others."""
        (
            archrule(f"{context}_isolated")
            .match(f"{context}*")
            .should_not_import(*forbidden)
            .check(context)
        )

    def test_shared_kernel_does_not_import_contexts(self):
        """The shared kernel sits below every bounded context."""
        (
            archrule("shared_kernel_no_contexts")
            .match("shared_kernel*")
            .should_not_import(*(f"{context}*" for context in BOUNDED_CONTEXTS))
            .check("shared_kernel")
        )

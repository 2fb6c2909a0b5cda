"""
Tests for read-only resources: declaration checks, URI matching, registry
resolution and the ZenTao resource catalog.
"""

import pytest
from unittest.mock import AsyncMock

from catalog import build_resource_registry
from catalog.base import endpoint, resource
from catalog.resources import RESOURCES
from engine.errors import ConfigurationError, ErrorKind, UnknownResource
from engine.resources import ResourceRegistry, ResourceSpec
from engine.schema import HttpMethod, ParameterKind, ParameterSpec, ToolSpec
from engine.transport import TransportClient

RESOURCE_SPECS = [spec for spec, _ in RESOURCES]


def backing_tool(*names, method=HttpMethod.GET, kind=ParameterKind.STRING):
    return ToolSpec(
        name="backing",
        description="d",
        method=method,
        path_template="/index.php?m=product&f=view&t=json",
        params=tuple(ParameterSpec(name=name, kind=kind, required=True) for name in names),
    )


@pytest.fixture
def transport():
    spy = AsyncMock(spec=TransportClient)
    spy.get.return_value = b'{"status":"success"}'
    return spy


@pytest.fixture
def registry(transport):
    registry = ResourceRegistry(transport)
    registry.register_all(
        [
            resource("zentao://products", "Products", endpoint("product", "browse")),
            resource("zentao://products/{id}", "Product", endpoint("product", "view")),
            resource("zentao://products/all", "All Products", endpoint("product", "all")),
            resource(
                "zentao://products/{productID}/builds",
                "Product Builds",
                endpoint("build", "browse"),
                keys={"productID": "product"},
            ),
        ]
    )
    registry.seal()
    return registry


class TestResourceSpec:
    def test_post_backing_is_rejected(self):
        with pytest.raises(ConfigurationError, match="must be a GET"):
            ResourceSpec(
                uri_template="zentao://products/{id}",
                name="Product",
                tool=backing_tool("id", method=HttpMethod.POST),
            )

    def test_parameters_must_match_variables(self):
        with pytest.raises(ConfigurationError, match="do not match URI variables"):
            ResourceSpec(uri_template="zentao://products/{id}", name="Product", tool=backing_tool("productID"))

    def test_variables_must_be_strings(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ResourceSpec(
                uri_template="zentao://products/{id}",
                name="Product",
                tool=backing_tool("id", kind=ParameterKind.INTEGER),
            )
        assert exc_info.value.kind == ErrorKind.CONFIGURATION
        assert exc_info.value.details["parameter"] == "id"

    def test_repeated_variable_is_rejected(self):
        with pytest.raises(ConfigurationError, match="repeated URI variable"):
            ResourceSpec(uri_template="zentao://{id}/{id}", name="Twice", tool=backing_tool("id"))

    def test_match(self):
        spec, _ = resource("zentao://{objectType}/{objectID}/testreports", "Reports", "/index.php?m=x")

        assert spec.variables == ("objectType", "objectID")
        assert spec.match("zentao://projects/4/testreports") == {"objectType": "projects", "objectID": "4"}
        assert spec.match("zentao://projects/4") is None
        assert spec.match("zentao://projects/4/5/testreports") is None

    def test_match_unquotes_values(self):
        spec, _ = resource("zentao://users/{account}", "User", "/index.php?m=x")

        assert spec.match("zentao://users/li%20lei") == {"account": "li lei"}

    def test_manifest_entries(self):
        concrete, _ = resource("zentao://products", "Products", "/index.php?m=x", "All products")
        template, _ = resource("zentao://products/{id}", "Product", "/index.php?m=x")

        assert concrete.to_manifest_entry() == {
            "uri": "zentao://products",
            "name": "Products",
            "mimeType": "application/json",
            "description": "All products",
        }
        assert template.to_manifest_entry() == {
            "uriTemplate": "zentao://products/{id}",
            "name": "Product",
            "mimeType": "application/json",
        }


class TestResourceRegistry:
    def test_listing(self, registry):
        assert len(registry) == 4
        assert [spec.uri_template for spec in registry.list_resources()] == [
            "zentao://products",
            "zentao://products/all",
        ]
        assert [spec.uri_template for spec in registry.list_templates()] == [
            "zentao://products/{id}",
            "zentao://products/{productID}/builds",
        ]

    def test_duplicate_uri_is_rejected(self, transport):
        registry = ResourceRegistry(transport)
        registry.register(*resource("zentao://products", "Products", "/index.php?m=x"))

        with pytest.raises(ConfigurationError, match="already registered"):
            registry.register(*resource("zentao://products", "Again", "/index.php?m=y"))

    def test_sealed(self, registry):
        assert registry.sealed
        with pytest.raises(ConfigurationError):
            registry.register(*resource("zentao://plans", "Plans", "/index.php?m=x"))

    def test_concrete_resource_wins(self, registry):
        spec, variables = registry.resolve("zentao://products/all")

        assert spec.uri_template == "zentao://products/all"
        assert variables == {}

    def test_template_resolution(self, registry):
        spec, variables = registry.resolve("zentao://products/3/builds")

        assert spec.uri_template == "zentao://products/{productID}/builds"
        assert variables == {"productID": "3"}

    def test_unknown_uri(self, registry):
        with pytest.raises(UnknownResource) as exc_info:
            registry.resolve("zentao://nothing")
        assert exc_info.value.kind == ErrorKind.UNKNOWN_RESOURCE
        assert exc_info.value.uri == "zentao://nothing"

    @pytest.mark.asyncio
    async def test_read_uses_wire_names(self, registry, transport):
        spec, variables = registry.resolve("zentao://products/3/builds")

        result = await registry.read(spec, variables)

        assert result.ok
        assert result.payload == '{"status":"success"}'
        transport.get.assert_awaited_once_with("/index.php?m=build&f=browse&t=json&product=3")

    @pytest.mark.asyncio
    async def test_read_failure_is_a_result(self, registry, transport):
        transport.get.side_effect = RuntimeError("connection reset")
        spec, variables = registry.resolve("zentao://products/3")

        result = await registry.read(spec, variables)

        assert result.ok is False
        assert result.error_message.startswith("Failed to read Product")


class TestResourceCatalog:
    def test_uri_templates_are_unique(self):
        uris = [spec.uri_template for spec in RESOURCE_SPECS]
        assert len(uris) == len(set(uris))

    def test_every_path_uses_the_index_endpoint(self):
        for spec in RESOURCE_SPECS:
            assert spec.tool.path_template.startswith("/index.php?"), spec.uri_template

    def test_build_resource_registry(self, transport):
        registry = build_resource_registry(transport)

        assert registry.sealed
        assert len(registry) == len(RESOURCE_SPECS)
        assert registry.list_resources()
        assert registry.list_templates()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("spec", RESOURCE_SPECS, ids=lambda spec: spec.uri_template)
    async def test_every_resource_reads(self, transport, spec):
        registry = build_resource_registry(transport)
        variables = {
            param.name: param.enum[0] if param.enum else "5" for param in spec.tool.params
        }
        uri = spec.uri_template.format(**variables)

        resolved, bound = registry.resolve(uri)
        result = await registry.read(resolved, bound)

        assert result.ok, result.error_message
        transport.get.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_product_details(self, transport):
        registry = build_resource_registry(transport)

        spec, variables = registry.resolve("zentao://product/5")
        await registry.read(spec, variables)

        transport.get.assert_awaited_once_with("/index.php?m=product&f=view&t=json&id=5")

"""Tests for artifact extraction."""

import pytest

from gql_tsgen.core.config import GeneratorConfig
from gql_tsgen.core.errors import (
    DuplicateRootOperation,
    MissingRootOperation,
    UnsupportedTypeShape,
)
from gql_tsgen.core.extractor import ArtifactExtractor
from gql_tsgen.core.ir import (
    ArtifactCategory,
    IREnum,
    IRInputType,
    IRObjectType,
    IROperation,
    IRTypeRef,
)
from gql_tsgen.core.parser import load_schema, parse_schema


@pytest.fixture
def extractor():
    return ArtifactExtractor()


class TestWidgetSchema:
    """End-to-end extraction of the widget schema."""

    def test_object_type(self, extractor, widget_schema):
        artifacts = extractor.extract(widget_schema)
        assert [t.name for t in artifacts.types] == ["Widget"]
        widget = artifacts.types[0]
        assert widget.description == "A thing you can buy"
        fields = [
            (f.name, f.mapped_type, f.type_ref.nullable, f.type_ref.is_array)
            for f in widget.fields
        ]
        assert fields == [
            ("id", "string", False, False),
            ("name", "string", True, False),
            ("tags", "string", True, True),
        ]

    def test_query_operation(self, extractor, widget_schema):
        artifacts = extractor.extract(widget_schema)
        assert len(artifacts.queries) == 1
        widgets = artifacts.queries[0]
        assert widgets.name == "widgets"
        assert widgets.operation_type is ArtifactCategory.QUERY
        assert widgets.type_ref == IRTypeRef("Widget", nullable=False, is_array=True)
        assert widgets.mapped_type == "Widget"
        assert widgets.arguments == []
        assert widgets.description == "All widgets"

    def test_mutation_operation(self, extractor, widget_schema):
        artifacts = extractor.extract(widget_schema)
        assert len(artifacts.mutations) == 1
        create = artifacts.mutations[0]
        assert create.name == "createWidget"
        assert create.type_ref == IRTypeRef("Widget", nullable=False, is_array=False)
        assert len(create.arguments) == 1
        arg = create.arguments[0]
        assert arg.name == "input"
        assert arg.mapped_type == "string"
        assert arg.type_ref == IRTypeRef("String", nullable=False, is_array=False)
        assert arg.description == "Name of the new widget"

    def test_root_types_are_not_object_types(self, extractor, widget_schema):
        artifacts = extractor.extract(widget_schema)
        names = {t.name for t in artifacts.types}
        assert "Query" not in names
        assert "Mutation" not in names

    def test_missing_descriptions_are_none(self, extractor, widget_schema):
        artifacts = extractor.extract(widget_schema)
        assert artifacts.types[0].fields[1].description is None


class TestClassification:
    """Category assignment and ordering."""

    SCHEMA = """
        input AInput { a: Int }
        input BInput { b: [Int!]! }
        enum Color {
            "Warm"
            RED
            GREEN
        }
        type Widget { id: ID! }
        type Gadget { widget: Widget }
        type Subscription { widgetAdded: Widget }
        type root { version: String }
        scalar Upload
        interface Node { id: ID! }
        union Thing = Widget | Gadget
        type Query { widget(id: ID!): Widget gadget: Gadget version: String }
        type Mutation { addWidget: Widget }
    """

    def test_cardinality_and_order(self, extractor):
        artifacts = extractor.extract(parse_schema(self.SCHEMA))
        categories = [a.category for a in artifacts.all_artifacts]
        assert categories == [
            ArtifactCategory.INPUT,
            ArtifactCategory.INPUT,
            ArtifactCategory.ENUM,
            ArtifactCategory.TYPE,
            ArtifactCategory.TYPE,
            ArtifactCategory.QUERY,
            ArtifactCategory.QUERY,
            ArtifactCategory.QUERY,
            ArtifactCategory.MUTATION,
        ]
        assert len(artifacts) == 2 + 1 + 2 + 3 + 1

    def test_reserved_names_excluded(self, extractor):
        artifacts = extractor.extract(parse_schema(self.SCHEMA))
        assert [t.name for t in artifacts.types] == ["Widget", "Gadget"]

    def test_record_types(self, extractor):
        artifacts = extractor.extract(parse_schema(self.SCHEMA))
        assert all(isinstance(i, IRInputType) for i in artifacts.inputs)
        assert all(type(t) is IRObjectType for t in artifacts.types)
        assert all(isinstance(e, IREnum) for e in artifacts.enums)
        assert all(isinstance(o, IROperation) for o in artifacts.queries)

    def test_enum_values_copied_verbatim(self, extractor):
        artifacts = extractor.extract(parse_schema(self.SCHEMA))
        color = artifacts.enums[0]
        assert [(v.name, v.description) for v in color.values] == [
            ("RED", "Warm"),
            ("GREEN", None),
        ]

    def test_input_fields_resolved(self, extractor):
        artifacts = extractor.extract(parse_schema(self.SCHEMA))
        field = artifacts.inputs[1].fields[0]
        assert field.name == "b"
        assert field.type_ref == IRTypeRef("Int", nullable=False, is_array=True)
        assert field.mapped_type == "number"

    def test_only_requested_categories(self, extractor):
        artifacts = extractor.extract(
            parse_schema(self.SCHEMA), [ArtifactCategory.ENUM]
        )
        assert [a.name for a in artifacts.all_artifacts] == ["Color"]

    def test_locate(self, extractor):
        assert extractor.locate(parse_schema(self.SCHEMA)) == {
            "AInput": ArtifactCategory.INPUT,
            "BInput": ArtifactCategory.INPUT,
            "Color": ArtifactCategory.ENUM,
            "Widget": ArtifactCategory.TYPE,
            "Gadget": ArtifactCategory.TYPE,
        }

    def test_locate_skips_field_resolution(self, extractor):
        document = parse_schema("type Grid { cells: [[Int]] } type Query { grid: Grid }")
        assert extractor.locate(document) == {"Grid": ArtifactCategory.TYPE}


class TestRootOperations:
    """Validation of the Query and Mutation roots."""

    def test_missing_mutation_root(self, extractor):
        document = parse_schema("type Query { ping: String }")
        with pytest.raises(MissingRootOperation) as exc_info:
            extractor.extract(document)
        assert exc_info.value.root_name == "Mutation"
        assert exc_info.value.operation_type == "mutation"

    def test_missing_query_root(self, extractor):
        document = parse_schema("type Mutation { ping: String }")
        with pytest.raises(MissingRootOperation) as exc_info:
            extractor.extract(document)
        assert exc_info.value.root_name == "Query"

    def test_missing_root_allowed_when_not_requested(self, extractor):
        document = parse_schema("type Query { ping: String } type Widget { id: ID }")
        artifacts = extractor.extract(
            document, [ArtifactCategory.TYPE, ArtifactCategory.QUERY]
        )
        assert [a.name for a in artifacts.all_artifacts] == ["Widget", "ping"]

    def test_duplicate_root(self, extractor):
        document = parse_schema(
            "type Query { a: String } type Query { b: String } type Mutation { c: Int }"
        )
        with pytest.raises(DuplicateRootOperation) as exc_info:
            extractor.extract(document)
        assert exc_info.value.count == 2

    def test_custom_root_names(self):
        config = GeneratorConfig(query_root="RootQuery", mutation_root="RootMutation")
        document = parse_schema(
            "type RootQuery { ping: String } type RootMutation { pong: Int }"
        )
        artifacts = ArtifactExtractor(config).extract(document)
        assert [q.name for q in artifacts.queries] == ["ping"]
        assert [m.name for m in artifacts.mutations] == ["pong"]
        assert artifacts.types == []


class TestTypeResolution:
    """Field types flow through the resolver and scalar map."""

    def test_unsupported_shape_aborts(self, extractor):
        document = parse_schema(
            "type Grid { cells: [[Int]] } type Query { a: Int } type Mutation { b: Int }"
        )
        with pytest.raises(UnsupportedTypeShape) as exc_info:
            extractor.extract(document)
        assert exc_info.value.context == "Grid.cells"
        assert "Grid.cells" in str(exc_info.value)

    def test_unsupported_argument_shape(self, extractor):
        document = parse_schema(
            "type Query { find(ids: [[ID!]]): Int } type Mutation { b: Int }"
        )
        with pytest.raises(UnsupportedTypeShape) as exc_info:
            extractor.extract(document)
        assert exc_info.value.context == "Query.find.ids"

    def test_references_pass_through(self, extractor):
        document = parse_schema(
            "type Gadget { widget: Widget! } type Query { a: Int } type Mutation { b: Int }"
        )
        field = extractor.extract(document).types[0].fields[0]
        assert field.mapped_type == "Widget"

    def test_scalar_overrides(self):
        config = GeneratorConfig().with_scalars({"Upload": "File"})
        document = parse_schema(
            "input FileInput { file: Upload! } type Query { a: Int } type Mutation { b: Int }"
        )
        field = ArtifactExtractor(config).extract(document).inputs[0].fields[0]
        assert field.mapped_type == "File"


def test_example_schema(extractor, shop_schema_path):
    artifacts = extractor.extract(load_schema(shop_schema_path))
    assert [i.name for i in artifacts.inputs] == ["ProductInput"]
    assert [e.name for e in artifacts.enums] == ["ProductType", "ProductAvailability"]
    assert [t.name for t in artifacts.types] == ["ProductCategory", "Product"]
    assert [q.name for q in artifacts.queries] == ["product", "products"]
    assert [m.name for m in artifacts.mutations] == ["createProduct", "deleteProduct"]
    products = artifacts.queries[1]
    assert [a.name for a in products.arguments] == ["limit", "availability"]
    assert products.arguments[0].description == "Maximum number of products to return"

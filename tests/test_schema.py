"""Tests for the schema cache and loader."""

import pytest

from gql_assist.core.parser import SchemaParser
from gql_assist.core.projector import JavaProjector
from gql_assist.core.schema import Schema, file_mtime
from gql_assist.core.settings import AssistSettings
from gql_assist.core.workspace import (
    DirectoryLocator,
    FixedLocator,
    StaticWorkspace,
    Workspace,
    WorkspaceLocator,
)


class FakeMtime:
    """Modification time source the tests advance by hand."""

    def __init__(self, value: int = 1):
        self.value = value

    def __call__(self, _path) -> int:
        return self.value


class CountingParser(SchemaParser):
    """SchemaParser that counts how often files are parsed."""

    def __init__(self):
        super().__init__()
        self.parses = 0

    def parse_file(self, path, modified=None):
        self.parses += 1
        return super().parse_file(path, modified)


@pytest.fixture
def workspace(tmp_path):
    return StaticWorkspace("demo", tmp_path)


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(
        '''
        type Query {
            "Look up one person"
            person(id: ID!): Person
            count: Int
        }
        type Person { id: ID! name: String }
        ''',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def clock():
    return FakeMtime()


@pytest.fixture
def parser():
    return CountingParser()


@pytest.fixture
def messages():
    return []


@pytest.fixture
def schema(workspace, parser, clock, messages):
    return Schema(FixedLocator(workspace), parser=parser, mtime=clock).with_diagnostic_sink(
        messages.append
    )


# =============================================================================
# Tests: Queries
# =============================================================================


class TestQueries:
    """Tests for type_names and fields_in."""

    def test_type_names(self, schema, schema_file, messages):
        assert schema.type_names() == {"Query", "Person"}
        assert messages == []

    def test_fields_in_declaration_order(self, schema, schema_file):
        members = list(schema.fields_in("Query"))
        assert [m.name for m in members] == ["person", "count"]
        assert members[0].description == "Look up one person"
        assert members[1].description == ""

    def test_int_field_renders_integer(self, schema, schema_file):
        count = [m for m in schema.fields_in("Query") if m.name == "count"][0]
        assert JavaProjector().method_declaration(count) == "@Query Integer count();"

    def test_unknown_type(self, schema, schema_file, messages):
        assert list(schema.fields_in("Nope")) == []
        assert messages == [f"no type Nope in schema at {schema_file}"]

    def test_empty_schema_is_not_an_error(self, schema, tmp_path, messages):
        (tmp_path / "schema.graphql").write_text("", encoding="utf-8")
        assert schema.type_names() == set()
        assert messages == []

    def test_with_diagnostic_sink_returns_self(self, workspace):
        schema = Schema(FixedLocator(workspace))
        assert schema.with_diagnostic_sink(print) is schema

    def test_without_sink_only_logs(self, workspace, caplog):
        schema = Schema(FixedLocator(workspace))
        with caplog.at_level("DEBUG", logger="gql_assist.core.schema"):
            assert schema.type_names() == set()
        assert "no GraphQL schema found at" in caplog.text


# =============================================================================
# Tests: Resolution failures
# =============================================================================


class TestUnavailable:
    """Each unavailability reason gives an empty result and one message."""

    def test_no_active_workspace(self, messages):
        schema = Schema(FixedLocator(None)).with_diagnostic_sink(messages.append)
        assert schema.type_names() == set()
        assert messages == ["no active workspace"]

    def test_no_base_path(self, messages):
        schema = Schema(FixedLocator(StaticWorkspace("demo"))).with_diagnostic_sink(
            messages.append
        )
        assert list(schema.fields_in("Query")) == []
        assert messages == ["no base path in workspace demo"]

    def test_missing_file(self, schema, tmp_path, messages):
        assert schema.type_names() == set()
        assert len(messages) == 1
        assert str(tmp_path / "schema.graphql") in messages[0]

    def test_parse_error(self, schema, tmp_path, messages):
        (tmp_path / "schema.graphql").write_text("type Person {", encoding="utf-8")
        assert schema.type_names() == set()
        assert len(messages) == 1
        assert messages[0].startswith(f"parsing of schema at {tmp_path / 'schema.graphql'} failed:\n")

    def test_diagnostic_is_logged(self, schema, caplog):
        with caplog.at_level("DEBUG", logger="gql_assist.core.schema"):
            schema.type_names()
        assert "no GraphQL schema found" in caplog.text

    def test_os_error_propagates(self, workspace, schema_file, messages):
        def denied(_path):
            raise PermissionError("denied")

        schema = Schema(FixedLocator(workspace), mtime=denied).with_diagnostic_sink(messages.append)
        with pytest.raises(PermissionError):
            schema.type_names()
        assert messages == []

    def test_custom_schema_file(self, tmp_path, messages):
        (tmp_path / "api").mkdir()
        (tmp_path / "api" / "schema.graphqls").write_text("type Person { a: Int }", encoding="utf-8")
        settings = AssistSettings(schema_file="api/schema.graphqls")
        schema = Schema(DirectoryLocator(tmp_path), settings).with_diagnostic_sink(messages.append)
        assert schema.type_names() == {"Person"}
        assert messages == []


# =============================================================================
# Tests: Caching
# =============================================================================


class TestCaching:
    """Tests for modification-time based re-parsing."""

    def test_repeated_queries_use_cache(self, schema, schema_file, parser):
        projector = JavaProjector()
        first = [projector.method_declaration(m) for m in schema.fields_in("Query")]
        second = [projector.method_declaration(m) for m in schema.fields_in("Query")]

        assert first == second
        assert parser.parses == 1

    def test_unchanged_mtime_keeps_old_snapshot(self, schema, schema_file, parser):
        assert schema.type_names() == {"Query", "Person"}
        schema_file.write_text("type Other { a: Int }", encoding="utf-8")

        assert schema.type_names() == {"Query", "Person"}
        assert parser.parses == 1

    def test_newer_mtime_reparses(self, schema, schema_file, parser, clock):
        assert schema.type_names() == {"Query", "Person"}
        schema_file.write_text(
            schema_file.read_text(encoding="utf-8") + "\ntype Added { a: Int }",
            encoding="utf-8",
        )
        clock.value = 2

        assert "Added" in schema.type_names()
        assert parser.parses == 2

    def test_newer_mtime_with_same_content_reparses(self, schema, schema_file, parser, clock):
        schema.type_names()
        clock.value = 2
        schema.type_names()
        assert parser.parses == 2

    def test_older_mtime_keeps_snapshot(self, schema, schema_file, parser, clock):
        clock.value = 5
        schema.type_names()
        clock.value = 4
        schema.type_names()
        assert parser.parses == 1

    def test_removed_type_disappears(self, schema, schema_file, clock):
        assert "Person" in schema.type_names()
        schema_file.write_text("type Query { count: Int }", encoding="utf-8")
        clock.value = 2
        assert schema.type_names() == {"Query"}

    def test_snapshot_is_shared_until_stale(self, schema, schema_file, clock):
        first = schema.snapshot()
        assert schema.snapshot() is first
        clock.value = 2
        assert schema.snapshot() is not first

    def test_invalidate(self, schema, schema_file, parser):
        schema.type_names()
        schema.invalidate()
        schema.type_names()
        assert parser.parses == 2

    def test_failed_reparse_reports_error(self, schema, schema_file, clock, messages):
        schema.type_names()
        schema_file.write_text("type {", encoding="utf-8")
        clock.value = 2

        assert schema.type_names() == set()
        assert len(messages) == 1

    def test_other_workspace_is_parsed(self, tmp_path, clock, parser):
        for name in ("one", "two"):
            (tmp_path / name).mkdir()
            (tmp_path / name / "schema.graphql").write_text(
                f"type {name.capitalize()} {{ a: Int }}", encoding="utf-8"
            )
        locator = FixedLocator(StaticWorkspace("one", tmp_path / "one"))
        schema = Schema(locator, parser=parser, mtime=clock)

        assert schema.type_names() == {"One"}
        locator.workspace = StaticWorkspace("two", tmp_path / "two")
        assert schema.type_names() == {"Two"}


class TestDefaults:
    """Tests for the default collaborators."""

    def test_file_mtime(self, schema_file):
        assert file_mtime(schema_file) == schema_file.stat().st_mtime_ns

    def test_directory_locator(self, tmp_path):
        locator = DirectoryLocator(tmp_path)
        workspace = locator.active_workspace()
        assert isinstance(locator, WorkspaceLocator)
        assert isinstance(workspace, Workspace)
        assert workspace.root_path() == tmp_path.resolve()
        assert workspace.name == tmp_path.resolve().name

    def test_real_file_system(self, tmp_path, schema_file):
        schema = Schema(DirectoryLocator(tmp_path))
        assert schema.type_names() == {"Query", "Person"}

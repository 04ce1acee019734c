"""
Tests for the end-to-end export preservation entrypoint.
"""

import logging

import pytest

from deadlyembrace import (
    AnomalyCodes,
    Config,
    DuplicateOutputError,
    ResolveOptions,
    UnresolvedExportNameError,
    unsafe_resolve_deadly_embrace,
)
from deadlyembrace.model import Deferred, Stack, allocate_logical_id
from deadlyembrace.platforms import NativePlatform


class FailingPlatform(NativePlatform):

    def add_output(self, stack, output_id, value, export_name):
        raise RuntimeError("registry unavailable")


class TestUnsafeResolveDeadlyEmbrace:
    """End-to-end over the native model."""

    def test_exports_arn_and_name(self, stack, table):
        unsafe_resolve_deadly_embrace(table)

        outputs = stack.to_template()["Outputs"]
        assert len(outputs) == 2

        logical_id = allocate_logical_id(table.node.default_child)
        values = [o["Value"] for o in outputs.values()]
        assert {"Fn::GetAtt": [logical_id, "Arn"]} in values
        assert {"Ref": logical_id} in values

        for output in outputs.values():
            assert isinstance(output["Export"]["Name"], str)
            assert output["Export"]["Name"].startswith("MyStack:ExportsOutput")

    def test_returns_registered_entries(self, stack, table):
        entries = unsafe_resolve_deadly_embrace(table)
        assert [e.output_id for e in entries] == list(stack.outputs)
        assert entries[0].export_name == "MyStack:ExportsOutputFnGetAttMyStackTableResourceArn"
        assert entries[1].export_name == "MyStack:ExportsOutputRefMyStackTableResource"

    def test_explicit_names_used_as_is(self, app, make_table):
        stack = Stack(app, "BridgeStack")
        table = make_table(stack, "Events")

        unsafe_resolve_deadly_embrace(table, ResolveOptions(
            properties=["tableArn", "tableName"],
            export_names={
                "tableArn": "BridgeAppPersistenceStack:ExportsOutputFnGetAttDeprecatedEventsTableArn",
                "tableName": "BridgeAppPersistenceStack:ExportsOutputRefDeprecatedEventsTable",
            },
        ))

        names = [o.export_name for o in stack.outputs.values()]
        assert "BridgeAppPersistenceStack:ExportsOutputFnGetAttDeprecatedEventsTableArn" in names
        assert "BridgeAppPersistenceStack:ExportsOutputRefDeprecatedEventsTable" in names

    def test_dry_run_registers_nothing(self, stack, table):
        entries = unsafe_resolve_deadly_embrace(table, config=Config(dry_run=True))
        assert len(entries) == 2
        assert len(stack.outputs) == 0

    def test_guard_failure_registers_nothing(self, app, make_table):
        stack = Stack(app, "Prod", stack_name=Deferred("StackName"))
        table = make_table(stack, "Table")

        with pytest.raises(UnresolvedExportNameError):
            unsafe_resolve_deadly_embrace(table, {
                "export_names": {"tableName": f"{stack.stack_name}:Legacy"},
            })
        assert len(stack.outputs) == 0

    def test_registration_failure_propagates_unchanged(self, table):
        with pytest.raises(RuntimeError, match="registry unavailable"):
            unsafe_resolve_deadly_embrace(table, platform=FailingPlatform())

    def test_duplicate_properties_collide_at_registration(self, stack, table):
        with pytest.raises(DuplicateOutputError):
            unsafe_resolve_deadly_embrace(table, {"properties": ["tableArn", "tableArn"]})
        # no undo of what was registered before the collision
        assert list(stack.outputs) == ["PreservedExportMyStackTableResourceArn"]

    def test_second_resource_in_same_stack(self, stack, table, make_table):
        unsafe_resolve_deadly_embrace(table)
        unsafe_resolve_deadly_embrace(make_table(stack, "Audit"))
        assert len(stack.outputs) == 4

    def test_logs_pipeline_steps(self, table, caplog):
        caplog.set_level(logging.INFO, logger="deadlyembrace.resolution")
        unsafe_resolve_deadly_embrace(table)

        messages = [r.getMessage() for r in caplog.records]
        assert "Resolution preserve_exports: started" in messages
        assert "Resolution preserve_exports: completed" in messages
        completed = next(r for r in caplog.records if r.getMessage().endswith("completed"))
        assert completed.metadata["count"] == 2

    def test_logs_failure(self, table, caplog):
        caplog.set_level(logging.INFO, logger="deadlyembrace.resolution")
        with pytest.raises(RuntimeError):
            unsafe_resolve_deadly_embrace(table, platform=FailingPlatform())
        failed = [r for r in caplog.records if r.getMessage().endswith("failed")]
        assert failed and failed[0].levelno == logging.ERROR

    def test_logs_planned_entries_and_anomalies(self, table, caplog):
        caplog.set_level(logging.DEBUG, logger="deadlyembrace.plan")
        unsafe_resolve_deadly_embrace(table, {"properties": ["tableArn", "missingAttr"]})

        records = [r for r in caplog.records if r.name == "deadlyembrace.plan"]
        planned = [r for r in records if r.levelno == logging.DEBUG]
        assert [r.metadata["property"] for r in planned] == ["tableArn"]
        assert planned[0].getMessage() == (
            "Planned tableArn -> MyStack:ExportsOutputFnGetAttMyStackTableResourceArn"
            " as PreservedExportMyStackTableResourceArn"
        )

        summary = [r for r in records if r.levelno == logging.INFO]
        assert len(summary) == 1
        assert summary[0].metadata["identity_basis"] == "MyStackTableResource"
        assert summary[0].metadata["count"] == 1
        assert summary[0].metadata["anomalies"] == {AnomalyCodes.PROPERTY_NOT_OWNED: 1}

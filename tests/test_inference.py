"""
Tests for exportable property inference.
"""

from collections.abc import Mapping

import pytest

from deadlyembrace.model import Construct, Deferred
from deadlyembrace.platforms import NativePlatform
from deadlyembrace.resolution.inference import PropertyInference, infer_exportable_properties, suffix_predicate
from deadlyembrace.config import Config


class Bucket(Construct):
    bucketName = "class-level-name"

    def __init__(self, scope, id):
        super().__init__(scope, id)
        self.bucketArn = Deferred("GetAtt")
        self._bucketName = "private"


class SnakeCasePlatform(NativePlatform):
    exportable_suffixes = ("Arn", "Name", "_arn", "_name")


class ThrowingAttributes(Mapping):
    """Attributes whose getters fail unless the name carries an Arn/Name suffix."""

    def __init__(self, values):
        self._values = values

    def __getitem__(self, name):
        if not name.endswith(("Arn", "Name")):
            raise RuntimeError(f"{name} is not configured on this resource")
        return self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)


class ThrowingGetterPlatform(NativePlatform):

    def own_attributes(self, resource):
        return ThrowingAttributes(dict(super().own_attributes(resource)))


class TestSuffixPredicate:

    def test_matches_camel_case_suffixes(self):
        assert suffix_predicate("tableArn", None)
        assert suffix_predicate("tableName", None)

    def test_rejects_other_names(self):
        assert not suffix_predicate("partitionKey", None)
        assert not suffix_predicate("arnPrefix", None)
        assert not suffix_predicate("tableARN", None)
        assert not suffix_predicate("queue_arn", None)
        assert not suffix_predicate("queue_name", None)


class TestPropertyInference:
    """Test inference over own, non-callable attributes."""

    def test_table_infers_arn_and_name(self, table):
        assert infer_exportable_properties(table) == ["tableArn", "tableName"]

    def test_callables_excluded(self, table):
        assert "grantReadName" not in infer_exportable_properties(table)

    def test_inherited_and_private_attributes_excluded(self, stack):
        bucket = Bucket(stack, "Bucket")
        assert infer_exportable_properties(bucket) == ["bucketArn"]

    def test_enumeration_order_not_sorted(self, stack):
        topic = Construct(stack, "Topic")
        topic.topicName = Deferred("Ref")
        topic.displayName = "alerts"
        topic.topicArn = Deferred("Ref")
        assert infer_exportable_properties(topic) == ["topicName", "displayName", "topicArn"]

    def test_snake_case_attributes_ignored_by_native_rule(self, stack):
        queue = Construct(stack, "Queue")
        queue.queue_arn = Deferred("GetAtt")
        queue.queue_name = Deferred("GetAtt")
        assert infer_exportable_properties(queue) == []

    def test_snake_case_attributes_with_snake_case_platform(self, stack):
        queue = Construct(stack, "Queue")
        queue.queue_arn = Deferred("GetAtt")
        queue.queue_url = Deferred("Ref")
        queue.queue_name = Deferred("GetAtt")
        props = infer_exportable_properties(queue, platform=SnakeCasePlatform())
        assert props == ["queue_arn", "queue_name"]

    def test_default_rule_reads_only_matching_names(self, table):
        """Getters of attributes without an Arn/Name suffix are never invoked."""
        props = infer_exportable_properties(table, platform=ThrowingGetterPlatform())
        assert props == ["tableArn", "tableName"]

    def test_custom_predicate_reads_every_attribute(self, table):
        with pytest.raises(RuntimeError, match="partitionKey"):
            infer_exportable_properties(table, lambda name, value: True, platform=ThrowingGetterPlatform())

    def test_custom_predicate(self, table):
        inference = PropertyInference(Config())
        props = inference.infer(table, lambda name, value: isinstance(value, str))
        assert props == ["partitionKey"]

    def test_predicate_never_sees_callables(self, table):
        seen = []

        def predicate(name, value):
            seen.append(name)
            return True

        props = infer_exportable_properties(table, predicate)
        assert "grantReadName" not in seen
        assert props == ["tableArn", "tableName", "partitionKey"]

    def test_no_attributes(self, stack):
        assert infer_exportable_properties(Construct(stack, "Empty")) == []

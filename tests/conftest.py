import pytest

from deadlyembrace.model import App, CfnResource, Construct, Stack


class Table(Construct):
    """DynamoDB-like table: Arn/Name placeholders over a low-level resource."""

    def __init__(self, scope, id):
        super().__init__(scope, id)
        resource = CfnResource(self, "Resource", type="AWS::DynamoDB::Table")
        self.node.default_child = resource
        self.tableArn = resource.get_att("Arn")
        self.tableName = resource.ref
        self.partitionKey = "id"
        self.grantReadName = lambda principal: None


@pytest.fixture
def app():
    return App()


@pytest.fixture
def stack(app):
    return Stack(app, "MyStack")


@pytest.fixture
def make_table():
    return Table


@pytest.fixture
def table(stack):
    return Table(stack, "Table")

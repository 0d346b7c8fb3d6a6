"""Tests for AWS service layer."""

import boto3
import pytest
from moto import mock_aws

from ecs_exec.aws_service import ECSService


@pytest.fixture
def ecs_client_with_services():
    with mock_aws():
        client = boto3.client("ecs", region_name="us-east-1")

        client.create_cluster(clusterName="production")
        client.create_cluster(clusterName="staging")

        client.register_task_definition(
            family="web-api-task",
            containerDefinitions=[{"name": "web", "image": "nginx", "memory": 256}],
        )
        client.create_service(cluster="production", serviceName="web-api", taskDefinition="web-api-task")

        yield client


def test_get_cluster_arns(ecs_client_with_services):
    arns = ECSService(ecs_client_with_services).get_cluster_arns()

    assert len(arns) == 2
    assert arns[0].endswith("cluster/production")
    assert arns[1].endswith("cluster/staging")


def test_get_service_arns(ecs_client_with_services):
    service = ECSService(ecs_client_with_services)

    assert len(service.get_service_arns("production")) == 1
    assert service.get_service_arns("production")[0].endswith("web-api")
    assert service.get_service_arns("staging") == []


def test_get_task_arns_without_tasks(ecs_client_with_services):
    assert ECSService(ecs_client_with_services).get_task_arns("staging", "web-api") == []


def test_describe_tasks_delegates_to_task_service(mock_ecs_client):
    mock_ecs_client.describe_tasks.return_value = {"tasks": []}

    assert ECSService(mock_ecs_client).describe_tasks("production", ["arn:task"]) == []
    mock_ecs_client.describe_tasks.assert_called_once_with(cluster="production", tasks=["arn:task"])

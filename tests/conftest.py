"""Shared fixtures for test suite."""

import os

import pytest

# Set required environment variables before any imports
os.environ["AWS_REGION"] = "us-east-1"


@pytest.fixture
def state_change_event():
    """EventBridge EC2 instance state-change notification."""
    return {
        "version": "0",
        "id": "7bf73129-1428-4cd3-a780-95db273d1602",
        "detail-type": "EC2 Instance State-change Notification",
        "source": "aws.ec2",
        "account": "123456789012",
        "time": "2022-06-01T12:00:00Z",
        "region": "us-east-1",
        "resources": ["arn:aws:ec2:us-east-1:123456789012:instance/i-1234567890abcdef0"],
        "detail": {"instance-id": "i-1234567890abcdef0", "state": "stopping"},
    }

@pytest.fixture
def asg_terminate_event():
    """EventBridge Auto Scaling instance-terminate lifecycle action."""
    return {
        "version": "0",
        "id": "468fe059-f4b7-445f-bb22-2a271b94974d",
        "detail-type": "EC2 Instance-terminate Lifecycle Action",
        "source": "aws.autoscaling",
        "account": "123456789012",
        "time": "2022-06-01T12:00:00Z",
        "region": "us-east-1",
        "resources": [
            "arn:aws:autoscaling:us-east-1:123456789012:autoScalingGroup:d4738357:autoScalingGroupName/asg-1"
        ],
        "detail": {
            "LifecycleActionToken": "tok-abc",
            "AutoScalingGroupName": "asg-1",
            "LifecycleHookName": "hook-x",
            "EC2InstanceId": "i-123",
            "LifecycleTransition": "autoscaling:EC2_INSTANCE_TERMINATING",
        },
    }

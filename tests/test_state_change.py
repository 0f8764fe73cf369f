"""Unit tests for the EC2 instance state-change event adapter."""

import pytest

from src.events import AWSEvent, EC2InstanceStateChangeNotification


@pytest.fixture
def notification(state_change_event):
    return EC2InstanceStateChangeNotification(AWSEvent.from_dict(state_change_event))


class TestEC2InstanceStateChangeNotification:
    """Test cases for EC2InstanceStateChangeNotification."""

    def test_instance_ids_returns_single_instance(self, notification):
        """Should return exactly the instance named in the event detail."""
        assert notification.instance_ids() == ["i-1234567890abcdef0"]

    def test_state(self, notification):
        assert notification.state == "stopping"

    def test_done_is_never_retryable(self, notification):
        """Should report (False, None) without any remote call."""
        assert notification.done() == (False, None)

    @pytest.mark.parametrize("state", ["pending", "running", "stopping", "stopped", "shutting-down", "terminated"])
    def test_done_for_every_state(self, state_change_event, state):
        state_change_event["detail"]["state"] = state
        notification = EC2InstanceStateChangeNotification(AWSEvent.from_dict(state_change_event))

        assert notification.done() == (False, None)

    def test_log_fields_inline_event(self, notification):
        """Should render the underlying event fields as flat log keys."""
        fields = notification.log_fields()

        assert fields["eventId"] == "7bf73129-1428-4cd3-a780-95db273d1602"
        assert fields["detailType"] == "EC2 Instance State-change Notification"
        assert fields["eventSource"] == "aws.ec2"
        assert fields["account"] == "123456789012"
        assert fields["detail"] == {"instance-id": "i-1234567890abcdef0", "state": "stopping"}

    def test_log_fields_do_not_alias_event_detail(self, notification):
        """Should return copies so log processors cannot mutate the event."""
        notification.log_fields()["detail"]["state"] = "running"

        assert notification.state == "stopping"

    def test_missing_instance_id_raises(self, state_change_event):
        del state_change_event["detail"]["instance-id"]
        notification = EC2InstanceStateChangeNotification(AWSEvent.from_dict(state_change_event))

        with pytest.raises(KeyError):
            notification.instance_ids()

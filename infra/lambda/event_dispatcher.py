"""Lambda function to reconcile EC2 and Auto Scaling lifecycle events"""

import os

from aws_lambda_powertools import Logger, Tracer

from src.events import ASGLifecycleTerminateNotification, UnsupportedEventError, parse_event
from src.shared import create_autoscaling_client, load_config

logger = Logger(service=os.environ.get("POWERTOOLS_SERVICE_NAME", "lifecycle-event-dispatcher"))
tracer = Tracer()

app_config = load_config()
autoscaling = create_autoscaling_client(app_config)


@tracer.capture_lambda_handler
def lambda_handler(event, context):
    """
    Lambda handler that wraps an EventBridge event and drives it to completion.

    Retryable failures are re-raised so the invoking platform redelivers the
    event. Terminal failures are reported in the response and not raised.
    """
    try:
        ev = parse_event(event, autoscaling)
    except UnsupportedEventError as e:
        logger.warning("Skipping unsupported event", source=e.source, detailType=e.detail_type)
        return {"statusCode": 400, "error": str(e)}

    instance_ids = ev.instance_ids()
    logger.info("Event received", instanceIds=instance_ids, **ev.log_fields())

    retryable, err = ev.done()

    if err is None:
        if isinstance(ev, ASGLifecycleTerminateNotification):
            logger.info("Completed lifecycle action", instanceIds=instance_ids)
        return {
            "statusCode": 200,
            "instanceIds": instance_ids,
            "retryable": False,
        }

    if retryable:
        logger.error("Lifecycle action completion failed, will retry", instanceIds=instance_ids, error=str(err))
        raise err

    logger.error("Lifecycle action completion failed permanently", instanceIds=instance_ids, error=str(err))
    return {
        "statusCode": 400,
        "instanceIds": instance_ids,
        "retryable": False,
        "error": str(err),
    }

# src/aatx_action/main.py
import asyncio
import logging
import sys

from aatx_action.actions import add_mask, configure_logging
from aatx_action.config import load_context, load_inputs
from aatx_action.errors import ActionError, ValidationCallError
from aatx_action.report.publisher import ReviewPublisher
from aatx_action.report.reporter import ResultReporter
from aatx_action.validation.client import ValidationClient, build_request


logger = logging.getLogger(__name__)


async def run() -> int:
    """Run the action once. Returns the process exit code."""
    try:
        inputs = load_inputs()
        add_mask(inputs.api_key)
        context = load_context()
        pull_request = context.load_pull_request()
        request = build_request(inputs, context, pull_request)

        client = ValidationClient(api_key=inputs.api_key, api_url=inputs.api_url)
        result = await client.validate(request)

        reporter = ResultReporter()
        reporter.report(result)

        if inputs.comment and pull_request is not None:
            await ReviewPublisher(context).publish(result, pull_request.number)

        if inputs.fail_on_invalid:
            failure = reporter.failure_message(result)
            if failure:
                logger.error(failure)
                return 1

        return 0

    except ActionError as e:
        logger.error(f"Action failed: {e}")
        if isinstance(e, ValidationCallError) and e.status_code is not None:
            logger.error(f"Response status: {e.status_code}")
            logger.error(f"Response data: {e.body}")
        return 1
    except Exception as e:
        logger.exception(f"Action failed: {e}")
        return 1


def main() -> None:
    configure_logging()
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()

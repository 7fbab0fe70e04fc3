#!/usr/bin/env python3
"""
Example: List the recordings and notifications of a call.

Walks every page of a call's recordings, then prints the error
notifications logged for the same call.

Requirements:
- TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN set in the environment
- A call SID passed as the first argument
"""

import logging
import sys

from twilio_sdk import ApiConnectionError, ApiError, DecodeError, Notification, Recording, RestClient


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main() -> int:
    if len(sys.argv) != 2:
        print(f"usage: {sys.argv[0]} CALL_SID")
        return 2
    call_sid = sys.argv[1]

    with RestClient.from_env() as client:
        account_sid = client.account_sid
        try:
            recordings = Recording.read(account_sid, call_sid).page_size(20).execute(client)
            for recording in recordings:
                logger.info("%s  %s  %ss", recording.sid, recording.date_created, recording.duration)
            logger.info("%d recording(s) in %d page(s)", recordings.processed, recordings.pages_fetched)

            errors = Notification.read(account_sid, call_sid).filter(log="0").limit(10).execute(client)
            for notification in errors:
                logger.info("%s  %s  %s", notification.sid, notification.error_code, notification.more_info)
        except ApiConnectionError as e:
            logger.error("Could not reach the API: %s", e)
            return 1
        except ApiError as e:
            logger.error("API error %s (code %s): %s", e.status, e.code, e.message)
            return 1
        except DecodeError as e:
            logger.error("Unexpected response shape: %s", e)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

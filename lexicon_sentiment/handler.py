"""
Object-storage event adapter.

Each notification record names an uploaded review. The review is scored
and the annotated result is written to "<bucket><suffix>" under
"sentimented-<key>". Keys starting with "append-" carry a label as their
first token; the rest of the payload is appended to the corpus first.

A record that fails (bad payload, missing object, unreadable corpus) is
logged and reported in the response instead of raising. Raising would make
the platform redeliver the whole event, and records already processed would
run again, appending their reviews to the corpus a second time. A failed
record is therefore not retried; the response lists it under "failed".
"""

import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import unquote_plus

import boto3
from botocore.exceptions import ClientError

from .config import Config
from .engine import SentimentEngine
from .errors import InvalidArgument, SentimentEngineError

logger = logging.getLogger(__name__)

_engine: Optional[SentimentEngine] = None
_s3 = None


def get_engine(config: Optional[Config] = None) -> SentimentEngine:
    """Process-wide engine, created on first use."""
    global _engine
    if _engine is None:
        _engine = SentimentEngine.from_config(config or Config.from_env())
    return _engine


def get_s3_client():
    global _s3
    if _s3 is None:
        _s3 = boto3.client("s3")
    return _s3


def parse_append_payload(payload: str) -> Tuple[int, str]:
    """
    Split an append payload into its label and review text.

    Raises:
        InvalidArgument: If the first token is not an integer or no text follows
    """
    parts = payload.strip().split(None, 1)
    if not parts:
        raise InvalidArgument("Append payload is empty")
    try:
        label = int(parts[0])
    except ValueError:
        raise InvalidArgument(f"Append payload must start with an integer label, got {parts[0]!r}")
    if len(parts) < 2:
        raise InvalidArgument("Append payload has a label but no review text")
    return label, parts[1]


def process_record(
    record: Dict[str, Any],
    s3_client,
    engine: SentimentEngine,
    config: Config
) -> Optional[str]:
    """
    Score one notification record and upload the annotated review.

    Returns:
        "<bucket>/<key>" of the uploaded result, or None if skipped
    """
    source_bucket = record['s3']['bucket']['name']
    source_key = unquote_plus(record['s3']['object']['key'])
    destination_bucket = source_bucket + config.result_bucket_suffix

    if source_bucket == destination_bucket:
        logger.warning("Destination bucket must not match source bucket: %s", source_bucket)
        return None

    destination_key = config.result_key_prefix + source_key

    logger.info("Downloading %s/%s", source_bucket, source_key)
    obj = s3_client.get_object(Bucket=source_bucket, Key=source_key)
    review = obj['Body'].read().decode('utf-8')

    if source_key.startswith(config.append_key_prefix):
        label, review = parse_append_payload(review)
        engine.append(review, label)

    result = engine.score(review)

    s3_client.put_object(
        Bucket=destination_bucket,
        Key=destination_key,
        Body=result.annotated_text.encode('utf-8')
    )
    logger.info("Scored %s/%s as %s, uploaded to %s/%s", source_bucket, source_key,
                result.label, destination_bucket, destination_key)

    return f"{destination_bucket}/{destination_key}"


def handler(event, context, s3_client=None, engine: Optional[SentimentEngine] = None,
            config: Optional[Config] = None):
    config = config or Config.from_env()
    s3_client = s3_client or get_s3_client()
    engine = engine or get_engine(config)

    uploaded = []
    failed = []
    for record in event.get('Records', []):
        try:
            location = process_record(record, s3_client, engine, config)
        except (SentimentEngineError, ClientError) as e:
            source = f"{record['s3']['bucket']['name']}/{unquote_plus(record['s3']['object']['key'])}"
            logger.error("Failed to process %s: %s", source, e)
            failed.append(source)
            continue
        if location is not None:
            uploaded.append(location)

    body = f"Sentimented {len(uploaded)} review(s): {', '.join(uploaded)}"
    if failed:
        body += f"; failed {len(failed)}: {', '.join(failed)}"

    return {
        'statusCode': 207 if failed else 200,
        'body': body,
        'failed': failed
    }

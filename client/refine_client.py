"""Command-line client for the letter refinement service."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from typing import Any

import httpx

DEFAULT_URL = "http://127.0.0.1:8000/refine"

logger = logging.getLogger("refine_client")


async def run_client(
    url: str,
    payload: dict[str, Any],
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Post a letter to the service and return the refined text."""

    start = time.perf_counter()

    async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
        response = await client.post(url, json=payload)
        logger.info("Sent letter (%d chars)", len(payload["text"]))

    body = response.json()
    error = body.get("error")
    if error is not None:
        logger.error("Refinement failed (%s): %s", error["kind"], error["message"])
        raise SystemExit(1)

    elapsed = time.perf_counter() - start
    logger.info("Received refined letter in %.2fs", elapsed)
    return body["output"]


def build_payload(args: argparse.Namespace) -> dict[str, Any]:
    payload: dict[str, Any] = {"text": args.text}
    if args.recipient:
        payload["recipientContext"] = args.recipient
    if args.subject:
        payload["subjectContext"] = args.subject
    return payload


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Refine the tone of a formal letter.")
    parser.add_argument("--url", default=DEFAULT_URL, help="Service URL (default: %(default)s)")
    parser.add_argument("--text", required=True, help="Letter text to refine.")
    parser.add_argument("--recipient", help="Recipient rank, e.g. Admiral.")
    parser.add_argument("--subject", help="Subject matter, e.g. logistics.")
    parser.add_argument(
        "--timeout", type=float, default=60.0, help="Seconds to wait for the refined letter."
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    try:
        refined = asyncio.run(run_client(args.url, build_payload(args), args.timeout))
    except httpx.HTTPError as exc:
        logger.error("Could not reach refinement service: %s", exc)
        raise SystemExit(1) from exc
    sys.stdout.write(refined + "\n")


if __name__ == "__main__":  # pragma: no cover
    main()

#!/usr/bin/env python3
"""Invoke a function handler locally or a deployed function through the Lambda API.

The event is read from a file, an inline JSON string, or stdin, and the
response is printed as JSON.

Usage:
    python scripts/invoke_function.py add --event '{"num1": "2", "num2": "3"}'
    python scripts/invoke_function.py echo --event-file event.json
    echo '{"body": "{\\"num1\\": 4, \\"num2\\": 5}"}' | python scripts/invoke_function.py add
    python scripts/invoke_function.py add --remote my-sum-function --event '{"num1": 1, "num2": 2}'
"""

import argparse
import importlib
import json
import sys
from pathlib import Path
from typing import Any

import boto3
from dotenv import load_dotenv

# Add src to path for handler imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config

HANDLERS = {
    "echo": "handlers.echo",
    "add": "handlers.add",
}


def read_event(event: str | None, event_file: str | None) -> Any:
    if event is not None:
        return json.loads(event)
    if event_file is not None:
        return json.loads(Path(event_file).read_text(encoding="utf-8"))
    return json.loads(sys.stdin.read() or "{}")


def invoke_local(name: str, event: Any) -> dict[str, Any]:
    module = importlib.import_module(HANDLERS[name])
    return module.handler(event, None)


def invoke_remote(function_name: str, event: Any, lambda_client: Any = None) -> dict[str, Any]:
    """Invoke a deployed function synchronously and return its decoded payload."""
    if lambda_client is None:
        lambda_client = boto3.client("lambda", region_name=get_config().aws_region)

    response = lambda_client.invoke(
        FunctionName=function_name,
        InvocationType="RequestResponse",
        Payload=json.dumps(event).encode(),
    )
    payload = json.loads(response["Payload"].read())
    if "FunctionError" in response:
        raise RuntimeError(f"{function_name} failed: {payload}")
    return payload


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("handler", choices=sorted(HANDLERS))
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--event", help="inline JSON event")
    source.add_argument("--event-file", help="path to a JSON event file")
    parser.add_argument("--remote", metavar="FUNCTION_NAME", help="invoke a deployed function instead")
    args = parser.parse_args(argv)

    load_dotenv()
    event = read_event(args.event, args.event_file)

    if args.remote:
        result = invoke_remote(args.remote, event)
    else:
        result = invoke_local(args.handler, event)

    print(json.dumps(result, indent=2))
    return 0 if result.get("statusCode", 200) < 400 else 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
from __future__ import annotations

import json
import os
import sys

from dotenv import load_dotenv

from shopbridge.core.errors import UpstreamTransportError
from shopbridge.core.models.llm_ping import ping, response_text


def main() -> int:
    load_dotenv(override=False)
    api_key = os.getenv("OPENAI_API_KEY", "").strip()
    if not api_key:
        print("ERROR: Missing OPENAI_API_KEY in .env", file=sys.stderr)
        return 1

    try:
        status, data = ping(api_key)
    except UpstreamTransportError as exc:
        print(f"ERROR: request failed: {exc}", file=sys.stderr)
        return 1

    print(f"HTTP status: {status}")
    text = response_text(data)
    if text:
        print(f"Model reply: {text}")
    else:
        print("Full JSON:", json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

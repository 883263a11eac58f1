"""Command-line client for manual testing of the generation service."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import pathlib
import time
from typing import Any

import httpx

DEFAULT_URL = "http://127.0.0.1:8000"


async def run_client(
    base_url: str,
    prompt: str,
    template_type: str | None,
    output: pathlib.Path | None,
    publish: bool,
    timeout: float,
) -> None:
    """Generate a template, optionally save it locally and publish it as a gist."""

    logger = logging.getLogger("generate_client")
    start = time.perf_counter()

    body: dict[str, Any] = {"prompt": prompt}
    if template_type:
        body["template_type"] = template_type

    async with httpx.AsyncClient(base_url=base_url, timeout=timeout) as client:
        response = await client.post("/api/generate", json=body)
        data = response.json()
        if not data.get("ok"):
            logger.error("Generation failed (%d): %s", response.status_code, data.get("error"))
            raise SystemExit(1)

        elapsed = time.perf_counter() - start
        template = data["template"]
        logger.info(
            "Received template %r (%d sections, %d properties) in %.2fs",
            template["title"],
            len(template["sections"]),
            len(template["properties"]),
            elapsed,
        )
        for warning in data.get("warnings", []):
            logger.warning("Warning: %s", warning)

        rendered = json.dumps(template, indent=2, ensure_ascii=False)
        print(rendered)

        if output:
            output.write_text(rendered, encoding="utf-8")
            logger.info("Template written to %s", output)

        if publish:
            response = await client.post("/api/save", json={"content": template})
            data = response.json()
            if not data.get("ok"):
                logger.error("Publish failed (%d): %s", response.status_code, data.get("error"))
                raise SystemExit(1)
            logger.info("Published to %s", data["url"])


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Client for the Notionify template service.")
    parser.add_argument("--url", default=DEFAULT_URL, help="Service base URL (default: %(default)s)")
    parser.add_argument("--prompt", required=True, help="Short description of the page to build.")
    parser.add_argument("--template-type", help="Optional category, e.g. project-management.")
    parser.add_argument("--save", type=pathlib.Path, help="Optional output file (json).")
    parser.add_argument("--publish", action="store_true", help="Publish the result as a gist.")
    parser.add_argument(
        "--timeout", type=float, default=60.0, help="Seconds to wait for each request."
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    try:
        asyncio.run(
            run_client(
                args.url, args.prompt, args.template_type, args.save, args.publish, args.timeout
            )
        )
    except KeyboardInterrupt:  # pragma: no cover - manual usage only
        pass


if __name__ == "__main__":  # pragma: no cover
    main()

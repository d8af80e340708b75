"""Command-line interface for ticketpack."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any

from ticketpack import (
    ConfigError,
    ExtractionError,
    GenerationFailed,
    InputValidationError,
    Plan,
    TicketPack,
    TicketPackConfig,
    load_config,
)
from ticketpack.contracts.plan import Platform
from ticketpack.extraction import TextExtractor
from ticketpack.extraction.extractor import TEXT_EXTENSIONS, file_extension
from ticketpack.progress import RichGenerationProgress


def _package_version() -> str:
    try:
        return version("ticketpack")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ticketpack")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate a ticket pack from a PRD file")
    generate_parser.add_argument("prd", help="Path to the PRD (.txt, .md, .pdf, .docx)")
    generate_parser.add_argument("--config", help="Path to ticketpack.json")
    generate_parser.add_argument("--product-name")
    generate_parser.add_argument("--target-user")
    generate_parser.add_argument("--platform", choices=[platform.value for platform in Platform])
    generate_parser.add_argument("--constraints")
    generate_parser.add_argument("--release-date")
    generate_parser.add_argument("--out", help="Write the plan JSON here instead of stdout")
    generate_parser.add_argument("--markdown", help="Also write the Markdown export here")
    generate_parser.add_argument("--replay", help="Replay a recorded candidate JSON instead of calling the model")
    generate_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    extract_parser = subparsers.add_parser("extract", help="Print the text extracted from a PRD file")
    extract_parser.add_argument("file", help="Path to the file to extract")
    extract_parser.add_argument("--config", help="Path to ticketpack.json")
    extract_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--config", help="Path to ticketpack.json")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def _read_prd(path: Path, config: TicketPackConfig) -> str:
    extension = file_extension(path.name)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputValidationError(f"failed reading PRD file: {path}") from exc
    if extension in TEXT_EXTENSIONS or extension == "":
        return data.decode("utf-8", errors="replace")
    return TextExtractor(config).extract(data, path.name)


def _build_payload(args: argparse.Namespace, prd: str) -> dict[str, Any]:
    payload: dict[str, Any] = {"prd": prd}
    for key in ("product_name", "target_user", "platform", "constraints", "release_date"):
        value = getattr(args, key)
        if value is not None:
            payload[key] = value
    return payload


async def _run_generate(args: argparse.Namespace) -> Plan:
    config = load_config(args.config)
    if args.replay:
        config = TicketPackConfig.model_validate(
            {**config.model_dump(), "oracle": "replay", "replay_path": Path(args.replay)}
        )
    payload = _build_payload(args, _read_prd(Path(args.prd), config))

    if args.verbose:
        plan = await _generate(config, payload, progress=None)
    else:
        with RichGenerationProgress() as progress:
            plan = await _generate(config, payload, progress=progress)

    plan_json = json.dumps(plan.model_dump(mode="json", by_alias=True), indent=2)
    if args.out:
        Path(args.out).write_text(plan_json + "\n", encoding="utf-8")
    if args.markdown:
        Path(args.markdown).write_text(plan.exports.markdown, encoding="utf-8")

    if args.out or args.markdown:
        print(_format_summary(plan, out=args.out, markdown=args.markdown))
    else:
        print(plan_json)
    return plan


async def _generate(
    config: TicketPackConfig,
    payload: dict[str, Any],
    *,
    progress: RichGenerationProgress | None,
) -> Plan:
    async with TicketPack.from_config(config, progress=progress) as pack:
        return await pack.generate_plan(payload)


def _format_summary(plan: Plan, *, out: str | None, markdown: str | None) -> str:
    lines = [
        "",
        "ticketpack - plan generated",
        "",
        f"  Product:     {plan.meta.product_name or '(unnamed)'}",
        f"  Platform:    {plan.meta.platform}",
        f"  Confidence:  {plan.meta.confidence}/100",
        f"  Epics:       {len(plan.epics)}",
        f"  Tickets:     {len(plan.tickets)}",
        "",
    ]
    for epic in plan.epics:
        lines.append(f"  {epic.epic_id:<4}  {epic.title}  ({len(epic.tickets)} ticket(s))")
    lines.append("")
    if out:
        lines.append(f"  Plan JSON:   {out}")
    if markdown:
        lines.append(f"  Markdown:    {markdown}")
    lines.append("")
    return "\n".join(lines)


def _run_extract(args: argparse.Namespace) -> str:
    config = load_config(args.config)
    path = Path(args.file)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputValidationError(f"failed reading file: {path}") from exc
    text = TextExtractor(config).extract(data, path.name)
    print(text)
    return text


def _run_serve(args: argparse.Namespace) -> None:
    import uvicorn

    from ticketpack.api import create_app

    uvicorn.run(create_app(load_config(args.config)), host=args.host, port=args.port)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "generate":
            asyncio.run(_run_generate(args))
        elif args.command == "extract":
            _run_extract(args)
        else:
            _run_serve(args)
        return 0
    except (ConfigError, InputValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ExtractionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except GenerationFailed as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

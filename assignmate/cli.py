from __future__ import annotations

import argparse
import asyncio
import json
import random
from dataclasses import asdict
from pathlib import Path
from typing import Any

from assignmate.core.logging import configure_logging
from assignmate.services.assignment import write_assignment
from assignmate.services.generation import GenerationService
from assignmate.services.humanizer import HumanizerService
from assignmate.services.materials import extract_materials
from assignmate.services.prompt_analyzer import analyze_prompt
from assignmate.services.prompt_builder import build_prompt
from assignmate.services.style_analyzer import analyze_style


def _read(path: str | None) -> str:
    if not path:
        return ""
    return Path(path).read_text(encoding="utf-8")


def _prompt_text(args: argparse.Namespace) -> str:
    if args.prompt_file:
        return _read(args.prompt_file)
    return args.prompt or ""


def _add_prompt_args(parser: argparse.ArgumentParser, required: bool = True) -> None:
    group = parser.add_mutually_exclusive_group(required=required)
    group.add_argument("--prompt", help="Assignment prompt text.")
    group.add_argument("--prompt-file", help="Path to a file holding the assignment prompt.")


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--sample", required=True, help="Path to the writing sample.")
    parser.add_argument("--materials", default=None, help="Path to course materials (optional).")
    _add_prompt_args(parser)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="assignmate", description="Style-matched assignment drafting tools.")
    sub = parser.add_subparsers(dest="command", required=True)

    style = sub.add_parser("style", help="Print the style profile of a writing sample.")
    style.add_argument("--input", required=True, help="Path to the writing sample.")

    materials = sub.add_parser("materials", help="Print facts extracted from course materials.")
    materials.add_argument("--input", required=True, help="Path to the course materials.")

    prompt = sub.add_parser("prompt", help="Classify an assignment prompt.")
    _add_prompt_args(prompt)

    build = sub.add_parser("build-prompt", help="Print the instruction block sent to the backend.")
    _add_source_args(build)

    humanize = sub.add_parser("humanize", help="Apply the humanizer to a text file.")
    humanize.add_argument("--input", required=True, help="Path to the text to rewrite.")
    humanize.add_argument("--seed", type=int, default=None, help="Seed for reproducible output.")

    generate = sub.add_parser("generate", help="Generate an assignment through the configured backend.")
    _add_source_args(generate)
    generate.add_argument("--seed", type=int, default=None, help="Seed for the humanizer.")

    return parser


def run(args: argparse.Namespace) -> Any:
    if args.command == "style":
        return analyze_style(_read(args.input))

    if args.command == "materials":
        return asdict(extract_materials(_read(args.input)))

    if args.command == "prompt":
        return asdict(analyze_prompt(_prompt_text(args)))

    if args.command == "build-prompt":
        return {"prompt": build_prompt(_read(args.sample), _read(args.materials), _prompt_text(args))}

    if args.command == "humanize":
        humanizer = HumanizerService(rng=random.Random(args.seed))
        return {"text": humanizer.rewrite(_read(args.input))}

    if args.command == "generate":
        text = asyncio.run(
            write_assignment(
                writing_sample=_read(args.sample),
                materials=_read(args.materials),
                assignment_prompt=_prompt_text(args),
                generator=GenerationService(),
                humanizer=HumanizerService(rng=random.Random(args.seed)),
            )
        )
        return {"text": text, "generatedText": text}

    raise RuntimeError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    args = build_parser().parse_args(argv)
    print(json.dumps(run(args), ensure_ascii=True, indent=2))


if __name__ == "__main__":
    main()

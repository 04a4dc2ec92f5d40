#!/usr/bin/env python3
"""
CLI Entry Point — generate PWA bundles from the terminal
========================================================
Usage:
    pwagen templates
    pwagen generate --template business-card \
                    --field businessName="Acme Corp" --field email=hi@acme.io \
                    --image logo=./logo.png --theme vibrant-green
    pwagen generate --file project.yaml --unpacked
    pwagen validate --file project.yaml

The archive is written as <template-name>-pwa.zip to --output-dir, or to
$PWAGEN_OUTPUT_DIR (default ./outputs) when the flag is omitted.
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv
load_dotenv(override=True)  # override=True: .env values win over empty system env vars

from .catalog import list_templates
from .config import Settings
from .errors import FormValidationError, PWAGenError
from .models import FieldType, THEME_PRESETS
from .output_writer import write_archive, write_bundle_dir
from .project_file import load_project_file
from .session import GeneratorSession
from .validators import validate_bundle

logger = logging.getLogger("pwagen.cli")


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,  # re-apply even if already configured
    )


# ─────────────────────────────────────────────────────────────────────────────
# Input handling
# ─────────────────────────────────────────────────────────────────────────────

def _split_assignment(raw: str, flag: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise ValueError(f"{flag} expects KEY=VALUE, got '{raw}'")
    return key.strip(), value


async def _build_session(args, settings: Settings) -> tuple[GeneratorSession, dict]:
    """
    Create a session from --file and/or flags. Flags override file values.
    Returns the session and a dict of file-level options (output_dir, unpacked).
    """
    session = GeneratorSession(max_upload_bytes=settings.max_upload_bytes)
    options = {"output_dir": None, "unpacked": False}
    image_paths: dict[str, Path] = {}

    if args.file:
        result = load_project_file(args.file)
        session.select_template(result.template_id)
        for key, value in result.form_values.items():
            session.set_field(key, value)
        session.set_theme(result.theme)
        image_paths.update(result.image_paths)
        options["output_dir"] = result.output_dir
        options["unpacked"] = result.unpacked
    elif args.template:
        session.select_template(args.template)
    else:
        raise ValueError("--template or --file is required")

    if args.template and session.template.id != args.template:
        raise ValueError("--template does not match the template in --file")

    template = session.template
    for raw in args.field or []:
        key, value = _split_assignment(raw, "--field")
        descriptor = template.field(key)
        if descriptor is None:
            raise ValueError(f"Template '{template.id}' has no field '{key}'")
        if descriptor.type == FieldType.MULTISELECT:
            session.set_field(key, [v.strip() for v in value.split(",") if v.strip()])
        else:
            session.set_field(key, value)

    for raw in args.image or []:
        key, value = _split_assignment(raw, "--image")
        image_paths[key] = Path(value).expanduser()

    for key, path in image_paths.items():
        logger.debug("Attaching %s from %s", key, path)
        await session.attach_file(key, path)

    theme = session.theme
    if args.theme:
        theme = THEME_PRESETS[args.theme]
    if args.primary_color:
        theme = replace(theme, primary_color=args.primary_color)
    if args.background_color:
        theme = replace(theme, background_color=args.background_color)
    session.set_theme(theme)

    return session, options


# ─────────────────────────────────────────────────────────────────────────────
# Subcommands
# ─────────────────────────────────────────────────────────────────────────────

def cmd_templates(args) -> None:
    """Handle the 'templates' subcommand: list the catalog."""
    templates = list_templates(args.category)
    if not templates:
        print("No templates in this category.")
        return
    print(f"{'ID':<18} {'Category':<12} {'Name'}")
    print("-" * 55)
    for t in templates:
        print(f"{t.id:<18} {t.category.value:<12} {t.name}")
        if args.fields:
            for f in t.fields:
                req = "*" if f.required else " "
                print(f"    {req} {f.id:<20} {f.type.value:<12} {f.label}")


async def _async_generate(args, settings: Settings) -> Path:
    session, options = await _build_session(args, settings)
    bundle = session.generate(validate=not args.no_validate)

    failed = [r for r in validate_bundle(bundle) if not r.passed]
    if failed:
        raise PWAGenError("; ".join(f"{r.validator_name}: {r.details}" for r in failed))

    archive = await session.pack_current_async()
    output_dir = Path(args.output_dir or options["output_dir"] or settings.output_dir)
    path = write_archive(archive, output_dir, session.download_name())
    print(f"Archive written to: {path}")

    if args.unpacked or options["unpacked"]:
        unpacked_dir = output_dir / Path(session.download_name()).stem
        print(f"Files written to: {write_bundle_dir(bundle, unpacked_dir)}")
    return path


def cmd_generate(args) -> None:
    """Handle the 'generate' subcommand: build, verify and pack a bundle."""
    settings = Settings.from_env()
    try:
        asyncio.run(_async_generate(args, settings))
    except FormValidationError as exc:
        print("ERROR: form validation failed:", file=sys.stderr)
        for field_id, message in exc.errors.items():
            print(f"  {field_id}: {message}", file=sys.stderr)
        sys.exit(1)
    except (PWAGenError, OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


async def _async_validate(args, settings: Settings) -> dict[str, str]:
    session, _ = await _build_session(args, settings)
    return session.validate()


def cmd_validate(args) -> None:
    """Handle the 'validate' subcommand: check form inputs without generating."""
    settings = Settings.from_env()
    try:
        errors = asyncio.run(_async_validate(args, settings))
    except (PWAGenError, OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    if errors:
        for field_id, message in errors.items():
            print(f"  {field_id}: {message}")
        sys.exit(1)
    print("Form is valid.")


def _add_input_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--template", "-t", type=str, default="", help="Template id")
    p.add_argument("--file", "-f", type=str, default="",
                   help="Load template, fields, images and theme from a YAML file")
    p.add_argument("--field", action="append", metavar="KEY=VALUE",
                   help="Form field value (repeatable; comma-separate multiselect values)")
    p.add_argument("--image", action="append", metavar="FIELD=PATH",
                   help="Image upload for an image field (repeatable)")
    p.add_argument("--theme", choices=sorted(THEME_PRESETS), default=None,
                   help="Theme preset")
    p.add_argument("--primary-color", type=str, default="", help="Override theme primary colour")
    p.add_argument("--background-color", type=str, default="",
                   help="Override theme background colour")


def _templates_subparsers(subparsers) -> None:
    p = subparsers.add_parser("templates", help="List available templates")
    p.add_argument("--category", type=str, default=None, help="Only this category")
    p.add_argument("--fields", action="store_true", help="Also list each template's fields")
    p.set_defaults(func=cmd_templates)


def _generate_subparsers(subparsers) -> None:
    p = subparsers.add_parser("generate", help="Generate a PWA archive")
    _add_input_args(p)
    p.add_argument("--output-dir", "-o", type=str, default="",
                   help="Directory for the archive (default: $PWAGEN_OUTPUT_DIR or ./outputs)")
    p.add_argument("--unpacked", action="store_true",
                   help="Also write the bundle files to a directory next to the archive")
    p.add_argument("--no-validate", action="store_true",
                   help="Skip form validation (placeholders fill empty fields)")
    p.set_defaults(func=cmd_generate)


def _validate_subparsers(subparsers) -> None:
    p = subparsers.add_parser("validate", help="Validate form inputs without generating")
    _add_input_args(p)
    p.set_defaults(func=cmd_validate)


def main(argv=None):
    parser = argparse.ArgumentParser(description="PWA Generator — static app bundles from templates")
    parser.add_argument("--verbose", "-v", action="store_true")

    subparsers = parser.add_subparsers(dest="subcommand", metavar="SUBCOMMAND")
    _templates_subparsers(subparsers)
    _generate_subparsers(subparsers)
    _validate_subparsers(subparsers)

    args = parser.parse_args(argv)
    setup_logging(getattr(args, "verbose", False))

    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return
    func(args)


if __name__ == "__main__":
    main()

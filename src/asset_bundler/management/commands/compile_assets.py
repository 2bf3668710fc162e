"""Management command to compile configured bundles."""

from __future__ import annotations

import logging
import os
from typing import Any

from django.core.management.base import BaseCommand, CommandError, CommandParser

from asset_bundler.conf import get_setting

logger = logging.getLogger(__name__)

BUNDLE_TYPES = ("css", "js", "img")


class Command(BaseCommand):
    help = "Compile the CSS/JS/image bundles listed in ASSET_BUNDLER['BUNDLES']."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--bundles",
            nargs="+",
            help="Names of the bundles to compile. If omitted, compiles all bundles.",
        )
        parser.add_argument(
            "--output-dir",
            help="Directory to write bundles to. Defaults to OUTPUT_DIR or STATIC_ROOT.",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be compiled without writing anything.",
        )

    def handle(self, **options: object) -> None:
        from asset_bundler.compiler import compile_definition
        from asset_bundler.utils import get_output_dir

        names = options.get("bundles")
        output_dir = options.get("output_dir") or get_output_dir()
        dry_run = options.get("dry_run")

        bundles = self._resolve_bundles(names)  # type: ignore[arg-type]
        self.stdout.write(f"Compiling {len(bundles)} bundle(s) into {output_dir}...")

        if not dry_run:
            os.makedirs(str(output_dir), exist_ok=True)

        compiled = 0
        errors = 0
        for bundle in bundles:
            label = f"{bundle['name']} ({bundle['type']})"
            if dry_run:
                self.stdout.write(f"  [DRY RUN] Would compile: {label}")
                compiled += 1
                continue

            try:
                path = compile_definition(str(output_dir), bundle)
                self.stdout.write(f"  Compiled: {label} -> {path}")
                compiled += 1
            except Exception:
                logger.exception("Failed to compile bundle %s", bundle["name"])
                self.stderr.write(f"  ERROR: {label}")
                errors += 1

        prefix = "[DRY RUN] " if dry_run else ""
        self.stdout.write(
            self.style.SUCCESS(f"\n{prefix}Done. Compiled: {compiled}, Errors: {errors}")
        )
        if errors:
            raise CommandError(f"{errors} bundle(s) failed to compile")

    def _resolve_bundles(self, names: list[str] | None) -> list[dict[str, Any]]:
        """Select and validate bundle definitions based on CLI arguments."""
        bundles: list[dict[str, Any]] = list(get_setting("BUNDLES"))

        for bundle in bundles:
            if "name" not in bundle:
                raise CommandError(f"Bundle definition without a name: {bundle!r}")
            if bundle.get("type") not in BUNDLE_TYPES:
                raise CommandError(
                    f"Unknown bundle type {bundle.get('type')!r} for bundle "
                    f"{bundle['name']!r}; expected one of {', '.join(BUNDLE_TYPES)}"
                )
            if bundle["type"] == "img" and not bundle.get("extension"):
                raise CommandError(
                    f"Image bundle {bundle['name']!r} needs an 'extension'"
                )

        if not names:
            return bundles

        known = {bundle["name"] for bundle in bundles}
        unknown = [name for name in names if name not in known]
        if unknown:
            raise CommandError(f"Unknown bundle(s): {', '.join(unknown)}")
        return [bundle for bundle in bundles if bundle["name"] in names]

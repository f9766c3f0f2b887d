import argparse
import json
import logging
import os
import sys

from .catalog import CatalogLoadError, load_json_object, load_records_from_json
from .color import parse_color, to_hsl
from .export import (
    OverrideValidationError,
    QuickTweaks,
    build_export_source,
    build_strict_export_plan,
    export_plan_json,
    override_errors,
)
from .search import AppearanceCache, ThemeFilters, apply_theme_filters, precompute_appearance
from .search.filters import DEFAULT_TOLERANCE, SORT_KEYS
from .targets import TARGETS, UnknownTargetError, get_target
from .zed import generate_zed_theme


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Search a catalog of editor color themes and plan per-editor exports"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    search = subparsers.add_parser("search", help="Search the catalog by text, color and appearance")
    search.add_argument("catalog", help="Path to the catalog JSON file")
    search.add_argument("-q", "--query", default="", help="Text query over name, publisher and description")
    search.add_argument("--hex", default="", help="Target color, e.g. #22c55e")
    search.add_argument(
        "--role",
        default="any",
        help="Color slot to compare: background, average, any or a syntax role (default: any)",
    )
    search.add_argument(
        "--tolerance",
        type=int,
        default=DEFAULT_TOLERANCE,
        help=f"Match tolerance 0-100 (default: {DEFAULT_TOLERANCE})",
    )
    search.add_argument("--bg", default="all", help="Background category (dark, light, ...)")
    search.add_argument("--hue", default="all", help="Hue bucket facet")
    search.add_argument(
        "--style",
        action="append",
        default=[],
        help="Required style tag; repeatable",
    )
    search.add_argument("--contrast", default="all", help="Contrast band facet (low, medium, high)")
    search.add_argument("--saturation", default="all", help="Saturation band facet")
    search.add_argument("--brightness", default="all", help="Brightness band facet")
    search.add_argument("--sort", choices=sorted(SORT_KEYS), default="name")
    search.add_argument("--limit", type=int, default=20, help="Rows to print (default: 20)")

    plan = subparsers.add_parser("plan", help="Resolve an export plan for one theme")
    plan.add_argument("catalog", help="Path to the catalog JSON file")
    plan.add_argument("--theme-id", required=True, help="Id of the theme record to export")
    plan.add_argument("--payload", required=True, metavar="JSON", help="Theme payload JSON (colors + tokenColors)")
    plan.add_argument("--detail", metavar="JSON", help="Curated detail JSON (tokenPalette, editorColors)")
    plan.add_argument("--target", required=True, choices=sorted(TARGETS), help="Export target")
    plan.add_argument(
        "--override",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override one field's color; repeatable",
    )
    plan.add_argument("--editor-background", help="Quick tweak for the editor background")
    plan.add_argument("--accent", help="Quick tweak for the accent color")
    plan.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory for the plan (and Zed theme) files",
    )

    appearance = subparsers.add_parser("appearance", help="Precompute appearance for every record")
    appearance.add_argument("catalog", help="Path to the catalog JSON file")
    appearance.add_argument("--workers", type=int, default=4, help="Worker threads (default: 4)")
    appearance.add_argument("--output", "-o", metavar="JSON", help="Write id -> appearance JSON here")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.error("a command is required (search, plan or appearance)")

    try:
        if args.command == "search":
            return _run_search(args)
        if args.command == "plan":
            return _run_plan(args, parser)
        return _run_appearance(args)
    except (CatalogLoadError, UnknownTargetError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _run_search(args):
    """Print the records matching the search flags."""
    records = load_records_from_json(args.catalog)
    cache = AppearanceCache()
    filters = ThemeFilters(
        q=args.query,
        bg=args.bg,
        token=args.role,
        hex=args.hex,
        tolerance=args.tolerance,
        sort=args.sort,
        hue=args.hue,
        styles=frozenset(args.style),
        contrast=args.contrast,
        saturation=args.saturation,
        brightness=args.brightness,
    )
    results = apply_theme_filters(records, filters, cache)

    print(f"Searched {len(records)} themes: {len(results)} match")
    print("=" * 60)
    for record in results[: max(0, args.limit)]:
        look = cache.get(record)
        tags = ", ".join(sorted(look.style_tags)) or "-"
        print(f"  {record.id:<32} {record.bg:<9} {look.hue_bucket:<8} {record.name} ({record.publisher})")
        print(f"  {'':<32} tags: {tags}")
    if len(results) > args.limit:
        print(f"  ... {len(results) - args.limit} more")
    return 0


def _parse_overrides(pairs, parser):
    overrides = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            parser.error(f"--override expects KEY=VALUE, got {pair!r}")
        overrides[key] = value
    return overrides


def _is_dark(source):
    bg = parse_color(source.theme.bg) or parse_color(source.ui_colors.get("editor.background"))
    if bg is None:
        return True
    return to_hsl(bg).l < 0.5


def _run_plan(args, parser):
    """Resolve and print an export plan, writing it (and a Zed theme) to disk."""
    records = {r.id: r for r in load_records_from_json(args.catalog)}
    theme = records.get(args.theme_id)
    if theme is None:
        parser.error(f"theme {args.theme_id!r} not found in {args.catalog}")

    target = get_target(args.target)
    payload = load_json_object(args.payload)
    detail = load_json_object(args.detail) if args.detail else None
    tweaks = QuickTweaks(editor_background=args.editor_background, accent_color=args.accent)
    overrides = _parse_overrides(args.override, parser)

    source = build_export_source(theme, payload, detail, tweaks)
    planned = build_strict_export_plan(target.id, source, target.fields, overrides)

    print(f"Theme: {theme.name} ({theme.id})")
    print(f"Target: {target.label} [{target.id}]")
    for group, rows in planned.groups.items():
        print(f"\n{group}")
        print("-" * 60)
        for row in rows:
            flag = ""
            if row.override_error:
                flag = f"  [override {row.override_error}]"
            elif row.overridden:
                flag = "  [overridden]"
            print(f"  {row.key:<44} {row.value:<24} {row.source}{flag}")

    excluded = planned.plan["excluded"]
    if excluded:
        print("\nExcluded")
        print("-" * 60)
        for entry in excluded:
            print(f"  {entry['key']:<44} {entry['reason']}")

    print("\n" + "=" * 60)
    print(f"Included: {len(planned.plan['included'])}, excluded: {len(excluded)}")

    errors = override_errors(planned)
    if errors:
        print("Build blocked by invalid overrides:")
        for key, error in errors:
            print(f"  - {key}: {error}")

    if args.output:
        os.makedirs(args.output, exist_ok=True)
        plan_path = os.path.join(args.output, f"{theme.id}.{target.id}.plan.json")
        export_plan_json(planned, plan_path, theme=theme)
        print("Exported:")
        print(f"  - {plan_path}")
        if target.id == "zed-theme":
            try:
                zed_theme = generate_zed_theme(planned, theme.name or theme.id, _is_dark(source))
            except OverrideValidationError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                return 1
            zed_path = os.path.join(args.output, f"{theme.id}{target.file_extension}")
            with open(zed_path, "w") as f:
                f.write(zed_theme)
            print(f"  - {zed_path}")
    print("=" * 60)
    return 1 if errors else 0


def _run_appearance(args):
    """Precompute appearance descriptors for the whole catalog."""
    records = load_records_from_json(args.catalog)
    cache = AppearanceCache()
    appearances = precompute_appearance(records, cache, workers=args.workers)

    buckets = {}
    for look in appearances.values():
        buckets[look.hue_bucket] = buckets.get(look.hue_bucket, 0) + 1

    print(f"Profiled {len(appearances)} themes")
    for bucket, count in sorted(buckets.items(), key=lambda item: (-item[1], item[0])):
        print(f"  {bucket:<10} {count}")

    if args.output:
        with open(args.output, "w") as f:
            json.dump({rid: look.to_dict() for rid, look in appearances.items()}, f, indent=2)
        print(f"Exported: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path

import httpx


def main(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(prog="tredit", description="Import sheet challenges into truinlag")
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Path to the engine SQLite database (default: tredit.db or $TREDIT_DB)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to settings YAML (sheet URLs, sheet sets, S-Bahn zones)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress, not only problems",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # import
    subparsers.add_parser(
        "import",
        help="Download, parse and import all challenges from the sheet",
    )

    # validate
    validate_parser = subparsers.add_parser(
        "validate",
        help="Parse a challenge sheet against the stored reference data without importing",
    )
    validate_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read the challenge sheet from a local CSV file (default: fetch the published sheet)",
    )
    validate_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write accepted challenges as JSON to file",
    )

    # challenges
    challenges_parser = subparsers.add_parser("challenges", help="Query or clear stored challenges")
    challenges_parser.add_argument(
        "action",
        choices=["list", "count", "delete"],
        help="List challenges, show count, or delete all of them",
    )
    challenges_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Don't ask for confirmation before deleting",
    )

    # reference data
    subparsers.add_parser("zones", help="Get all zones from the engine")
    subparsers.add_parser("sets", help="Get all challenge sets from the engine")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "import":
        _run_import(args)
    elif args.command == "validate":
        _run_validate(args)
    elif args.command == "challenges":
        _run_challenges(args)
    elif args.command == "zones":
        _run_zones(args)
    elif args.command == "sets":
        _run_sets(args)
    else:
        parser.print_help()


def _settings(args: argparse.Namespace):
    from tredit.config import load_settings

    settings = load_settings(args.config)
    if args.db is not None:
        settings = settings.model_copy(update={"db_path": args.db})
    return settings


def _print_report(report) -> None:
    print(
        f"Parsed {report.rows_read} rows: {len(report.accepted)} accepted, "
        f"{report.skipped} skipped, {len(report.failures)} failed"
    )
    for index, error in report.failures:
        print(f"  line {index}: {error}", file=sys.stderr)


def _run_import(args: argparse.Namespace) -> None:
    """Run import command."""
    from tredit.engine import SqliteEngine
    from tredit.errors import EngineError
    from tredit.importer import run_import
    from tredit.sheets import GoogleSheetSource

    settings = _settings(args)
    engine = SqliteEngine(settings.db_path)
    run = engine.start_run()
    source = GoogleSheetSource()
    try:
        report = run_import(engine, source, settings)
    except httpx.HTTPError as e:
        engine.finish_run(run.id, 0, 0, 0, 0, 0, status="failed")
        raise SystemExit(f"Could not fetch sheet: {e}")
    except EngineError as e:
        engine.finish_run(run.id, 0, 0, 0, 0, 0, status="failed")
        raise SystemExit(f"Engine error: {e}")
    finally:
        source.close()

    engine.finish_run(
        run.id,
        rows_read=report.rows_read,
        rows_accepted=len(report.accepted),
        rows_skipped=report.skipped,
        rows_failed=len(report.failures),
        challenges_stored=len(report.stored_ids),
    )
    _print_report(report)
    print(f"Stored {len(report.stored_ids)} challenges in {settings.db_path}")
    for position, error in report.store_failures:
        print(f"  challenge {position} not stored: {error}", file=sys.stderr)


def _run_validate(args: argparse.Namespace) -> None:
    """Run validate command."""
    from tredit.engine import SqliteEngine
    from tredit.importer import import_records
    from tredit.sheets import CsvFileSource, GoogleSheetSource

    settings = _settings(args)
    engine = SqliteEngine(settings.db_path)
    challenge_sets = [s for s in engine.get_challenge_sets() if s.name in settings.sheet_sets]
    zones = engine.get_zones()

    if args.input:
        records = CsvFileSource().fetch(str(args.input))
    else:
        source = GoogleSheetSource()
        try:
            records = source.fetch(settings.challenge_sheet_url)
        except httpx.HTTPError as e:
            raise SystemExit(f"Could not fetch sheet: {e}")
        finally:
            source.close()

    report = import_records(records, challenge_sets, zones)
    _print_report(report)

    if args.output:
        output = json.dumps(
            [c.model_dump(mode="json") for c in report.accepted],
            indent=2,
        )
        args.output.write_text(output, encoding="utf-8")
        print(f"Wrote {len(report.accepted)} challenges to {args.output}")

    if report.failures:
        raise SystemExit(1)


def _run_challenges(args: argparse.Namespace) -> None:
    """Run challenges command."""
    from tredit.engine import SqliteEngine

    engine = SqliteEngine(_settings(args).db_path)
    if args.action == "list":
        output = json.dumps(
            [c.model_dump(mode="json") for c in engine.get_raw_challenges()],
            indent=2,
        )
        print(output)
    elif args.action == "count":
        print(len(engine.get_raw_challenges()))
    elif args.action == "delete":
        if not args.yes:
            answer = input("Are you sure? (yes/no): ").strip()
            if answer != "yes":
                print("Alright, I won't delete all challenges")
                return
        deleted = engine.delete_all_challenges()
        print(f"Deleted {deleted} challenges")


def _run_zones(args: argparse.Namespace) -> None:
    """Run zones command."""
    from tredit.engine import SqliteEngine

    engine = SqliteEngine(_settings(args).db_path)
    print(json.dumps([z.model_dump(mode="json") for z in engine.get_zones()], indent=2))


def _run_sets(args: argparse.Namespace) -> None:
    """Run sets command."""
    from tredit.engine import SqliteEngine

    engine = SqliteEngine(_settings(args).db_path)
    print(json.dumps([s.model_dump(mode="json") for s in engine.get_challenge_sets()], indent=2))


if __name__ == "__main__":
    main()

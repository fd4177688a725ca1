import os
import sys
import argparse
from typing import Optional, List
from dupfind.core import scan, DupFindError
from dupfind.core.models import ScanReport
from dupfind.ui import display_path, format_summary, pluralize, render_text_report, write_json_report

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dupfind", description="Find duplicate files in a directory tree.")
    parser.add_argument("path", metavar="PATH", type=str, help="The base path to search.")
    parser.add_argument("-j", "--json", dest="json_file", type=str, default=None, help="Output JSON to a file.")
    parser.add_argument("-a", "--all", dest="include_all", action="store_true", help="Include all files (instead of only duplicates).")
    parser.add_argument("--skip-errors", action="store_true", help="Skip files that cannot be read instead of aborting the scan.")
    parser.add_argument("--no-progress", action="store_true", help="Do not show the progress bar.")
    return parser

def output_results(report: ScanReport, json_file: Optional[str]) -> None:
    for line in format_summary(report):
        print(line)

    if json_file:
        print(f"JSON output - {json_file}")
        write_json_report(report.groups, json_file)
    elif report.groups:
        print(render_text_report(report.groups))

def main(argv: Optional[List[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)

    if not os.path.isdir(args.path):
        print(f"Error: Scan directory '{args.path}' not found or is not a directory.", file=sys.stderr)
        sys.exit(1)

    try:
        report = scan(
            args.path,
            include_all=args.include_all,
            progress=not args.no_progress,
            skip_errors=args.skip_errors
        )
    except DupFindError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if report.errors:
        count = len(report.errors)
        print(f"Skipped {count} unreadable file{pluralize(count)}:", file=sys.stderr)
        for file_path, message in report.errors.items():
            print(f"  {display_path(file_path)}: {message}", file=sys.stderr)

    try:
        output_results(report, args.json_file)
    except DupFindError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()

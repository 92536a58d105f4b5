import argparse
import dataclasses
import logging
import pathlib
import sys

from spearmint.config import DEFAULT_CONFIG
from spearmint.convert import MODES, convert
from spearmint.errors import ConversionError

HINT = "Make sure the PDF contains selectable text (not scanned images)."


def build_config(args):
    overrides = {
        "flow_line_tolerance":   args.flow_tolerance,
        "table_line_tolerance":  args.table_tolerance,
        "column_min_gap":        args.column_gap,
        "heading_max_chars":     args.heading_chars,
        "heading_max_fragments": args.heading_fragments,
    }
    return dataclasses.replace(
        DEFAULT_CONFIG, **{k: v for k, v in overrides.items() if v is not None}
    )


def parse_args(argv=None):
    ap = argparse.ArgumentParser(
        prog="spearmint",
        description="Rebuild lines, headings and tables from a PDF into Word or Excel.")
    ap.add_argument("mode", choices=MODES,
                    help="word: .docx with headings and page breaks; "
                         "excel: one sheet of columns per page")
    ap.add_argument("pdf", type=pathlib.Path, help="input PDF")
    ap.add_argument("-o", "--out", type=pathlib.Path,
                    help="output file (default: <name>.docx or <name>-tables.xlsx "
                         "next to the input)")
    ap.add_argument("--flow-tolerance", type=int,
                    help=f"line tolerance for Word output (default: {DEFAULT_CONFIG.flow_line_tolerance})")
    ap.add_argument("--table-tolerance", type=int,
                    help=f"line tolerance for Excel output (default: {DEFAULT_CONFIG.table_line_tolerance})")
    ap.add_argument("--column-gap", type=int,
                    help=f"minimum gap between columns (default: {DEFAULT_CONFIG.column_min_gap})")
    ap.add_argument("--heading-chars", type=int,
                    help=f"headings are shorter than this (default: {DEFAULT_CONFIG.heading_max_chars})")
    ap.add_argument("--heading-fragments", type=int,
                    help=f"headings have at most this many runs (default: {DEFAULT_CONFIG.heading_max_fragments})")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        data = args.pdf.read_bytes()
    except OSError as exc:
        sys.exit(f"{args.pdf}: cannot read: {exc}")

    def progress(done, total):
        print(f"\rpage {done}/{total}", end="", file=sys.stderr, flush=True)

    try:
        result = convert(data, args.pdf.name, args.mode, build_config(args), progress)
    except ConversionError as exc:
        print(file=sys.stderr)
        sys.exit(f"Conversion failed: {exc}. {HINT}")
    print(file=sys.stderr)

    out = args.out or args.pdf.with_name(result.file_name)
    out.write_bytes(result.data)
    print(f"Wrote {out} ({result.page_count} pages)")


if __name__ == "__main__":
    main()

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Union

from geogebra_tikz import ConvertOptions, convert_source, wrap_output

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geogebra-tikz",
        description=(
            "Convert GeoGebra TikZ exports, construction XML or .ggb files "
            "into clean TikZ code"
        ),
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Input files (.ggb, .xml or exported .tex); reads stdin when omitted",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Output file, or output directory when several inputs are given",
    )
    layout = parser.add_mutually_exclusive_group()
    layout.add_argument(
        "-s",
        "--standalone",
        dest="standalone",
        action="store_true",
        help="Emit a complete standalone LaTeX document",
    )
    layout.add_argument(
        "-t",
        "--tikzonly",
        dest="standalone",
        action="store_false",
        help="Emit only the tikzpicture fragment (default)",
    )
    parser.add_argument(
        "--no-round",
        action="store_true",
        help="Keep full precision instead of rounding to 3 decimals",
    )
    parser.add_argument(
        "--no-points",
        action="store_true",
        help="Do not draw point markers",
    )
    parser.add_argument(
        "--no-labels",
        action="store_true",
        help="Do not draw point labels",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.set_defaults(standalone=False)
    return parser


def _read_input(path: Path) -> Union[str, bytes]:
    if path.suffix.lower() == ".ggb":
        return path.read_bytes()
    return path.read_text(encoding="utf-8")


def _render(content: Union[str, bytes], options: ConvertOptions, standalone: bool) -> str:
    return wrap_output(convert_source(content, options), standalone=standalone)


def _run_stdin(options: ConvertOptions, standalone: bool, output: Optional[str]) -> int:
    try:
        result = _render(sys.stdin.read(), options, standalone)
    except ValueError as exc:
        logger.error("Conversion failed: %s", exc)
        return 1
    if output:
        Path(output).write_text(result, encoding="utf-8")
        logger.info("Wrote %s", output)
    else:
        sys.stdout.write(result + "\n")
    return 0


def _run_files(
    files: List[str],
    options: ConvertOptions,
    standalone: bool,
    output: Optional[str],
) -> int:
    out_dir: Optional[Path] = None
    if output and len(files) > 1:
        out_dir = Path(output)
        out_dir.mkdir(parents=True, exist_ok=True)

    succeeded = 0
    failed = 0
    for name in files:
        path = Path(name)
        try:
            result = _render(_read_input(path), options, standalone)
            if output:
                target = out_dir / f"{path.stem}.tex" if out_dir is not None else Path(output)
                target.write_text(result, encoding="utf-8")
                logger.info("%s -> %s", path, target)
            else:
                if len(files) > 1:
                    print(f"% === {name} ===")
                sys.stdout.write(result + "\n")
            succeeded += 1
        except (ValueError, OSError) as exc:
            logger.error("%s: %s", name, exc)
            failed += 1

    if len(files) > 1:
        logger.info("Done: %d succeeded, %d failed", succeeded, failed)
    return 1 if failed else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if not args.files and sys.stdin.isatty():
        parser.print_help()
        return 0

    options = ConvertOptions(
        round=not args.no_round,
        points=not args.no_points,
        labels=not args.no_labels,
    )
    if not args.files:
        return _run_stdin(options, args.standalone, args.output)
    return _run_files(args.files, options, args.standalone, args.output)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

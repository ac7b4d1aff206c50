"""
CLI entry point for WordGrade readability analysis.

Usage:
    # Single file, JSON score set on stdout
    python -m wordgrade post.html

    # Read from stdin
    cat post.html | python -m wordgrade -

    # Several files, human-readable report with bands and metadata
    python -m wordgrade drafts/*.html --format text --metadata

    # Save the full result
    python -m wordgrade post.html --metadata --output results/post.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wordgrade.config import settings
from wordgrade.features.readability import (
    METRIC_LABELS,
    ReadabilityAnalysisResult,
    ReadabilityAnalyzer,
    ReadabilityScores,
)

logger = logging.getLogger(__name__)

STDIN_MARKER = '-'


def _read_input(source: str) -> str:
    """Read one input: a file path, or "-" for stdin."""
    if source == STDIN_MARKER:
        return sys.stdin.read()
    return Path(source).read_text(encoding='utf-8')


def _to_json_ready(result: ReadabilityScores | ReadabilityAnalysisResult) -> dict:
    if isinstance(result, ReadabilityAnalysisResult):
        return result.to_dict()
    return result.to_score_set()


def _format_text(source: str, result: ReadabilityScores | ReadabilityAnalysisResult) -> str:
    """Render one result as a plain-text report."""
    if isinstance(result, ReadabilityScores):
        return f"{source}\n{result.get_summary()}"

    lines = [source, result.scores.get_summary()]
    if result.summary is not None:
        lines.append(f"\nOverall: {result.summary.level}")
    if result.classifications:
        lines.append("\nBands:")
        for metric, classification in result.classifications.items():
            lines.append(
                f"  {METRIC_LABELS.get(metric, metric)}: {classification.band} "
                f"({classification.color})"
            )
    lines.append("")
    lines.append(result.metadata.get_summary())
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="wordgrade",
        description="WordGrade readability analysis: Normalize -> Count -> Score"
    )
    ap.add_argument('inputs', nargs='*', default=[STDIN_MARKER],
                    help='Input files (HTML or plain text). Use "-" for stdin (default).')
    ap.add_argument('--format', choices=['json', 'text'], default='json', dest='output_format',
                    help='Output format (default: json)')
    ap.add_argument('--metadata', action='store_true',
                    help='Include lexical statistics, warnings, bands and summary')
    ap.add_argument('--output', type=str, default=None,
                    help='Write JSON results to this file instead of stdout')
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument('--verbose', action='store_true', help='Enable debug logging')
    verbosity.add_argument('--quiet', action='store_true', help='Only log errors and warnings')
    args = ap.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    analyzer = ReadabilityAnalyzer()
    return_metadata = args.metadata or settings.readability.output.include_metadata

    results = {}
    failures = 0
    for source in args.inputs:
        try:
            text = _read_input(source)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read {source}: {e}")
            failures += 1
            continue
        results[source] = analyzer.extract_features(text, return_metadata=return_metadata)

    if args.output_format == 'text' and not args.output:
        print("\n\n".join(_format_text(source, result) for source, result in results.items()))
    else:
        payload = {source: _to_json_ready(result) for source, result in results.items()}
        if len(args.inputs) == 1:
            payload = next(iter(payload.values()), {})
        rendered = json.dumps(payload, indent=settings.readability.output.indent)

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(rendered + "\n", encoding='utf-8')
            logger.info(f"Saved {len(results)} result(s) to {output_path}")
        else:
            print(rendered)

    if failures:
        logger.error(f"{failures} of {len(args.inputs)} input(s) could not be read")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

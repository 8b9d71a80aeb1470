# -*- coding: utf-8 -*-
"""
Command-line entry point.

Usage examples:
  python -m codeiter --prompt "add logging" --code-file app.py
  cat app.py | OPENAI_API_KEY=... python -m codeiter --prompt "add type hints"

Prints {"modifiedCode": ..., "explanation": ...} as JSON on stdout.
Exit codes: 0 ok, 1 request/generation failure, 2 missing configuration.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from codeiter.config.settings import Settings
from codeiter.orchestration.code_iterator import CodeIterator, ConfigurationError
from codeiter.orchestration.iteration_types import IterationError
from codeiter.utils.logging import SimpleLogger


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="codeiter",
        description="Ask an LLM to apply a change request to a code snippet.",
    )
    ap.add_argument("--prompt", required=True, help="Change request, e.g. 'add logging'")
    ap.add_argument("--code-file", default=None, help="File holding the code (default: read stdin)")
    ap.add_argument("--model", default=None, help="Model ID (default: CODEITER_MODEL or gpt-4o)")
    ap.add_argument("--retry", action="store_true", help="Append the JSON-format reminder to the prompt")
    ap.add_argument("--quiet", action="store_true", help="Disable log lines on stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    SimpleLogger.configure(enabled=Settings.log_enabled() and not args.quiet, level=Settings.log_level())

    if args.code_file:
        try:
            code = Path(args.code_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"ERROR: cannot read code file {args.code_file}: {exc}", file=sys.stderr)
            return 1
    else:
        code = sys.stdin.read()

    iterator = CodeIterator(model_name=args.model)
    try:
        if args.retry:
            result = iterator.retry(code, args.prompt)
        else:
            result = iterator.iterate(code, args.prompt)
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    except IterationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

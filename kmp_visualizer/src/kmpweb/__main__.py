from __future__ import annotations
import argparse, json, logging, os, sys
from kmptrace.engine import match
from .textview import render_frame, render_header

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _cells(values) -> str:
    return " ".join(f"{v:>2}" for v in values)

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Knuth-Morris-Pratt search with a step-by-step trace")
    p.add_argument("text", help="Text to search in")
    p.add_argument("pattern", help="Pattern to search for")
    p.add_argument("--steps", action="store_true", help="Print every step as a text frame")
    p.add_argument("--json", action="store_true", help="Emit the full result as JSON")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    result = match(args.text, args.pattern)
    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0 if result.ok else 2
    if not result.ok:
        print(_c(f"error: {result.error.message}", "1;31"), file=sys.stderr)  # type: ignore[union-attr]
        return 2

    print("Pattern :", _cells(args.pattern))
    print("Failure :", _cells(result.failure_function))
    print()

    if args.steps:
        total = len(result.steps)
        for k, step in enumerate(result.steps, 1):
            print(_c(render_header(k, total, step), "1;37"))
            print(render_frame(args.text, args.pattern, step))
            print(_c(step.status, "2;37"))
            print()

    if result.found:
        print(_c(f"Found at: {', '.join(str(x) for x in result.positions)}", "1;32"))
    else:
        print(_c("(no matches)", "2;37"))
    print(f"Comparisons: {result.comparisons}  Steps: {len(result.steps)}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations
import argparse, json, logging, sys
from backend import Engine, InvalidInput
from backend.render import format_search_result

log = logging.getLogger(__name__)

USAGE_EXAMPLE = "Example usage:\n\nphonetic-search Jones Winston Smith < names.txt\n"


def main(argv: list[str] | None = None, *, stdin=None) -> int:
    p = argparse.ArgumentParser(
        prog="phonetic-search",
        description="Find names in a library that sound like the given search terms",
    )
    p.add_argument("terms", nargs="*", help="Names to search for")
    p.add_argument("--names", action="append", default=[], metavar="PATH",
                   help="Name file or folder of *.txt, repeatable (default: read names from stdin)")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--workers", type=int, default=None, help="Threads for batch search")
    p.add_argument("--skip-invalid", action="store_true",
                   help="Drop library names without letters instead of failing")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_intermixed_args(argv)

    if not args.terms:
        print("You have not entered any search terms.")
        print(USAGE_EXAMPLE)
        print("Please try again.")
        return 2

    eng = Engine()
    try:
        try:
            if args.names:
                eng.load_files(args.names, skip_invalid=args.skip_invalid, verbose=args.verbose)
            else:
                eng.load_stream(stdin if stdin is not None else sys.stdin, skip_invalid=args.skip_invalid, verbose=args.verbose)
        except InvalidInput as exc:
            print(f"Invalid library entry: {exc}", file=sys.stderr)
            return 1
        except FileNotFoundError as exc:
            print(f"Names file not found: {exc}", file=sys.stderr)
            return 1

        if eng.size == 0:
            print("You have not entered or provided any names to be added to the search library. "
                  "Please provide a file containing names (1 per line) as a standard input.")
            print(USAGE_EXAMPLE)
            print("Please try again.")
            return 1

        results = eng.search_many(args.terms, workers=args.workers)
        if args.json:
            print(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
        else:
            for r in results:
                print(format_search_result(r))
        bad = [r.term for r in results if r.error is not None]
        if bad:
            log.info("Terms without letters: %s", bad)
        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())

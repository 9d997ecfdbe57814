from __future__ import annotations
import argparse, json, os, sys
from .engine import SuggestionEngine
from .loader import load_candidates, load_json
from .config import MAX_SCORE
from .models import SuggestionSet

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_table(s: SuggestionSet) -> None:
    flags = [name for name in ("typed_word_valid", "will_auto_correct", "is_punctuation_suggestions",
                               "is_obsolete", "is_prediction") if getattr(s, name)]
    print(_c(f"[{', '.join(flags) or 'no flags'}]", "2;37"))
    if not len(s):
        print(_c("(no suggestions)", "2;37")); return
    print(_c("#  Score       Kind         Source               Word", "1;37"))
    for i, cand in enumerate(s):
        score = "MAX" if cand.score == MAX_SCORE else cand.score
        print(f"{i:<2} {score:<11} {cand.kind.label:<12} {cand.source[:20]:<20} {cand}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Suggestion set CLI (dedup / retype / app completions)")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--input", default=None, help="JSON file with scored candidates")
    src.add_argument("--completions", default=None, help="JSON list of application-defined completions")
    src.add_argument("--punctuation", action="store_true", help="Show the punctuation strip")
    p.add_argument("--retype", action="append", default=[], metavar="WORD",
                   help="Compose WORD with the current set (repeatable)")
    p.add_argument("--repl", action="store_true", help="Interactive loop: each line is a retyped word")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    eng = SuggestionEngine(verbose=args.verbose)

    def show(s: SuggestionSet) -> None:
        if args.json:
            print(json.dumps(s.to_dict(), ensure_ascii=False, indent=2))
        else:
            _print_table(s)

    try:
        try:
            if args.input:
                cands, flags = load_candidates(args.input)
                eng.update(cands, **flags)
            elif args.completions:
                entries = load_json(args.completions)
                if not isinstance(entries, list):
                    raise ValueError(f"{args.completions}: expected a JSON list of completions")
                eng.show_app_completions(entries)
            elif args.punctuation:
                eng.show_punctuation()
        except (OSError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        for word in args.retype:
            eng.retype(word)
        show(eng.current)

        if args.repl:
            print("Type a word and press Enter (empty line to exit).  ':clear' resets the set.")
            while True:
                try:
                    word = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    print(); break
                if not word:
                    break
                if word.lower() == ":clear":
                    eng.clear(); print(_c("(cleared)", "2;36")); continue
                show(eng.retype(word))
        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations
import argparse, json, logging, os, sys
from dataclasses import asdict

from . import config as CFG
from .align import resolve_corresponding_handle
from .drafts import clear_draft, get_draft, save_draft
from .DB.api import make_store
from .engine import Comparison
from .sentences import split_sentences
from .submission import SubmissionError


def _read_text(arg: str) -> str:
    if arg == "-":
        return sys.stdin.read()
    return arg


def _print_sentences(text: str, as_json: bool) -> None:
    rows = split_sentences(text)
    if as_json:
        print(json.dumps([asdict(s) for s in rows], ensure_ascii=False, indent=2))
        return
    if not rows:
        print("(no sentences)"); return
    print("#   Id            Sentence")
    for s in rows:
        print(f"{s.index:<3} {s.id:<13} {s.text}")


def _print_comparison(cmp: Comparison, as_json: bool) -> None:
    data = cmp.to_dict()
    if as_json:
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return
    print(f"Submission {data['submission_id'] or '?'}  score={data['score']:.1f}  "
          f"band={data['band']}  available={data['bands']}")
    for p in data["paragraphs"]:
        print(f"\n[{p['id']}] {p['role']}")
        left, right = p["original"]["sentences"], p["improved"]["sentences"]
        for i in range(max(len(left), len(right))):
            mark = "*" if (i < len(left) and left[i]["active"]) or (i < len(right) and right[i]["active"]) else " "
            a = left[i]["text"] if i < len(left) else "—"
            b = right[i]["text"] if i < len(right) else "—"
            print(f" {mark}{i:<2} {a}\n     -> {b}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Essay sentence splitting and side-by-side alignment")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--split", metavar="TEXT", help="Split TEXT into sentences ('-' reads stdin)")
    g.add_argument("--compare", metavar="FILE", help="Submission JSON from the scoring backend")
    g.add_argument("--resolve", metavar="ID", help="Sentence element id to find the counterpart of")
    g.add_argument("--save-draft", metavar="FILE", help="Store FILE's text as the essay draft")
    g.add_argument("--show-draft", action="store_true", help="Print the stored draft")
    g.add_argument("--clear-draft", action="store_true", help="Delete the stored draft")

    p.add_argument("--band", type=int, default=None, help=f"Improved band to compare ({CFG.BANDS})")
    p.add_argument("--hover", metavar="ID", default=None, help="Mark a sentence as active (with --compare)")
    p.add_argument("--container", default=None, help="Container id of the panel being rendered (with --resolve)")
    p.add_argument("--from-improved", action="store_true", help="Active sentence is on the improved side")
    p.add_argument("--topic", default="", help="Topic stored with --save-draft")
    p.add_argument("--db", default=CFG.STORE_DSN, help="Draft store DSN: 'memory://' or 'sqlite:///path'")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose or os.environ.get("ESSAYSYNC_VERBOSE") == "1":
        logging.basicConfig(level=logging.INFO)

    if args.split is not None:
        _print_sentences(_read_text(args.split), args.json)
        return 0

    if args.resolve is not None:
        if not args.container:
            p.error("--resolve requires --container")
        h = resolve_corresponding_handle(args.resolve, args.container, not args.from_improved)
        if args.json:
            print(json.dumps(h.element_id if h else None))
        else:
            print(h.element_id if h else "(no counterpart)")
        return 0 if h else 1

    if args.compare is not None:
        try:
            with open(args.compare, "r", encoding="utf-8") as f:
                cmp = Comparison.from_json(f.read(), band=args.band)
        except FileNotFoundError:
            p.error(f"no such file: {args.compare}")
        except (json.JSONDecodeError, SubmissionError, ValueError) as exc:
            p.error(f"cannot compare {args.compare}: {exc}")
        if args.hover:
            cmp.hover(args.hover)
        _print_comparison(cmp, args.json)
        return 0

    store = make_store(args.db)
    try:
        if args.save_draft is not None:
            try:
                with open(args.save_draft, "r", encoding="utf-8") as f:
                    essay = f.read()
            except FileNotFoundError:
                p.error(f"no such file: {args.save_draft}")
            d = save_draft(store, essay=essay, topic=args.topic,
                           topic_source="custom" if args.topic else "generated",
                           custom_topic=args.topic)
            print(f"saved draft ({len(d.essay)} chars)")
        elif args.show_draft:
            d = get_draft(store)
            if args.json:
                print(json.dumps(asdict(d) if d else None, ensure_ascii=False, indent=2))
            else:
                print(d.essay if d else "(no draft)")
        else:
            clear_draft(store)
            print("(draft cleared)")
        return 0
    finally:
        store.close()


if __name__ == "__main__":
    raise SystemExit(main())

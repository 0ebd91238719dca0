from __future__ import annotations

import argparse
import logging
from collections import Counter

from adapters.keyboard import RandomKeyResponsePort, ScriptedKeyResponsePort
from adapters.time import FakeClockPort
from ports.input import KeyResponsePort
from shared.config.loader import load_experiment_settings

from apps.experiment.compose import build_session


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="parry")
    ap.add_argument("--tui", action="store_true", help="Run the live Textual experiment.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--keys", help="Comma-separated response script; empty entry = timeout.")
    src.add_argument("--simulate", action="store_true", help="Use a simulated participant.")
    ap.add_argument("--seed", help="Override the transition RNG seed.")
    ap.add_argument("--repetitions", type=int, help="Override the number of rounds.")
    ap.add_argument("--dispatch", choices=["guarded", "direct"], help="Step selection mode.")
    ap.add_argument("--profile", help="Config profile under configs/profiles/.")
    ap.add_argument("--quiet", action="store_true", help="Only print the summary.")
    ap.add_argument("--verbose", action="store_true", help="Log every step.")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_experiment_settings(profile=args.profile)
    overrides = {
        k: v
        for k, v in {
            "seed": args.seed,
            "repetitions": args.repetitions,
            "dispatch": args.dispatch,
        }.items()
        if v is not None
    }
    if overrides:
        settings = settings.model_validate({**settings.model_dump(), **overrides})

    if args.tui:
        from apps.experiment.tui import ExperimentTUI

        ExperimentTUI(settings).run()
        return 0

    # headless runs use simulated time so records are reproducible
    clock = FakeClockPort()
    responses: KeyResponsePort
    if args.keys is not None:
        responses = ScriptedKeyResponsePort.from_csv(args.keys, clock=clock)
    elif args.simulate:
        responses = RandomKeyResponsePort(seed=settings.seed)
    else:
        print("[parry] nothing to do: pass --tui, --keys or --simulate")
        return 2

    session = build_session(settings, clock=clock)
    if not args.quiet:
        print(
            f"[parry] seed={settings.seed} repetitions={settings.repetitions} "
            f"dispatch={settings.dispatch} window={settings.trial_duration_ms}ms"
        )

    records = session.run(responses)
    if not args.quiet:
        for rec in records:
            print(rec.model_dump_json())

    actions = Counter(r.action for r in records)
    print(
        f"[parry] steps={len(records)} rounds={session.rounds.rounds_completed}"
        f"/{settings.repetitions} actions={dict(sorted(actions.items()))}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

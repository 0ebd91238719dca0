from __future__ import annotations

from adapters.time import SystemClockPort
from domain.combat import PendingStep
from rich.text import Text
from shared.config.loader import load_experiment_settings
from shared.contracts.v1.step import StepRecord
from textual import events
from textual.app import App, ComposeResult
from textual.timer import Timer
from textual.widgets import DataTable, Footer, Header, Static

from apps.experiment.compose import build_renderer, build_session
from apps.experiment.settings import ExperimentSettings


class ExperimentTUI(App):
    CSS_PATH = None
    # q/w/e are response keys, so quitting lives on escape
    BINDINGS = [("escape", "quit", "Quit")]

    def __init__(self, settings: ExperimentSettings | None = None) -> None:
        super().__init__()
        self.settings = settings or load_experiment_settings()
        self.rt_clock = SystemClockPort()
        self.session = build_session(
            self.settings, clock=self.rt_clock, renderer=build_renderer(self.settings, "text")
        )
        self._current_step: PendingStep | None = None
        self._window_timer: Timer | None = None
        self._last_record: StepRecord | None = None
        self._stage: Static | None = None
        self._status: Static | None = None
        self._table: DataTable | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        keys = " • ".join(f"{k}={a}" for k, a in self.settings.keymap.items())
        yield Static(f"[b]keys[/b] {keys} • window {self.settings.trial_duration_ms}ms")
        self._stage = Static("")
        self._status = Static("")
        table = DataTable(zebra_stripes=True)
        table.add_columns("#", "Round", "State", "Action", "Next", "RT (ms)")
        self._table = table
        yield self._stage
        yield self._status
        yield table
        yield Footer()

    def on_mount(self) -> None:
        self._next_step()

    def action_quit(self) -> None:
        self.exit()

    # ----- step loop -----

    def on_key(self, event: events.Key) -> None:
        if self._current_step is None or event.key not in self.session.choices:
            return
        rt = (self.rt_clock.now() - self._current_step.onset) * 1000.0
        self._finish(event.key, round(rt, 1))

    def _on_timeout(self) -> None:
        if self._current_step is not None:
            self._finish(None, None)

    def _finish(self, key: str | None, rt: float | None) -> None:
        if self._window_timer is not None:
            self._window_timer.stop()
            self._window_timer = None
        pending, self._current_step = self._current_step, None
        if pending is None:
            return
        rec = self.session.complete(pending, key, rt)
        self._last_record = rec
        if self._table is not None:
            self._table.add_row(
                str(rec.trial_index),
                str(rec.round),
                str(rec.state),
                rec.action,
                str(rec.next_state),
                f"{rec.rt:.0f}" if rec.rt is not None else "-",
            )
        self._next_step()

    def _next_step(self) -> None:
        pending = self.session.present()
        if pending is None:
            if self._stage is not None:
                self._stage.update(Text("Done. Press escape to exit.", style="bold green"))
            self._refresh_status()
            self.notify("All rounds complete", severity="information")
            return
        self._current_step = pending
        if self._stage is not None:
            self._stage.update(self._stage_text(pending))
        self._refresh_status()
        window_s = self.settings.trial_duration_ms / 1000.0
        self._window_timer = self.set_timer(window_s, self._on_timeout)

    # ----- rendering -----

    def _refresh_status(self) -> None:
        if self._status is not None:
            self._status.update(self._status_text())

    def _stage_text(self, pending: PendingStep) -> Text:
        text = Text()
        text.append(f"opponent: {pending.stimulus.opponent or '-'}\n", style="bold red")
        text.append(f"  player: {pending.stimulus.player or '-'}", style="bold cyan")
        return text

    def _status_text(self) -> str:
        rounds = self.session.rounds
        rec = self._last_record
        last = f"{rec.state} --{rec.action}--> {rec.next_state}" if rec else "-"
        return (
            f"Round: {min(rounds.rounds_completed + 1, rounds.repetitions)}/{rounds.repetitions}"
            f" • Steps: {len(self.session.history)} • Last: {last} • Esc quit"
        )

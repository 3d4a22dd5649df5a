"""
cli.py - interactive keystroke driver for the DLB autocomplete engine
Features:
- Every typed character is fed to the engine one at a time (advance)
- '<' retreats one character, slash commands for reset/add/tree/stats
- After each line a table shows prefix, lock state, counts and a prediction
- Uses Rich for tables and formatting
"""

import argparse
import logging
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box

from dlb_autocomplete.core import AutoComplete, AutoCompleteError
from dlb_autocomplete.utils.config_manager import Config
from dlb_autocomplete.utils.logger_utils import Log
from dlb_autocomplete.utils.wordlist import load_words

logger = logging.getLogger(__name__)

RETREAT_KEY = "<"

HELP = (
    "Type characters to extend the prefix, '<' to delete one.\n"
    "Commands: /reset /add [word] /tree [start] /stats /help /quit"
)


class CLI:
    """Command-line host: turns input lines into engine calls and renders the cursor state."""
    def __init__(self, engine: Optional[AutoComplete] = None, console: Optional[Console] = None,
                 cfg: Optional[Config] = None):
        self.engine = engine or AutoComplete()
        self.console = console or Console()
        self.cfg = cfg
        self.running = True

    def run(self):
        """Main loop: prompt, handle, show state, until /quit or EOF."""
        self.console.rule("[bold magenta]DLB Autocomplete[/bold magenta]")
        self.console.print(f"[cyan]{HELP}[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask(f"[green]{self.engine.current_prefix or '>'}[/green]",
                                  console=self.console, default="")
            except (EOFError, KeyboardInterrupt):
                break
            self.handle(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str) -> bool:
        """Process one input line. Returns False once the session should end."""
        if line.startswith("/"):
            self._handle_command(line)
        else:
            self._type(line)
        if self.running and not line.startswith("/tree"):
            self._show_state()
        return self.running

    def _handle_command(self, cmd: str):
        name, _, arg = cmd.partition(" ")
        arg = arg.strip()

        if name == "/quit":
            self.running = False
            return
        if name == "/help":
            self.console.print(HELP)
            return
        if name == "/reset":
            self.engine.reset()
            return
        if name == "/add":
            self._add(arg or None)
            return
        if name == "/tree":
            self.console.print(Panel("\n".join(self.engine.dump(arg)), title="trie", expand=False))
            return
        if name == "/stats":
            self._show_stats()
            return

        self.console.print(f"[red]Unknown command:[/red] {cmd}")

    def _type(self, keys: str):
        for ch in keys:
            try:
                if ch == RETREAT_KEY:
                    self.engine.retreat()
                else:
                    self.engine.advance(ch)
            except AutoCompleteError as e:
                self.console.print(f"[red]{e}[/red]")
                return

    def _add(self, word: Optional[str]):
        try:
            added = self.engine.add(word) if word else self.engine.add()
        except AutoCompleteError as e:
            self.console.print(f"[red]{e}[/red]")
            return
        shown = word or self.engine.current_prefix
        if added:
            self.console.print(f"[green]Added:[/green] {shown}")
        else:
            self.console.print(f"[yellow]Already known:[/yellow] {shown}")

    # DISPLAY -------------------------------------------------------------------------------
    def _show_state(self):
        table = Table(box=box.SIMPLE, show_edge=False)
        table.add_column("Prefix", style="bold")
        table.add_column("State", style="cyan")
        table.add_column("Word?", justify="center")
        if self._show_counts():
            table.add_column("Predictions", justify="right", style="magenta")
        table.add_column("Prediction", style="green")

        engine = self.engine
        state = f"locked({engine.locked_depth})" if engine.locked else "ok"
        row = [repr(engine.current_prefix), state, "yes" if engine.is_word() else "no"]
        if self._show_counts():
            row.append(str(engine.get_number_of_predictions()))
        row.append(engine.retrieve_prediction() or "-")
        table.add_row(*row)
        self.console.print(table)

    def _show_stats(self):
        words: List[str] = list(self.engine.words())
        limit = self.cfg.get("max_display", 5) if self.cfg else 5
        sample = ", ".join(words[:limit])
        if len(words) > limit:
            sample += ", ..."
        self.console.print(Panel(
            f"words: {len(self.engine)}\nnodes: {self.engine.trie.node_count - 1}\nfirst: {sample or '-'}",
            title="dictionary",
            expand=False,
        ))

    def _show_counts(self) -> bool:
        return bool(self.cfg.get("show_counts", True)) if self.cfg else True


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dlb-autocomplete", description="Interactive DLB trie autocomplete")
    p.add_argument("--dict", dest="dictionary", help="word list, one word per line")
    p.add_argument("--config", default="config.json", help="JSON config file")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    return p


def load_engine(path: Optional[str]) -> AutoComplete:
    if not path:
        return AutoComplete()
    with Log.time_block(f"load {path}"):
        engine = AutoComplete.from_words(load_words(path))
    logger.info("loaded %d words from %s", len(engine), path)
    return engine


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    level = (args.log_level or cfg.get("log_level") or "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    engine = load_engine(args.dictionary or cfg.get("dictionary"))
    CLI(engine, cfg=cfg).run()


if __name__ == "__main__":
    main()

"""
cli.py - command line interface for the predictive text engine
Features:
- Prefix autocompletion with "did you mean" correction when nothing matches
- Learning from selections, corrections and free training text
- Next-word prediction from a context string
- Save/load of the learned frequency model
- Automated demo and a suggest() benchmark
- Uses Rich for tables and formatting
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from predictive_text.autocompleter import PredictiveText
from predictive_text.core.bench_profiling import run_benchmark
from predictive_text.utils.config_manager import Config
from predictive_text.utils.logger_utils import DEFAULT_LOG_PATH, configure_logging, time_block


HELP = [
    ("<prefix>", "autocomplete suggestions"),
    ("select <word>", "learn from your word choice"),
    ("correct <word>", "auto-correction"),
    ("predict <context>", "predict the next word"),
    ("train <text>", "train with custom text"),
    ("stats", "system statistics"),
    ("save / load", "persist learning to file"),
    ("config [key val]", "show or change settings"),
    ("demo", "run the automated demonstration"),
    ("quit", "exit"),
]

DEMO_PREFIXES = ["th", "com", "wor", "app"]
DEMO_TYPOS = ["teh", "recieve", "seperate", "occured"]
DEMO_CONTEXTS = ["I am", "The quick", "We will", "She can"]


def _join(words: List[str]) -> str:
    return escape(", ".join(words))


class CLI:
    """Interactive shell owning one PredictiveText engine for its lifetime."""

    def __init__(
        self,
        engine: Optional[PredictiveText] = None,
        cfg: Optional[Config] = None,
        console: Optional[Console] = None,
    ):
        self.cfg = cfg or Config()
        self.console = console or Console()
        self.engine = engine or PredictiveText(
            seed_common_words=self.cfg.get("seed_common_words"),
            selection_boost=self.cfg.get("selection_boost"),
        )
        self.running = True

    # MAIN LOOP -----------------------------------------------------------------
    def run(self):
        self.console.rule("[bold magenta]Predictive Text System[/bold magenta]")
        self.console.print("[cyan]This system learns from your usage patterns![/cyan]")
        self._show_help()

        while self.running:
            try:
                line = Prompt.ask("\n[green]>[/green]", console=self.console, default="")
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break
            self.handle(line)
        self.console.print("Thank you for using Predictive Text System!")

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str) -> bool:
        """Run one input line. Returns False once the user asked to quit."""
        if not line:
            return self.running

        if line == "quit":
            self.running = False
        elif line == "help":
            self._show_help()
        elif line == "stats":
            self.show_stats()
        elif line == "save":
            self._save()
        elif line == "load":
            self._load()
        elif line == "demo":
            self.run_demo()
        elif line == "config" or line.startswith("config "):
            self._config(line.split()[1:])
        elif line.startswith("select "):
            word = line[len("select "):].strip()
            if not word:
                self.console.print("usage: select <word>")
            else:
                self.engine.user_selected_word(word)
                self.console.print(f"Learning: increased priority for '{escape(word)}'")
        elif line.startswith("correct "):
            self._correct(line[len("correct "):].strip())
        elif line.startswith("predict "):
            self._predict(line[len("predict "):])
        elif line.startswith("train "):
            with time_block("train", level=logging.DEBUG):
                n = self.engine.train_from_text(line[len("train "):])
            self.console.print(f"Training completed! Learned {n} words.")
        else:
            self._suggest(line)
        return self.running

    def _suggest(self, prefix: str):
        suggestions = self.engine.suggest(prefix, self.cfg.get("max_suggestions"))
        if suggestions:
            self.console.print(f"Suggestions for '{escape(prefix)}': {_join(suggestions)}")
            return

        self.console.print(f"[dim]No suggestions found for '{escape(prefix)}'[/dim]")
        corrected = self.engine.correct(prefix)
        if corrected != prefix:
            self.console.print(f"Did you mean: '[bold]{escape(corrected)}[/bold]'?")

    def _correct(self, word: str):
        corrected = self.engine.correct(word)
        self.console.print(f"Auto-correction: '{escape(word)}' -> '{escape(corrected)}'")
        if corrected != word:
            self.console.print("[dim]Learning from correction...[/dim]")
            self.engine.user_selected_word(corrected)

    def _predict(self, context: str):
        preds = self.engine.predict_next(context)
        shown = _join(preds) if preds else "No predictions available"
        self.console.print(f"Next word predictions for '{escape(context)}': {shown}")

    def _save(self):
        path = self.cfg.get("model_path")
        if self.engine.save(path):
            self.console.print(f"[green]Model saved to {escape(path)}[/green]")
        else:
            self.console.print(f"[red]Error: could not save model to {escape(path)}[/red]")

    def _load(self):
        path = self.cfg.get("model_path")
        if self.engine.load(path):
            self.console.print(f"[green]Model loaded from {escape(path)}[/green]")
        else:
            self.console.print(f"[red]Could not load model from {escape(path)}[/red]")

    def _config(self, args: List[str]):
        if not args:
            self.console.print(Panel("\n".join(escape(s) for s in self.cfg.show()), title="Config"))
        elif len(args) == 2:
            try:
                self.cfg.set(args[0], args[1])
            except (KeyError, ValueError) as e:
                self.console.print(f"[red]{escape(str(e))}[/red]")
                return
            self.console.print(f"{escape(args[0])} = {escape(str(self.cfg.get(args[0])))}")
        else:
            self.console.print("usage: config [key val]")

    # DISPLAY -------------------------------------------------------------------
    def _show_help(self):
        table = Table(title="Commands", box=box.SIMPLE, show_edge=False)
        table.add_column("Command", style="cyan")
        table.add_column("Action")
        for cmd, what in HELP:
            table.add_row(escape(cmd), what)
        self.console.print(table)

    def show_stats(self):
        st = self.engine.stats()
        table = Table(title="Predictive Text System Stats", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("Total unique words", str(st.total_words))
        table.add_row("Total usage frequency", str(st.total_frequency))
        table.add_row("Average usage per word", f"{st.average_frequency:.2f}")
        self.console.print(table)

    # DEMO + BENCHMARK ------------------------------------------------------------
    def run_demo(self):
        c = self.console
        c.rule("Automated Demo")
        n = self.cfg.get("demo_suggestions")

        c.print("\n[bold]1. Basic Autocomplete:[/bold]")
        for prefix in DEMO_PREFIXES:
            c.print(f"   '{prefix}' -> {_join(self.engine.suggest(prefix, n))}")

        c.print("\n[bold]2. Learning from Selection:[/bold]")
        c.print(f"   Before learning: {_join(self.engine.suggest('pro', 3))}")
        for word in ("programming", "programming", "program"):
            self.engine.user_selected_word(word)
        c.print(f"   After learning: {_join(self.engine.suggest('pro', 3))}")

        c.print("\n[bold]3. Auto-correction:[/bold]")
        for typo in DEMO_TYPOS:
            c.print(f"   '{typo}' -> '{escape(self.engine.correct(typo))}'")

        c.print("\n[bold]4. Context Prediction:[/bold]")
        for context in DEMO_CONTEXTS:
            c.print(f"   '{context}' -> {_join(self.engine.predict_next(context)[:3])}")

        c.print("\nDemo completed!")

    def run_benchmark(self, rng: Optional[random.Random] = None):
        self.console.rule("Performance Benchmark")
        res = run_benchmark(self.engine, self.cfg.get("benchmark_operations"), rng=rng)
        self.console.print("Benchmark Results:")
        self.console.print(f"- Operations performed: {res['operations']}")
        self.console.print(f"- Total time: {res['total_us']:.0f} microseconds")
        self.console.print(f"- Average time per operation: {res['mean_us']:.3f} microseconds")
        self.show_stats()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="predictive-text",
        description="Predictive text system with trie-based autocomplete and learning",
    )
    parser.add_argument(
        "--mode",
        choices=("interactive", "demo", "benchmark"),
        default="interactive",
        help="interactive shell, quick demo or performance benchmark",
    )
    parser.add_argument("--config", default="config.json", help="JSON settings file")
    parser.add_argument("--model", help="model file for save/load (overrides config)")
    parser.add_argument("--seed", type=int, help="random seed for the benchmark")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--log-file", nargs="?", const=DEFAULT_LOG_PATH, help="also log to a file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    configure_logging(
        logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
        console=console,
    )

    cfg = Config(args.config)
    if args.model:
        cfg.data["model_path"] = args.model

    cli = CLI(cfg=cfg, console=console)
    if args.mode == "demo":
        cli.run_demo()
    elif args.mode == "benchmark":
        rng = random.Random(args.seed) if args.seed is not None else None
        cli.run_benchmark(rng)
    else:
        cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

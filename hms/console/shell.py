import sys
from typing import TextIO

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from hms.config import AppConfig
from hms.console.commands import CommandHandlers
from hms.records.registry import HospitalRegistry

MENU = {
    "1": "Add patient",
    "2": "Add doctor",
    "3": "Remove record by ID",
    "4": "Book appointment",
    "5": "Show doctor's appointments",
    "6": "Show record by ID",
    "7": "Refresh tables",
    "8": "Print summary",
    "q": "Quit",
}


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


class Shell:
    """Menu-driven front end that feeds user input into the command handlers.

    ``stream`` replaces stdin for every prompt when given.
    """

    def __init__(
        self,
        config: AppConfig,
        console: Console | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._config = config
        self._console = console or Console()
        self._stream = stream
        self._registry = HospitalRegistry.from_config(config)
        self._handlers = CommandHandlers(self._registry, self._console)

    def _ask(self, label: str) -> str:
        return Prompt.ask(
            label, console=self._console, default="", show_default=False, stream=self._stream
        )

    def _ask_gender(self) -> str:
        options = list(self._config.gender_options)
        return Prompt.ask(
            "Gender",
            console=self._console,
            choices=options,
            default=options[0],
            stream=self._stream,
        )

    def _confirm(self, question: str) -> bool:
        # The question carries the typed ID; prompts render their text as markup.
        return Confirm.ask(
            escape(question), console=self._console, default=False, stream=self._stream
        )

    def _show_menu(self) -> None:
        self._console.rule("Hospital Records")
        for key, label in MENU.items():
            self._console.print(f"  [bold]{key}[/bold]  {label}")

    def dispatch(self, choice: str) -> bool:
        """Run one menu action. Returns False when the user asked to quit."""
        if choice == "1":
            self._handlers.handle_add_patient(
                self._ask("Name"), self._ask("Age"), self._ask_gender(), self._ask("Illness")
            )
        elif choice == "2":
            self._handlers.handle_add_doctor(
                self._ask("Name"), self._ask("Age"), self._ask_gender(), self._ask("Specialty")
            )
        elif choice == "3":
            self._handlers.handle_remove(self._ask("ID to remove"), confirm=self._confirm)
        elif choice == "4":
            self._handlers.handle_book_appointment(
                self._ask("Patient ID"),
                self._ask("Doctor ID"),
                self._ask("Date"),
                self._ask("Time"),
            )
        elif choice == "5":
            self._handlers.handle_show_appointments(self._ask("Doctor ID"))
        elif choice == "6":
            self._handlers.handle_show_record(self._ask("Record ID"))
        elif choice == "7":
            self._handlers.handle_refresh()
        elif choice == "8":
            self._handlers.handle_summary()
        elif choice == "q":
            return False
        return True

    def run(self) -> None:
        logger.info("Starting hospital records shell")
        while True:
            self._show_menu()
            choice = Prompt.ask(
                "Choose", console=self._console, choices=list(MENU), stream=self._stream
            )
            if not self.dispatch(choice):
                break
        logger.info("Shell closed")


def main() -> None:
    config = AppConfig()
    configure_logging(config.log_level)
    try:
        Shell(config).run()
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted")


if __name__ == "__main__":
    main()

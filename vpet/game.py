import logging
import random
import time

from rich.console import Console
from rich.markup import escape

from .constants import ACTION_PAUSE_SECONDS, DEFAULT_PET_NAME
from .display import event_message, status_panel, title_banner
from .errors import StorageError, StorageFormatError, StorageNotFound, ValidationError
from .log import setup_logging
from .pet import Pet
from .storage import DeleteOutcome, PetStore

logger = logging.getLogger(__name__)

MAIN_MENU = "\n[bold]MAIN MENU[/bold]\n1. New Game\n2. Load Game\n3. Delete Save\n4. Exit"
GAME_MENU = (
    "\nWhat would you like to do?\n"
    "1. Feed pet    (*)\n"
    "2. Play with pet (^)\n"
    "3. Let pet sleep (z)\n"
    "4. Save game\n"
    "5. Delete save\n"
    "6. Return to main menu"
)


class Game:
    def __init__(self, console=None, store=None, rng=random, sleep=time.sleep):
        self.console = console or Console()
        self.store = store or PetStore()
        self.rng = rng
        self.sleep = sleep

    def _ask(self, prompt):
        try:
            return self.console.input(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            return None

    def _confirm(self, question):
        answer = self._ask(f"{question} (y/n) ")
        return answer is not None and answer.lower() == "y"

    def run(self):
        self.console.print(title_banner())
        while self.main_menu():
            pass
        self.console.print("[bold green]Thanks for playing! Goodbye! (^_^)/[/bold green]")

    def main_menu(self):
        """Show the main menu and handle one choice. Returns False on exit."""
        self.console.print(MAIN_MENU)
        choice = self._ask("Choose an option (1-4): ")
        if choice is None or choice == "4":
            return False
        if choice == "1":
            self.play_session(self.new_pet())
        elif choice == "2":
            pet = self.load_pet()
            if pet is not None:
                self.play_session(pet)
        elif choice == "3":
            name = self._ask("Enter the name of the pet save to delete: ")
            if name:
                self.delete_save(name)
        else:
            self.console.print("[red]Invalid option! Please try again.[/red]")
        return True

    def new_pet(self):
        name = self._ask("[bold cyan]Enter your pet's name: [/bold cyan]")
        try:
            pet = Pet(name or DEFAULT_PET_NAME)
        except ValidationError:
            pet = Pet(DEFAULT_PET_NAME)
        self.console.print(f"[bold green]Say hello to {escape(pet.name)}![/bold green]")
        return pet

    def load_pet(self):
        name = self._ask("Enter the name of your pet to load: ")
        if not name:
            return None
        try:
            pet = self.store.load(name)
        except StorageNotFound:
            self.console.print(f"[yellow]No save file found for pet named '{escape(name)}'[/yellow]")
            return None
        except StorageFormatError as e:
            logger.warning("%s", e)
            self.console.print(f"[bold red]Save file for '{escape(name)}' is corrupt and was not loaded.[/bold red]")
            return None
        except (StorageError, ValidationError) as e:
            logger.warning("%s", e)
            self.console.print(f"[bold red]Error loading game:[/bold red] {escape(str(e))}")
            return None
        self.console.print("[bold green]Game loaded successfully![/bold green]")
        return pet

    def save(self, pet):
        try:
            self.store.save(pet)
        except (StorageError, ValidationError) as e:
            logger.warning("%s", e)
            self.console.print(f"[bold red]Error saving game:[/bold red] {escape(str(e))}")
            return False
        self.console.print("[bold green]Game saved successfully![/bold green]")
        return True

    def delete_save(self, name):
        if not self._confirm(f"Are you sure you want to delete the save file for {escape(name)}?"):
            return None
        try:
            outcome = self.store.delete(name)
        except (StorageError, ValidationError) as e:
            logger.warning("%s", e)
            self.console.print(f"[bold red]Error deleting save file:[/bold red] {escape(str(e))}")
            return None
        if outcome is DeleteOutcome.DELETED:
            self.console.print(f"[green]Save file for {escape(name)} deleted successfully![/green]")
        else:
            self.console.print(f"[yellow]No save file exists for {escape(name)}[/yellow]")
        return outcome

    def play_session(self, pet):
        while self.game_turn(pet):
            pass

    def game_turn(self, pet):
        """One status cycle: show status, roll an event, handle a choice. Returns False to leave."""
        self.console.print(status_panel(pet))
        event = pet.random_event(self.rng)
        if event is not None:
            self.console.print(f"\n[magenta]{escape(event_message(pet, event))}[/magenta]")

        self.console.print(GAME_MENU)
        choice = self._ask("Choose an option (1-6): ")
        if choice is None or choice == "6":
            return False

        if choice == "1":
            self.console.print(f"(*) Feeding {escape(pet.name)}...")
            self._report(*pet.feed())
        elif choice == "2":
            self._report(*pet.play())
        elif choice == "3":
            self.console.print(f"(~) {escape(pet.name)} is taking a nap...")
            self._report(*pet.rest(self.sleep))
        elif choice == "4":
            self.save(pet)
        elif choice == "5":
            self.delete_save(pet.name)
        else:
            self.console.print("[red]Invalid option! Please try again.[/red]")

        self.sleep(ACTION_PAUSE_SECONDS)
        return True

    def _report(self, message, performed):
        style = "green" if performed else "yellow"
        self.console.print(f"[{style}]{escape(message)}[/{style}]")


def main():
    console = Console()
    setup_logging(console)
    Game(console=console).run()

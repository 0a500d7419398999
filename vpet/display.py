from rich.align import Align
from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TextColumn
from rich.text import Text

from .constants import ATTRIBUTE_MAX, BAR_HIGH_THRESHOLD, BAR_LOW_THRESHOLD

TITLE_ART = "VIRTUAL PET GAME\n\n╭━━━━\n┃^ω^┃\n╰━━━━"


def stat_bar(label, value, reverse_colors=False, low_threshold=BAR_LOW_THRESHOLD, high_threshold=BAR_HIGH_THRESHOLD):
    # Values outside the bounds only come from hand-edited save files
    completed = max(0, min(ATTRIBUTE_MAX, value))
    progress = Progress(
        TextColumn(f"{label}:{' ' * (10 - len(label))}"),
        BarColumn(bar_width=20),
        TextColumn(f"({value})"),
    )
    low_color, high_color = ("green", "red") if reverse_colors else ("red", "green")
    style = "yellow"
    if completed <= low_threshold:
        style = low_color
    elif completed >= high_threshold:
        style = high_color
    task_id = progress.add_task(label.lower(), total=ATTRIBUTE_MAX, completed=completed)
    progress.update(task_id, style=style)
    return progress


def status_panel(pet):
    mood = pet.mood
    content = Group(
        stat_bar("Hunger", pet.hunger, reverse_colors=True),
        stat_bar("Happiness", pet.happiness),
        stat_bar("Energy", pet.energy),
        Text(f"Mood:      {mood}"),
    )
    return Panel(content, title=f"{escape(pet.name)}'s Status", border_style="blue")


def title_banner():
    return Panel(Align.center(TITLE_ART), border_style="cyan")


def event_message(pet, event):
    return f"(*) {pet.name} {event.description}"

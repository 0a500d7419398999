from enum import Enum

from .constants import (
    ECSTATIC_HAPPINESS,
    HANGRY_HUNGER,
    HAPPY_HAPPINESS,
    HAPPY_MAX_HUNGER,
    SAD_HAPPINESS,
)


class Mood(Enum):
    HANGRY = "Hangry"
    ECSTATIC = "Ecstatic"
    HAPPY = "Happy"
    SAD = "Sad"
    CONTENT = "Content"

    @property
    def label(self):
        return self.value

    @property
    def face(self):
        return MOOD_FACES[self]

    def __str__(self):
        return f"{self.face} {self.label}"


MOOD_FACES = {
    Mood.HANGRY: "(>_<)",
    Mood.ECSTATIC: "(*_*)",
    Mood.HAPPY: "(^_^)",
    Mood.SAD: "(;_;)",
    Mood.CONTENT: "(-_-)",
}


def classify_mood(happiness: int, hunger: int) -> Mood:
    """Map attributes to a mood. Rules are checked in order and the first match wins."""
    if hunger > HANGRY_HUNGER:
        return Mood.HANGRY
    if happiness > ECSTATIC_HAPPINESS:
        return Mood.ECSTATIC
    if happiness > HAPPY_HAPPINESS and hunger < HAPPY_MAX_HUNGER:
        return Mood.HAPPY
    if happiness < SAD_HAPPINESS:
        return Mood.SAD
    return Mood.CONTENT

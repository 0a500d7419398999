import logging
import random
import time

from .constants import (
    ATTRIBUTE_MAX,
    ATTRIBUTE_MIN,
    EVENT_CHANCE_DENOMINATOR,
    FEED_HAPPINESS_BOOST,
    FEED_HUNGER_DECREASE,
    INITIAL_ENERGY,
    INITIAL_HAPPINESS,
    INITIAL_HUNGER,
    PLAY_ENERGY_COST,
    PLAY_HAPPINESS_BOOST,
    PLAY_HUNGER_INCREASE,
    PLAY_MIN_ENERGY,
    REST_DELAY_SECONDS,
    REST_ENERGY,
    REST_HUNGER_INCREASE,
)
from .errors import StorageFormatError, ValidationError
from .events import RandomEvent
from .mood import Mood, classify_mood

logger = logging.getLogger(__name__)

ATTRIBUTES = ("hunger", "happiness", "energy")
RECORD_FIELDS = ("name",) + ATTRIBUTES


def clamp(value):
    return max(ATTRIBUTE_MIN, min(ATTRIBUTE_MAX, value))


class Pet:
    def __init__(self, name: str):
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("A pet needs a non-empty name")
        self._name = name
        self._hunger = INITIAL_HUNGER
        self._happiness = INITIAL_HAPPINESS
        self._energy = INITIAL_ENERGY

    def __repr__(self):
        return f"Pet(name={self._name!r}, hunger={self._hunger}, happiness={self._happiness}, energy={self._energy})"

    @property
    def name(self):
        return self._name

    @property
    def hunger(self):
        return self._hunger

    @property
    def happiness(self):
        return self._happiness

    @property
    def energy(self):
        return self._energy

    @property
    def mood(self) -> Mood:
        return classify_mood(self._happiness, self._hunger)

    def _adjust(self, attribute, delta):
        self._set(attribute, getattr(self, attribute) + delta)

    def _set(self, attribute, value):
        if attribute not in ATTRIBUTES:
            raise AttributeError(f"Unknown attribute: {attribute}")
        setattr(self, f"_{attribute}", clamp(value))

    # --- Actions ---
    def feed(self):
        self._adjust("hunger", -FEED_HUNGER_DECREASE)
        self._adjust("happiness", FEED_HAPPINESS_BOOST)
        logger.debug("Fed %s: %r", self._name, self)
        return f"Yum! {self._name} looks satisfied!", True

    def play(self):
        if self._energy < PLAY_MIN_ENERGY:
            logger.debug("%s refused to play (energy %d)", self._name, self._energy)
            return f"{self._name} is too tired to play!", False
        self._adjust("happiness", PLAY_HAPPINESS_BOOST)
        self._adjust("energy", -PLAY_ENERGY_COST)
        self._adjust("hunger", PLAY_HUNGER_INCREASE)
        logger.debug("Played with %s: %r", self._name, self)
        return f"{self._name} had fun playing!", True

    def rest(self, sleep=time.sleep):
        """Nap for REST_DELAY_SECONDS, then wake with full energy and a little hungrier.

        ``sleep`` is called once with the delay; pass a no-op to skip the wait.
        """
        sleep(REST_DELAY_SECONDS)
        self._set("energy", REST_ENERGY)
        self._adjust("hunger", REST_HUNGER_INCREASE)
        logger.debug("%s rested: %r", self._name, self)
        return f"{self._name} wakes up feeling refreshed!", True

    def random_event(self, rng=random):
        """Roll for a random event once per status cycle.

        The trigger (1 in EVENT_CHANCE_DENOMINATOR) and the choice of event are
        separate draws from ``rng``. Returns the applied event, or None.
        """
        if rng.randrange(EVENT_CHANCE_DENOMINATOR) != 0:
            return None
        event = rng.choice(list(RandomEvent))
        event.apply(self)
        logger.debug("Random event for %s: %s", self._name, event.name)
        return event

    # --- Records ---
    def to_dict(self):
        return {"name": self._name, "hunger": self._hunger, "happiness": self._happiness, "energy": self._energy}

    @classmethod
    def from_dict(cls, data):
        """Rebuild a pet from a saved record. Values are taken as-is, without clamping."""
        if not isinstance(data, dict):
            raise StorageFormatError(None, f"expected an object, got {type(data).__name__}")
        name = data.get("name")
        missing = [field for field in RECORD_FIELDS if field not in data]
        if missing:
            raise StorageFormatError(name, f"missing field(s): {', '.join(missing)}")
        if not isinstance(name, str) or not name.strip():
            raise StorageFormatError(name, "'name' must be a non-empty string")
        for attribute in ATTRIBUTES:
            value = data[attribute]
            # bool is an int subclass but never a valid attribute
            if not isinstance(value, int) or isinstance(value, bool):
                raise StorageFormatError(name, f"'{attribute}' must be an integer, got {value!r}")
        pet = cls(name)
        pet._hunger = data["hunger"]
        pet._happiness = data["happiness"]
        pet._energy = data["energy"]
        return pet

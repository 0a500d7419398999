from enum import Enum


class RandomEvent(Enum):
    # (description, ((attribute, delta), ...))
    TREAT = ("found a treat! (+10 happiness)", (("happiness", 10),))
    EXERCISE = ("did some exercise! (-10 energy, +5 happiness)", (("energy", -10), ("happiness", 5)))
    NAP = ("took a quick nap! (+20 energy)", (("energy", 20),))

    def __init__(self, description, effects):
        self.description = description
        self.effects = effects

    def apply(self, pet):
        for attribute, delta in self.effects:
            pet._adjust(attribute, delta)

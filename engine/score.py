"""Score keeping for Hunter Chase."""

from models.events import GameNotification, Score


class ScoreKeeper:
    """Counts chasers added and times the hunter was caught."""

    def __init__(self) -> None:
        self.chasers_added = 0
        self.times_caught = 0

    def notify(self, notification: GameNotification) -> None:
        if notification == GameNotification.CAUGHT:
            self.times_caught += 1
        elif notification == GameNotification.CHASER_ADDED:
            self.chasers_added += 1

    def score(self) -> Score:
        return Score(chasers_added=self.chasers_added, times_caught=self.times_caught)

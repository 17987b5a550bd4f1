"""
Overworld map - points of interest visited before the maze opens
"""

import logging
import random

from maze.hints import OVERWORLD_GOOD_HINTS, OVERWORLD_BAD_HINTS

logger = logging.getLogger(__name__)


class Feature:
    """Named place on the kingdom map"""
    def __init__(self, name, coords):
        self.name = name
        self.coords = coords

    def __repr__(self):
        return f"Feature({self.name!r})"


HOME_CASTLE = "Kaamelott"

KINGDOM_FEATURES = [
    Feature(HOME_CASTLE, (200, 200)),
    Feature("Castle of the Villain", (400, 450)),
    Feature("Lost", (500, 300)),
    Feature("Beggars' Hamlet", (450, 380)),
    Feature("Stonehenge", (420, 280)),
    Feature("Tavern", (320, 350)),
    Feature("Merlin's Dolmen", (520, 220)),
    Feature("Land of the Broutche", (350, 360)),
]

ENTRANCE_COORDS = (500, 200)


class Marker:
    """A selected feature with its hidden verdict"""
    def __init__(self, feature, is_good):
        self.feature = feature
        self.is_good = is_good
        self.visited = False

    def __repr__(self):
        return f"Marker({self.feature.name!r}, visited={self.visited})"


class Overworld:
    """
    Kingdom map shown before the maze

    A few random features get a marker; visiting every marker unlocks the
    maze entrance
    """
    def __init__(self, rng=None, marker_count=3, features=None):
        self.rng = rng or random
        self.marker_count = marker_count
        self.features = features or KINGDOM_FEATURES
        self.markers = []
        self.visited_count = 0
        self.reset()

    def reset(self):
        """Pick a fresh set of markers"""
        available = [f for f in self.features if f.name != HOME_CASTLE]
        picked = self.rng.sample(available, min(self.marker_count, len(available)))
        self.markers = [Marker(f, self.rng.random() < 0.5) for f in picked]
        self.visited_count = 0

    def visit(self, index):
        """
        Visit a marker

        Args:
            index: Marker index

        Returns:
            "<feature>: <hint>" the first time, None for revisits
        """
        marker = self.markers[index]
        if marker.visited:
            return None
        marker.visited = True
        self.visited_count += 1

        pool = OVERWORLD_GOOD_HINTS if marker.is_good else OVERWORLD_BAD_HINTS
        hint = self.rng.choice(pool)
        logger.debug("visited %s (%d/%d)", marker.feature.name, self.visited_count, len(self.markers))
        return f"{marker.feature.name}: {hint}"

    @property
    def entrance_open(self):
        return bool(self.markers) and self.visited_count >= len(self.markers)

"""
Flavor text pools for waypoints, the treasure and the overworld
"""

GOOD_HINTS = [
    "By my mangy beard! Even a mule would go this way, keep on!",
    "Your peasant instinct does not lie, march on!",
    "The treasure snores not far from here, get moving, marauder!",
    "You are on the right dung heap, hurry before it cools down!",
    "My mouldy toes are tingling, the treasure is close!",
]

BAD_HINTS = [
    "Brilliant. Into a dead end with all the grace of a drunken goat.",
    "This path? Perfect... if you wanted to die foolish and forgotten.",
    "Ah, the art of being wrong with confidence. A fine demonstration.",
    "That way? Certainly, if you dream of staring at walls.",
    "This passage leads nowhere. Much like your ambitions.",
]

OVERWORLD_GOOD_HINTS = [
    "The innkeeper raises his tankard: 'Aye, brave beggar!'",
    "A shepherd nods, wool in the wind: 'Yes, good rascal.'",
    "By the king's dusty silken beard, that's a yes!",
    "Even a mule would go this way, keep on!",
    "The treasure snores not far from here, get moving, marauder!",
]

OVERWORLD_BAD_HINTS = [
    "This is the tavern door, drunkard, not the entrance to Maze'Lott!",
    "An old woman squints at you: 'Not here, noble marauder.'",
    "The smith growls, hammer in hand: 'No, go shoe your boots elsewhere!'",
    "This path? Perfect... if you wanted to die foolish and forgotten.",
    "Into a dead end with all the grace of a drunken goat.",
]

TREASURE_OFFER = "By all the saints! The treasure! Pocket it, scoundrel?"
TREASURE_TAKEN = "Treasure pocketed! Run for the exit before they hang you!"
TREASURE_LEFT = "You leave the treasure where it lies. Bold, or foolish."
VICTORY = "Mission accomplished, rascal!"
ENTRANCE_OPEN = "The entrance of the legendary Maze'Lott is now open! Click it to enter!"

STATUS_TREASURE_HELD = "Pocketed, by my faith!"
STATUS_TREASURE_HIDDEN = "Loot still hidden"
STATUS_WON = "Mission accomplished!"
STATUS_PLAYING = "Struggling"

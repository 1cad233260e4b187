"""
Built-in catalog shipped with the browser.

Order matters: the featured rail shows the first records as listed.
"""

from typing import Any

SAMPLE_GAMES: list[dict[str, Any]] = [
    {
        "id": "g1",
        "title": "Neon Runner",
        "category": "racing",
        "rating": 4.7,
        "plays": 12840,
        "difficulty": "Easy",
        "badges": ["New", "Hot"],
        "description": (
            "Dash through cyber-streets, drift neon corners, and chase "
            "milliseconds in a skill-first time-attack racer."
        ),
    },
    {
        "id": "g2",
        "title": "Quantum Blocks",
        "category": "puzzle",
        "rating": 4.5,
        "plays": 9021,
        "difficulty": "Medium",
        "badges": ["Editor Pick"],
        "description": (
            "A mind-bending grid puzzler where blocks entangle, collapse, and "
            "cascade. Think ahead or blink and lose."
        ),
    },
    {
        "id": "g3",
        "title": "Starforge Tactics",
        "category": "strategy",
        "rating": 4.8,
        "plays": 23105,
        "difficulty": "Hard",
        "badges": ["Ranked"],
        "description": (
            "Build, conquer, and outwit across a glittering sector. "
            "Multiplayer ladders, seasons, and replays."
        ),
    },
    {
        "id": "g4",
        "title": "Street Striker 2D",
        "category": "arcade",
        "rating": 4.2,
        "plays": 5012,
        "difficulty": "Easy",
        "badges": ["Retro"],
        "description": (
            "Pick-up-and-play brawler with crunchy hits, pixel art swagger, "
            "and couch co-op."
        ),
    },
    {
        "id": "g5",
        "title": "Goalverse '25",
        "category": "sports",
        "rating": 4.1,
        "plays": 7633,
        "difficulty": "Medium",
        "badges": ["Seasonal"],
        "description": "Arcade football distilled: fast matches, skill shots, and squad chemistry.",
    },
    {
        "id": "g6",
        "title": "Retro Rocket",
        "category": "retro",
        "rating": 4.9,
        "plays": 11002,
        "difficulty": "Hard",
        "badges": ["8-bit"],
        "description": "Vertical shmup love letter. Tight hitboxes, perfect patterns, pure flow.",
    },
]

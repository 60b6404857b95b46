from .catalog import FakeRecommender, add_look, add_user, add_wardrobe_item, save_look, seed_scenario_a
from .tokens import make_token

__all__ = [
    "FakeRecommender",
    "add_look",
    "add_user",
    "add_wardrobe_item",
    "make_token",
    "save_look",
    "seed_scenario_a",
]

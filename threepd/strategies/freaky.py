from .base import BaseStrategy
class Freaky(BaseStrategy):
    """Flips a coin at the start of the match, then always plays that move."""
    def reset(self):
        super().reset()
        self.move = self.rng.choice(["C", "D"])
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        return self.move

from .base import BaseStrategy
class RandomStrategy(BaseStrategy):
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        return self.rng.choice(["C", "D"])

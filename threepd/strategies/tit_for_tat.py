from .base import BaseStrategy
class TitForTat(BaseStrategy):
    """Copies the last move of one opponent, picked at random each round."""
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        if round_index == 0:
            return "C"
        target = opp1_history if self.rng.random() < 0.5 else opp2_history
        return target[-1]

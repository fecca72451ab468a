from .base import BaseStrategy
class AlwaysDefect(BaseStrategy):
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        return "D"

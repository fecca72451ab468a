from .base import BaseStrategy
class Tolerant(BaseStrategy):
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        seen = list(opp1_history) + list(opp2_history)
        return "D" if seen.count("D") > seen.count("C") else "C"

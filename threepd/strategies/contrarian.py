from .base import BaseStrategy
class Contrarian(BaseStrategy):
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        if round_index == 0:
            return "C"
        if "C" in (opp1_history[-1], opp2_history[-1]):
            return "D"
        return "C"

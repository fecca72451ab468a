from .base import BaseStrategy
class Cyclic(BaseStrategy):
    """Three-round cycle: cooperate, defect only if both opponents just did, defect."""
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        phase = round_index % 3
        if phase == 0:
            return "C"
        if phase == 1:
            return "D" if opp1_history[-1] == "D" and opp2_history[-1] == "D" else "C"
        return "D"

from .base import BaseStrategy
class Detective(BaseStrategy):
    """
    C, D, C, C opening. Afterwards defect only when both opponents defected last round.
    """
    OPENING = ("C", "D", "C", "C")
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        if round_index < len(self.OPENING):
            return self.OPENING[round_index]
        if opp1_history[-1] == "D" and opp2_history[-1] == "D":
            return "D"
        return "C"

from .base import BaseStrategy
class Pavlov(BaseStrategy):
    """Win-stay, lose-shift: keeps its move while the last payoff beat the threshold."""
    WIN_THRESHOLD = 3
    def reset(self):
        super().reset()
        self.last_move = "C"
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        if round_index == 0:
            self.last_move = "C"
            return self.last_move
        last = self.payoffs.payoff_for(my_history[-1], opp1_history[-1], opp2_history[-1])
        if last <= self.WIN_THRESHOLD:
            self.last_move = "D" if self.last_move == "C" else "C"
        return self.last_move

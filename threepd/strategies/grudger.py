from .base import BaseStrategy
class Grudger(BaseStrategy):
    def reset(self):
        super().reset()
        self.grudge = False
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        if "D" in opp1_history or "D" in opp2_history:
            self.grudge = True
        return "D" if self.grudge else "C"

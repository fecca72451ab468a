from .base import BaseStrategy
class MajorityRule(BaseStrategy):
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        if round_index == 0:
            return "C"
        defections = (opp1_history[-1], opp2_history[-1]).count("D")
        if defections == 2:
            return "D"
        if defections == 1:
            return self.rng.choice(["C", "D"])
        return "C"

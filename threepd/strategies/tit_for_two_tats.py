from .base import BaseStrategy
class TitForTwoTats(BaseStrategy):
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        if round_index < 2:
            return "C"
        for opp in (opp1_history, opp2_history):
            if opp[-1] == "D" and opp[-2] == "D":
                return "D"
        return "C"

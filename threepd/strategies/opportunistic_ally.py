from .base import BaseStrategy
class OpportunisticAlly(BaseStrategy):
    """Mirrors whichever opponent has cooperated more, coin flip on a tie."""
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        if round_index == 0:
            return "C"
        coop1 = opp1_history.count("C")
        coop2 = opp2_history.count("C")
        if coop1 > coop2:
            return opp1_history[-1]
        if coop2 > coop1:
            return opp2_history[-1]
        return self.rng.choice([opp1_history[-1], opp2_history[-1]])

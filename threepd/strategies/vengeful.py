from .base import BaseStrategy
class Vengeful(BaseStrategy):
    """Answers any defection with three rounds of defection, then forgives."""
    PERIOD = 3
    def reset(self):
        super().reset()
        self.vengeful = False
        self.counter = 0
    def decide(self, round_index, my_history, opp1_history, opp2_history):
        if round_index == 0:
            return "C"
        if not self.vengeful:
            if opp1_history[-1] == "D" or opp2_history[-1] == "D":
                self.vengeful = True
                self.counter = self.PERIOD
            return "C"
        if self.counter > 0:
            self.counter -= 1
            return "D"
        self.vengeful = False
        return "C"

from .base import BaseStrategy
from .always_cooperate import AlwaysCooperate
from .always_defect import AlwaysDefect
from .random_strategy import RandomStrategy
from .tolerant import Tolerant
from .freaky import Freaky
from .tit_for_tat import TitForTat
from .tit_for_two_tats import TitForTwoTats
from .grudger import Grudger
from .vengeful import Vengeful
from .pavlov import Pavlov
from .majority_rule import MajorityRule
from .detective import Detective
from .contrarian import Contrarian
from .cyclic import Cyclic
from .opportunistic_ally import OpportunisticAlly

ALL_STRATEGIES = [
    AlwaysCooperate,
    AlwaysDefect,
    RandomStrategy,
    Tolerant,
    Freaky,
    TitForTat,
    TitForTwoTats,
    Grudger,
    Vengeful,
    Pavlov,
    MajorityRule,
    Detective,
    Contrarian,
    Cyclic,
    OpportunisticAlly,
]

"""Five-fold ministry role profiling: questionnaire scoring and team analysis."""

from .engine.aggregation import TeamRoleDistribution, aggregate
from .engine.classifier import Profile, classify
from .engine.compatibility import distance, normalized_distance
from .engine.scoring import RoleScoreVector, accumulate, normalize
from .engine.team_balance import GapEntry, analyze_gaps, balance_score
from .errors import InvalidPositionError, MismatchedQuestionError, ScoringError, UnknownQuestionError
from .question_models import Answer, Question, QuestionBank, Statement
from .question_repository import QuestionBankRepository, load_default_bank
from .roles import ROLE_ORDER, Role

__all__ = [
    "ROLE_ORDER",
    "Answer",
    "GapEntry",
    "InvalidPositionError",
    "MismatchedQuestionError",
    "Profile",
    "Question",
    "QuestionBank",
    "QuestionBankRepository",
    "Role",
    "RoleScoreVector",
    "ScoringError",
    "Statement",
    "TeamRoleDistribution",
    "UnknownQuestionError",
    "accumulate",
    "aggregate",
    "analyze_gaps",
    "balance_score",
    "classify",
    "distance",
    "load_default_bank",
    "normalize",
    "normalized_distance",
]

"""Input clients for forma."""

from .questionnaire import ConstraintsQuestionnaire

__all__ = ["ConstraintsQuestionnaire"]

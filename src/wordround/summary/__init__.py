"""Summary and round breakdown screens."""

from wordround.summary.ordinal import as_ordinal
from wordround.summary.choices import ChoiceClass, ChoiceLabel, label_choice, label_choices
from wordround.summary.aggregate import RoundSummary, summarize_rounds, category_title
from wordround.summary.rich_display import RichSummaryDisplay
from wordround.summary.display import PlainSummaryRenderer
from wordround.summary.screen import SummaryScreen, SummaryConfig, Screen

__all__ = [
    "as_ordinal",
    "ChoiceClass",
    "ChoiceLabel",
    "label_choice",
    "label_choices",
    "RoundSummary",
    "summarize_rounds",
    "category_title",
    "RichSummaryDisplay",
    "PlainSummaryRenderer",
    "SummaryScreen",
    "SummaryConfig",
    "Screen",
]

from card_ssr.schemas.answer import AnswerError, AnswerOk, parse_answer
from card_ssr.schemas.card import Card, CardMeta

__all__ = [
    "AnswerError",
    "AnswerOk",
    "Card",
    "CardMeta",
    "parse_answer",
]

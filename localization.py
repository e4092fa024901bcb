"""
Built-in string tables for the strings the engine and the API emit.

Only question templates, category names and quiz feedback live here; the
client ships its own catalogue for everything on screen.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

logger = logging.getLogger("math-quest.localization")

FALLBACK_LANGUAGE = "en"

STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        "Question_Algebra": "If y = {0}x + {1} and y = {2}, what is x?",
        "Question_WordProblem": "You have {0} apples and eat {1}. How many left?",
        "Question_Graph": "Line through ({0},{1}) and ({2},{3}). What is the slope?",
        "CheerMessages": "Great!|Awesome!|You rock!|Math star!|Super!|Brilliant!|Yes!|Keep going!",
        "Category_Addition": "Addition",
        "Category_Subtraction": "Subtraction",
        "Category_Division": "Division",
        "Category_Multiplication": "Multiplication",
        "Category_Algebra": "Algebra",
        "Category_ProblemSolving": "Problem Solving",
        "Category_Graphs": "Graphs",
        "Alert_NameRequired_Message": "Please enter a name to begin your quest.",
        "Quiz_EnterAnswer_Message": "Please enter an answer",
        "Quiz_Answer": "Answer: {0}",
        "Quiz_Finished_Message": "You answered {0} / {1}! Points total: {2}",
    },
    "sv": {
        "Question_Algebra": "Om y = {0}x + {1} och y = {2}, vad är x?",
        "Question_WordProblem": "Du har {0} äpplen och äter {1}. Hur många blir kvar?",
        "Question_Graph": "Linje genom ({0},{1}) och ({2},{3}). Vad är lutningen?",
        "CheerMessages": "Bra!|Grymt!|Du är bäst!|Mattestjärna!|Super!|Briljant!|Yes!|Fortsätt!",
        "Category_Addition": "Addition",
        "Category_Subtraction": "Subtraktion",
        "Category_Division": "Division",
        "Category_Multiplication": "Multiplikation",
        "Category_Algebra": "Algebra",
        "Category_ProblemSolving": "Problemlösning",
        "Category_Graphs": "Grafer",
        "Alert_NameRequired_Message": "Ange ett namn för att starta.",
        "Quiz_EnterAnswer_Message": "Ange ett svar",
        "Quiz_Answer": "Svar: {0}",
        "Quiz_Finished_Message": "Du svarade {0} / {1}! Totalt: {2}",
    },
}

def _two_letter(tag: str) -> str:
    # "sv-SE" / "sv_SE" -> "sv"
    return tag.replace("_", "-").split("-", 1)[0].strip().lower()


class Localizer:
    def __init__(self, language: str = ""):
        self._language = language or ""
        self._listeners: List[Callable[[], None]] = []

    @property
    def language(self) -> str:
        return self._language

    @property
    def active_language(self) -> str:
        """Two-letter code actually used for lookups."""
        return _two_letter(self._language) or FALLBACK_LANGUAGE

    def set_language(self, tag: str) -> None:
        tag = (tag or "").strip()
        if tag and _two_letter(tag) not in STRINGS:
            logger.info("Unsupported language %r, English strings will be used", tag)
        self._language = tag
        for callback in list(self._listeners):
            callback()

    def on_language_changed(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register ``callback``; returns a function that unregisters it."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def lookup(self, key: str) -> str:
        table = STRINGS.get(self.active_language, {})
        if key in table:
            return table[key]
        return STRINGS[FALLBACK_LANGUAGE].get(key, key)

    def get(self, key: str, *args) -> str:
        fmt = self.lookup(key)
        return fmt.format(*args) if args else fmt

    def cheer_messages(self) -> List[str]:
        return [m for m in self.lookup("CheerMessages").split("|") if m]

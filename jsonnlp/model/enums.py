"""
Vocabulary — Well-known values for open string fields.

The schema stores these fields as plain strings so producers may use
tag sets we do not know about. The enums below name the common values.
"""

from enum import Enum


class SentenceType(str, Enum):
    """Illocutionary type of a sentence (Sentence.type)."""

    DECLARATIVE = "declarative"
    INTERROGATIVE = "interrogative"
    EXCLAMATIVE = "exclamative"
    IMPERATIVE = "imperative"


class DependencyStyle(str, Enum):
    """Annotation scheme of a dependency tree (DependencyTree.style)."""

    UNIVERSAL = "universal"        # Universal Dependencies
    ENHANCED = "enhanced"          # Enhanced UD
    STANFORD = "stanford"          # Stanford basic dependencies
    CONLL = "conll"


class TreeType(str, Enum):
    """Bracketing convention of a constituent parse (ConstituentParse.type)."""

    PENN = "penn"
    NEGRA = "negra"
    TIGER = "tiger"


class IOBTag(str, Enum):
    """Chunk position of a token inside a named entity (Token.entity_iob)."""

    BEGIN = "B"
    INSIDE = "I"
    OUTSIDE = "O"


class Voice(str, Enum):
    """Clause voice (Clause.voice)."""

    ACTIVE = "active"
    PASSIVE = "passive"
    MIDDLE = "middle"


class Mood(str, Enum):
    """Verbal mood (Clause.mood, Features.mood)."""

    INDICATIVE = "indicative"
    IMPERATIVE = "imperative"
    SUBJUNCTIVE = "subjunctive"
    CONDITIONAL = "conditional"


class Tense(str, Enum):
    """Tense (Clause.tense, Features.tense)."""

    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"

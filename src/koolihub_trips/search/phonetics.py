"""Phonetic normalisation for Indian place names.

Transliterations of the same town drift in predictable ways (Rayachoty and
Rayachoti, Tirupathi and Tirupati, Vizag and Visag). normalize_for_phonetics
folds those variants into one canonical spelling before comparison.
"""

import re

# Applied top to bottom, each rule sees the output of the previous one.
# Reordering changes results: suffixes are cut before "y" becomes "i", so
# "pally" is still recognised.
PHONETIC_RULES: list[tuple[re.Pattern[str], str]] = [
    # Variable suffixes: Hyderabad, Madhapur, Kukatpally
    (re.compile(r"puram$|pur$|bad$|abad$|nagar$|pally$|palli$"), ""),
    # Vowel spellings
    (re.compile(r"y"), "i"),  # Rayachoty -> Rayachoti
    (re.compile(r"ee"), "i"),  # Sree -> Sri
    (re.compile(r"oo"), "u"),  # Poona -> Puna
    (re.compile(r"aa"), "a"),  # Raampur -> Rampur
    # Aspirated consonants
    (re.compile(r"th"), "t"),  # Tirupathi -> Tirupati
    (re.compile(r"dh"), "d"),
    (re.compile(r"bh"), "b"),
    (re.compile(r"gh"), "g"),
    (re.compile(r"kh"), "k"),
    (re.compile(r"ph"), "f"),  # Phulera -> Fulera
    (re.compile(r"sh"), "s"),  # Shimla -> Simla
    (re.compile(r"ch"), "c"),
    # Consonant spellings
    (re.compile(r"w"), "v"),  # Vijayawada -> Vijayavada
    (re.compile(r"z"), "s"),  # Vizag -> Visag
    # Doubled letters: Kolkatta -> Kolkata
    (re.compile(r"(.)\1+"), r"\1"),
    # Silent final vowel
    (re.compile(r"[aeiou]$"), ""),
]


def normalize_for_phonetics(text: str) -> str:
    normalized = text.lower().strip()
    for pattern, replacement in PHONETIC_RULES:
        normalized = pattern.sub(replacement, normalized)
    return normalized

# predictive_text/context/tokenizer.py
# whitespace tokenizer shared by context prediction and training

import re

_non_alnum_re = re.compile(r"[^A-Za-z0-9]")


def split_into_words(s: str):
    """
    Return list of tokens (words).
    Splits on whitespace, drops every non-alphanumeric character inside a
    token ("don't" -> "dont"), and skips tokens left empty (pure punctuation).
    Case is kept; the Trie lowercases on insert.
    """
    if not s:
        return []
    out = []
    for t in s.split():
        t = _non_alnum_re.sub("", t)
        if t:
            out.append(t)
    return out
